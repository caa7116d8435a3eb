import io
import random

import pytest

from snakestack.selfcheck import CheckReport, main, run_all_checks


@pytest.mark.parametrize("seed", [0, 1, 42])
def test_all_checks_pass(seed):
    report = run_all_checks(random.Random(seed), io.StringIO())
    assert report.assertions == 176
    assert report.cases == 7
    assert report.passed is True


def test_progress_is_written():
    out = io.StringIO()
    run_all_checks(random.Random(5), out)
    text = out.getvalue()
    assert "[STACK TESTER STARTED]" in text
    assert "[QUEUE TESTER ENDED]" in text
    assert "TEST: testPushTenPop" in text
    assert "Expected:" not in text


def test_report_fails_when_assertions_missing():
    report = CheckReport(assertions=175, cases=7)
    assert report.passed is False
    assert report.total_assertions == 176


def test_main_prints_scores(capsys):
    assert main(["--seed", "3"]) == 0
    captured = capsys.readouterr().out
    assert "Passed All Tests" in captured
    assert "Assertion Score: 176 / 176" in captured
    assert "Test Case Score: 7 / 7" in captured