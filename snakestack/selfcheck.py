"""Self-check of the position stack and the command queue."""

from __future__ import annotations

import argparse
import random
import string
import sys
from dataclasses import dataclass
from typing import Optional, Sequence, TextIO

from snakestack.cmdqueue import CommandQueue
from snakestack.objpos import ObjPos
from snakestack.stack import PosStack

COUNT = 10
LARGE_COUNT = 20
TOTAL_ASSERT_COUNT = 176
TOTAL_TEST_CASES = 7


@dataclass(frozen=True)
class CheckReport:
    """Numbers of passed assertions and passed test cases."""

    assertions: int
    cases: int
    total_assertions: int = TOTAL_ASSERT_COUNT
    total_cases: int = TOTAL_TEST_CASES

    @property
    def passed(self) -> bool:
        return self.assertions == self.total_assertions


class _Checker:
    def __init__(self, rng: random.Random, out: TextIO) -> None:
        self.rng = rng
        self.out = out
        self.successes = 0
        self.cases = 0

    def say(self, text: str) -> None:
        print(text, file=self.out)

    def equal(self, expected: object, actual: object) -> bool:
        if expected == actual:
            self.successes += 1
            return True
        if isinstance(expected, bool):
            shown = ("TRUE", "FALSE") if expected else ("FALSE", "TRUE")
            self.say(f"\t\t[ASSERTION] Expected: {shown[0]}, but Actual: {shown[1]}")
        elif isinstance(expected, str):
            self.say(f"\t\tExpected: {expected}, but Actual: {actual}")
        else:
            self.say(f"\t\t[ASSERTION] Expected: {expected}, but Actual: {actual}")
        return False

    def same_pos(self, expected: ObjPos, actual: ObjPos) -> bool:
        result = True
        result &= self.equal(expected.x, actual.x)
        result &= self.equal(expected.y, actual.y)
        result &= self.equal(expected.number, actual.number)
        result &= self.equal(expected.prefix, actual.prefix)
        result &= self.equal(expected.symbol, actual.symbol)
        return result

    def random_pos(self) -> ObjPos:
        pos = ObjPos(
            self.rng.randrange(100),
            self.rng.randrange(100),
            0,
            self.rng.choice(string.ascii_lowercase),
            self.rng.choice(string.ascii_uppercase),
        )
        pos.number = self.rng.randrange(500)
        return pos

    def random_char(self) -> str:
        if self.rng.randrange(2) == 0:
            return self.rng.choice(string.ascii_lowercase)
        return self.rng.choice(string.ascii_uppercase)

    def record(self, result: bool) -> None:
        if result:
            self.cases += 1


def _stack_constructor(check: _Checker) -> None:
    check.say("TEST: testConstructorGetSize")
    check.record(check.equal(0, len(PosStack(check.rng))))


def _stack_push_top(check: _Checker) -> None:
    check.say("TEST: testPushTenTop")
    stack = PosStack(check.rng)
    result = True
    for index in range(COUNT):
        expected = check.random_pos()
        stack.push(expected)
        actual = stack.top()
        check.say(f"\tItem {index}: {expected}")
        result &= check.same_pos(expected, actual)
        check.say(f"\tStack Size: {index + 1}")
        result &= check.equal(len(stack), index + 1)
    check.record(result)


def _stack_push_pop(check: _Checker) -> None:
    check.say("TEST: testPushTenPop")
    stack = PosStack(check.rng)
    items = [check.random_pos() for _ in range(COUNT)]
    for item in items:
        stack.push(item)
    check.say(f"\tStack Size before Pop: {len(stack)}")
    result = check.equal(len(stack), COUNT)
    for index, expected in reversed(list(enumerate(items))):
        actual = stack.pop()
        check.say(f"\tItem {index}: {expected}")
        result &= check.same_pos(expected, actual)
        check.say(f"\tStack Size: {index}")
        result &= check.equal(len(stack), index)
    check.record(result)


def _stack_random_sorted(check: _Checker) -> None:
    check.say("TEST: testRandomGenerationAndSort")
    stack = PosStack(check.rng)
    stack.populate_random_elements(LARGE_COUNT)
    result = True
    previous = stack.pop()
    for index in range(LARGE_COUNT - 1):
        current = stack.pop()
        check.say(f"\tItem {index},{index + 1}: \n\t{previous}\n\t{current}")
        in_order = previous.number // 10 <= current.number // 10
        result &= check.equal(in_order, True)
        previous = current
    check.record(result)


def _queue_constructor(check: _Checker) -> None:
    check.say("TEST: testQueueConstructorGetSize")
    check.record(check.equal(0, len(CommandQueue())))


def _queue_round_trip(check: _Checker, count: int) -> None:
    check.say("TEST: testEnqueueGetSize")
    queue = CommandQueue()
    items = [check.random_char() for _ in range(count)]
    for item in items:
        queue.enqueue(item)
    check.say(f"\tQueue Size before Dequeue: {len(queue)}")
    result = check.equal(len(queue), count)
    for index, item in enumerate(items):
        got = queue.dequeue()
        check.say(f"\tItem{index}: ({got}, {item})")
        result &= check.equal(got, item)
    check.say(f"\tQueue Size after Dequeue: {len(queue)}")
    result &= check.equal(len(queue), 0)
    check.record(result)


def run_all_checks(
    rng: Optional[random.Random] = None, out: Optional[TextIO] = None
) -> CheckReport:
    """Run every stack and queue check, writing progress to ``out``."""
    check = _Checker(rng if rng is not None else random.Random(), out or sys.stdout)

    check.say("[STACK TESTER STARTED]")
    _stack_constructor(check)
    _stack_push_top(check)
    _stack_push_pop(check)
    _stack_random_sorted(check)
    check.say("[STACK TESTER ENDED]\n")

    check.say("[QUEUE TESTER STARTED]")
    _queue_constructor(check)
    _queue_round_trip(check, COUNT)
    _queue_round_trip(check, LARGE_COUNT)
    check.say("[QUEUE TESTER ENDED]\n")

    return CheckReport(check.successes, check.cases)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Check the stack and queue.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    report = run_all_checks(random.Random(args.seed))
    if report.passed:
        print("\nPassed All Tests")
    else:
        print("Failed Tests, Check Failure")
    print(f"Assertion Score: {report.assertions} / {report.total_assertions}")
    print(f"Test Case Score: {report.cases} / {report.total_cases}")
    return 0 if report.passed else 1


if __name__ == "__main__":
    sys.exit(main())