import random

import pytest

from snakestack.objpos import ObjPos
from snakestack.stack import EmptyStackError, PosStack

COUNT = 10
LARGE_COUNT = 20


def _random_pos(rng):
    return ObjPos(
        rng.randrange(100),
        rng.randrange(100),
        rng.randrange(500),
        chr(rng.randrange(26) + ord("a")),
        chr(rng.randrange(26) + ord("A")),
    )


def test_new_stack_is_empty():
    assert len(PosStack(random.Random(1))) == 0


def test_push_ten_top():
    rng = random.Random(3)
    stack = PosStack(rng)
    for i in range(COUNT):
        item = _random_pos(rng)
        stack.push(item)
        assert stack.top() == item
        assert len(stack) == i + 1


def test_push_ten_pop():
    rng = random.Random(4)
    stack = PosStack(rng)
    items = [_random_pos(rng) for _ in range(COUNT)]
    for item in items:
        stack.push(item)
    assert len(stack) == COUNT
    for remaining, expected in reversed(list(enumerate(items))):
        assert stack.pop() == expected
        assert len(stack) == remaining


def test_push_stores_a_copy():
    stack = PosStack(random.Random(0))
    item = ObjPos(1, 2, 3, "a", "B")
    stack.push(item)
    item.x = 50
    assert stack.top().x == 1


def test_pop_empty_raises():
    with pytest.raises(EmptyStackError):
        PosStack(random.Random(0)).pop()


def test_top_empty_raises():
    with pytest.raises(EmptyStackError):
        PosStack(random.Random(0)).top()


def test_empty_stack_error_is_index_error():
    with pytest.raises(IndexError):
        PosStack(random.Random(0)).pop()


def test_populate_twenty_sorted_by_tens():
    stack = PosStack(random.Random(11))
    stack.populate_random_elements(LARGE_COUNT)
    assert len(stack) == LARGE_COUNT
    popped = [stack.pop() for _ in range(LARGE_COUNT)]
    tens = [pos.number // 10 for pos in popped]
    assert tens == sorted(tens)


def test_populate_generates_items_in_range():
    stack = PosStack(random.Random(5))
    stack.populate_random_elements(LARGE_COUNT)
    for _ in range(LARGE_COUNT):
        pos = stack.pop()
        assert 1 <= pos.x <= 28
        assert 1 <= pos.y <= 12
        assert pos.number == 1
        assert pos.symbol == "*"
        assert pos.prefix.isalpha() and len(pos.prefix) == 1


def test_populate_is_deterministic_for_seed():
    first = PosStack(random.Random(42))
    second = PosStack(random.Random(42))
    first.populate_random_elements(LARGE_COUNT)
    second.populate_random_elements(LARGE_COUNT)
    assert [first.pop() for _ in range(LARGE_COUNT)] == [
        second.pop() for _ in range(LARGE_COUNT)
    ]


def test_populate_sorts_existing_items():
    stack = PosStack(random.Random(0))
    high = ObjPos(1, 1, 95, "a", "A")
    low = ObjPos(2, 2, 10, "b", "B")
    middle = ObjPos(3, 3, 42, "c", "C")
    for item in (high, low, middle):
        stack.push(item)
    stack.populate_random_elements(0)
    assert [stack.pop() for _ in range(3)] == [low, middle, high]


def test_sort_keeps_order_of_equal_tens():
    stack = PosStack(random.Random(0))
    first = ObjPos(1, 1, 21, "a", "A")
    second = ObjPos(2, 2, 25, "b", "B")
    stack.push(first)
    stack.push(second)
    stack.populate_random_elements(0)
    assert [stack.pop(), stack.pop()] == [second, first]


def test_str_lists_contents():
    stack = PosStack(random.Random(0))
    stack.push(ObjPos(4, 5, 6, "p", "Q"))
    text = str(stack)
    assert text.startswith("List Contains:")
    assert str(ObjPos(4, 5, 6, "p", "Q")) in text
    assert text.endswith("END OF LIST")