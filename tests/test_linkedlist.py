"""Tests for the list structure and its splice/unlink primitives."""

import random

import pytest

from cursorlist import CursorList, Guard, GuardBoundaryError, InvalidPositionError


def walk_backward(lst: CursorList[str]) -> list[str]:
    """Collect payloads by following prev links from the back guard."""
    lst.end()
    lst.backward()
    collected = []
    while not lst.at_guard:
        collected.append(lst.get())
        lst.backward()
    collected.reverse()
    return collected


def test_empty_list() -> None:
    """Test empty list behavior."""
    lst = CursorList[str]()
    assert len(lst) == 0
    assert not lst
    assert lst.is_empty()
    assert lst.cursor is Guard.FRONT
    assert lst.forward_mark is Guard.FRONT
    assert lst.backward_mark is Guard.BACK
    assert str(lst) == "[]"
    assert list(lst.values()) == []


def test_initial_values() -> None:
    """Test seeding a list from an iterable."""
    lst = CursorList("abc")
    assert list(lst.values()) == ["a", "b", "c"]
    assert len(lst) == 3
    assert lst.get() == "c"


def test_append() -> None:
    """Test appending values."""
    lst = CursorList[str]()
    lst.append("a")
    assert len(lst) == 1
    assert bool(lst)
    assert lst.get() == "a"

    lst.append("b")
    lst.append("c")
    assert list(lst.values()) == ["a", "b", "c"]
    assert lst.get() == "c"
    assert walk_backward(lst) == ["a", "b", "c"]


def test_prepend() -> None:
    """Test prepending values."""
    lst = CursorList[str]()
    lst.prepend("c")
    lst.prepend("d")

    assert list(lst.values()) == ["d", "c"]
    assert walk_backward(lst) == ["d", "c"]


def test_marks_follow_ends() -> None:
    """Test that the traversal marks track the first and last nodes."""
    lst = CursorList[str]()
    lst.append("b")
    only = lst.cursor
    assert lst.forward_mark == only
    assert lst.backward_mark == only

    lst.append("c")
    last = lst.cursor
    assert lst.forward_mark == only
    assert lst.backward_mark == last

    lst.prepend("a")
    assert lst.forward_mark == lst.cursor
    assert lst.backward_mark == last


def test_marks_after_prepend_on_empty() -> None:
    """Test that prepend on an empty list sets both marks."""
    lst = CursorList[str]()
    lst.prepend("a")
    assert lst.forward_mark == lst.cursor
    assert lst.backward_mark == lst.cursor


def test_insert_before_and_after() -> None:
    """Test the splice primitives."""
    lst = CursorList(["a", "c"])
    a, c = lst.positions()

    b = lst.insert_before(c, "b")
    assert lst.cursor == b
    assert list(lst.values()) == ["a", "b", "c"]

    x = lst.insert_after(a, "x")
    assert lst.cursor == x
    assert list(lst.values()) == ["a", "x", "b", "c"]

    lst.insert_after(Guard.FRONT, "first")
    lst.insert_before(Guard.BACK, "last")
    assert list(lst.values()) == ["first", "a", "x", "b", "c", "last"]
    assert walk_backward(lst) == ["first", "a", "x", "b", "c", "last"]


def test_guard_insertions_rejected() -> None:
    """Test that nothing can be placed outside the guards."""
    lst = CursorList(["a", "b"])
    before = str(lst)
    cursor = lst.cursor

    with pytest.raises(GuardBoundaryError):
        lst.insert_before(Guard.FRONT, "z")
    with pytest.raises(GuardBoundaryError):
        lst.insert_after(Guard.BACK, "z")

    assert str(lst) == before
    assert len(lst) == 2
    assert lst.cursor == cursor
    assert walk_backward(lst) == ["a", "b"]


def test_guard_insertions_rejected_on_empty_list() -> None:
    """Test guard rejection leaves an empty list empty."""
    lst = CursorList[str]()
    with pytest.raises(GuardBoundaryError):
        lst.insert_before(Guard.FRONT, "z")
    with pytest.raises(GuardBoundaryError):
        lst.insert_after(Guard.BACK, "z")
    assert str(lst) == "[]"
    assert lst.is_empty()


def test_insert_at_released_position() -> None:
    """Test that a released index cannot be used as a target."""
    lst = CursorList(["a"])
    b = lst.insert_after(Guard.FRONT, "b")
    lst.remove_at(b)

    with pytest.raises(InvalidPositionError):
        lst.insert_before(b, "z")
    with pytest.raises(InvalidPositionError):
        lst.remove_at(b)
    assert list(lst.values()) == ["a"]


def test_remove_at_guard() -> None:
    """Test that guards are never removed."""
    lst = CursorList(["a"])
    assert lst.remove_at(Guard.FRONT) is None
    assert lst.remove_at(Guard.BACK) is None
    assert list(lst.values()) == ["a"]


def test_remove_at() -> None:
    """Test unlinking nodes from the middle and the front."""
    lst = CursorList("abc")
    a, b, c = lst.positions()

    assert lst.remove_at(b) == "b"
    assert lst.cursor == a
    assert list(lst.values()) == ["a", "c"]

    assert lst.remove_at(a) == "a"
    assert lst.cursor is Guard.FRONT
    assert lst.forward_mark == c
    assert walk_backward(lst) == ["c"]

    assert lst.remove_at(c) == "c"
    assert lst.is_empty()
    assert len(lst) == 0


def test_remove_last_moves_backward_mark() -> None:
    """Test that removing the last node steps the backward mark inward."""
    lst = CursorList("abc")
    a, b, c = lst.positions()

    lst.remove_at(c)
    assert lst.backward_mark == b
    assert lst.cursor == b


def test_str_and_repr() -> None:
    """Test non-destructive formatting."""
    lst = CursorList(["a", "b"])
    lst.begin()
    assert str(lst) == "['a', 'b']"
    assert repr(lst) == "CursorList(['a', 'b'])"
    assert repr(CursorList[int]()) == "CursorList([])"

    # Formatting leaves state alone
    assert lst.cursor is Guard.FRONT
    assert len(lst) == 2
    assert not lst.exhausted


def test_randomized_against_python_list() -> None:
    """Test random splices and removals against a plain list model."""
    rng = random.Random(1234)
    lst = CursorList[int]()
    model: list[int] = []

    for step in range(500):
        positions = list(lst.positions())
        choice = rng.random()
        if choice < 0.3:
            lst.append(step)
            model.append(step)
        elif choice < 0.5:
            lst.prepend(step)
            model.insert(0, step)
        elif choice < 0.7 and positions:
            i = rng.randrange(len(positions))
            lst.insert_after(positions[i], step)
            model.insert(i + 1, step)
        elif positions:
            i = rng.randrange(len(positions))
            assert lst.remove_at(positions[i]) == model.pop(i)

        assert list(lst.values()) == model
        assert len(lst) == len(model)

    assert list(lst) == model
    assert lst.is_empty()
