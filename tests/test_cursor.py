import pytest

from core.cursor import Cursor, IterableCursor, SequenceCursor, cursor_over
from core.exceptions import CursorExhaustedError, EmptyInputError, MaxFinderError


def test_sequence_cursor_walks_in_order():
    cursor = SequenceCursor([3, 7, 2])
    taken = []
    while cursor.has_next():
        taken.append(cursor.next())
    assert taken == [3, 7, 2]
    assert cursor.consumed == 3


def test_has_next_does_not_advance():
    cursor = SequenceCursor([5, 6])
    assert cursor.has_next()
    assert cursor.has_next()
    assert cursor.next() == 5


def test_sequence_cursor_does_not_modify_sequence():
    values = [1, 2, 3]
    cursor = SequenceCursor(values)
    list(cursor)
    assert values == [1, 2, 3]


def test_empty_sequence_cursor_raises_empty_input():
    cursor = SequenceCursor([])
    assert not cursor.has_next()
    with pytest.raises(EmptyInputError):
        cursor.next()


def test_exhausted_cursor_raises_after_elements():
    cursor = SequenceCursor([1])
    cursor.next()
    with pytest.raises(CursorExhaustedError) as excinfo:
        cursor.next()
    assert not isinstance(excinfo.value, EmptyInputError)
    assert excinfo.value.consumed == 1


def test_exhaustion_is_a_lookup_error():
    with pytest.raises(LookupError):
        SequenceCursor([]).next()
    with pytest.raises(MaxFinderError):
        SequenceCursor([]).next()


def test_iterable_cursor_over_generator():
    cursor = IterableCursor(x * x for x in range(4))
    assert cursor.has_next()
    assert cursor.has_next()
    assert [cursor.next() for _ in range(4)] == [0, 1, 4, 9]
    assert not cursor.has_next()
    assert cursor.consumed == 4


def test_iterable_cursor_empty():
    cursor = IterableCursor(iter([]))
    assert not cursor.has_next()
    with pytest.raises(EmptyInputError):
        cursor.next()


def test_iterable_cursor_next_without_has_next():
    cursor = IterableCursor(iter([8, 9]))
    assert cursor.next() == 8
    assert cursor.next() == 9
    with pytest.raises(CursorExhaustedError):
        cursor.next()


def test_cursor_supports_python_iteration():
    assert list(SequenceCursor([4, 5])) == [4, 5]
    assert list(IterableCursor(iter([4, 5]))) == [4, 5]


def test_cursor_over_picks_implementation():
    assert isinstance(cursor_over([1, 2]), SequenceCursor)
    assert isinstance(cursor_over((1, 2)), SequenceCursor)
    assert isinstance(cursor_over(range(3)), SequenceCursor)
    assert isinstance(cursor_over(iter([1, 2])), IterableCursor)


def test_implementations_satisfy_protocol(counting_cursor):
    assert isinstance(SequenceCursor([1]), Cursor)
    assert isinstance(IterableCursor([1]), Cursor)
    assert isinstance(counting_cursor([1]), Cursor)
    assert not isinstance(object(), Cursor)
