"""
Stable counting sort for integer sequences.

Works on any sized, reversible sequence (list, tuple, deque, range,
array.array, ...) and always returns a new list; the input is only read.

    >>> counting_sort([2, 4, 1, 3])
    [1, 2, 3, 4]
    >>> counting_sort_with_bounds([3, 1, 2], 1, 3)
    [1, 2, 3]

Memory use is bounded by max - min, not by the width of the integers.
"""

from __future__ import annotations

import operator
import sys
from collections.abc import Reversible, Sized
from typing import Any, Dict, List, NamedTuple, Optional, Tuple, Union

# Largest offset whose table (offset + 2 slots) still has an index-sized length
MAX_INDEX = sys.maxsize - 2


class CountingSortError(Exception):
    """Base class for all counting sort failures."""


class EmptyInputError(CountingSortError):
    pass


class IndexConversionError(CountingSortError, ValueError):
    pass


class IndexOutOfBoundsError(CountingSortError, IndexError):
    pass


class InvalidBoundsError(CountingSortError, ValueError):
    pass


class IntType(NamedTuple):
    """A fixed-width integer domain that elements may be declared to belong to."""

    name: str
    min_value: int
    max_value: int

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value


def _int_type(name: str, bits: int, signed: bool) -> IntType:
    if signed:
        return IntType(name, -(1 << (bits - 1)), (1 << (bits - 1)) - 1)
    return IntType(name, 0, (1 << bits) - 1)


INT_TYPES: Dict[str, IntType] = {
    t.name: t
    for t in (
        _int_type("i8", 8, True),
        _int_type("i16", 16, True),
        _int_type("i32", 32, True),
        _int_type("i64", 64, True),
        _int_type("u8", 8, False),
        _int_type("u16", 16, False),
        _int_type("u32", 32, False),
        _int_type("u64", 64, False),
    )
}

ValueType = Optional[Union[str, IntType]]


def resolve_int_type(value_type: ValueType) -> Optional[IntType]:
    """Map a type name such as "u8" to its IntType; IntType and None pass through."""
    if value_type is None or isinstance(value_type, IntType):
        return value_type
    try:
        return INT_TYPES[value_type]
    except KeyError:
        raise ValueError(
            f"Unknown integer type {value_type!r}, expected one of {sorted(INT_TYPES)}"
        ) from None


def _as_int(value: Any, value_type: Optional[IntType] = None) -> int:
    try:
        number = operator.index(value)
    except TypeError:
        raise IndexConversionError(f"{value!r} is not an integer") from None
    if value_type is not None and not value_type.contains(number):
        raise IndexConversionError(f"{number} does not fit into {value_type.name}")
    return number


def _offset(value: Any, min_value: int, int_type: Optional[IntType]) -> int:
    value = _as_int(value, int_type)
    if min_value > value:
        raise IndexConversionError("Given min_value is larger than value")
    offset = value - min_value
    if offset > MAX_INDEX:
        raise IndexConversionError("Out of range integral type conversion attempted")
    return offset


def try_into_index(value: Any, min_value: Any, value_type: ValueType = None) -> int:
    """Offset of value from min_value as a table index, or IndexConversionError."""
    int_type = resolve_int_type(value_type)
    return _offset(value, _as_int(min_value, int_type), int_type)


def _check_sequence(sequence: Any) -> None:
    reversible = isinstance(sequence, Reversible) or hasattr(type(sequence), "__getitem__")
    if not isinstance(sequence, Sized) or not reversible:
        raise TypeError(
            f"counting sort needs a sized, reversible sequence, got {type(sequence).__name__}"
        )


def get_min_max(sequence) -> Tuple[Any, Any]:
    """Single pass for (min, max) using plain comparisons."""
    iterator = iter(sequence)
    try:
        first = next(iterator)
    except StopIteration:
        raise EmptyInputError("There are no elements available in the sequence") from None

    min_value = max_value = first
    for value in iterator:
        try:
            if value < min_value:
                min_value = value
            elif value > max_value:
                max_value = value
        except TypeError:
            raise IndexConversionError(
                f"{value!r} cannot be compared with {min_value!r}"
            ) from None
    return min_value, max_value


def count_values(sequence, min_value, max_value, value_type: ValueType = None) -> List[int]:
    """
    Histogram of the sequence, shifted one slot right.

    The table has max - min + 2 slots; slot 0 is a sentinel that stays 0 and
    slot i + 1 counts the elements whose offset from min_value is i.
    """
    int_type = resolve_int_type(value_type)
    lo = _as_int(min_value, int_type)
    distance = _offset(max_value, lo, int_type)
    C = [0] * (distance + 2)

    for v in sequence:
        slot = _offset(v, lo, int_type) + 1
        if slot >= len(C):
            raise IndexOutOfBoundsError(
                f"Value {v} is larger than max_value {max_value}"
            )
        C[slot] += 1
    return C


def calculate_prefix_sum(C: List[int]) -> None:
    """Turn counts into cumulative frequencies in place; C[0] is left alone."""
    for i in range(1, len(C)):
        C[i] += C[i - 1]


def re_order(sequence, C: List[int], min_value, value_type: ValueType = None) -> List[Any]:
    """
    Place every element of sequence into a new list using the cumulative table.

    C[i + 1] holds how many elements have an offset <= i, so the last free
    position for an element with offset i is C[i + 1] - 1. Walking the input
    from the right and decrementing after each placement keeps equal
    elements in input order. C is consumed by this call.
    """
    int_type = resolve_int_type(value_type)
    lo = _as_int(min_value, int_type)
    n = len(sequence)
    output: List[Any] = [None] * n

    # Stable traversal from the right
    for v in reversed(sequence):
        slot = _offset(v, lo, int_type) + 1
        if slot >= len(C):
            raise IndexOutOfBoundsError(f"Value {v} has no slot in the count table")
        position = C[slot] - 1
        if not 0 <= position < n:
            raise IndexOutOfBoundsError(
                f"Position {position} for value {v} is outside of 0..{n - 1}"
            )
        output[position] = v
        C[slot] = position
    return output


def _sort(sequence, min_value, max_value, int_type: Optional[IntType]) -> List[Any]:
    C = count_values(sequence, min_value, max_value, int_type)
    calculate_prefix_sum(C)
    if C[-1] != len(sequence):
        raise IndexOutOfBoundsError(
            f"Counted {C[-1]} elements but the sequence reports {len(sequence)}"
        )
    return re_order(sequence, C, min_value, int_type)


def counting_sort(sequence, value_type: ValueType = None) -> List[Any]:
    """
    Return a sorted copy of sequence.

    The bounds are discovered with one extra pass. An empty sequence gives an
    empty list.
    """
    _check_sequence(sequence)
    int_type = resolve_int_type(value_type)
    try:
        min_value, max_value = get_min_max(sequence)
    except EmptyInputError:
        return []
    return _sort(sequence, min_value, max_value, int_type)


def counting_sort_with_bounds(sequence, min_value, max_value,
                              value_type: ValueType = None) -> List[Any]:
    """
    Return a sorted copy of sequence using caller-supplied bounds.

    Skips the min/max pass. Every element is still checked against
    [min_value, max_value]; one outside raises IndexConversionError (below
    min_value) or IndexOutOfBoundsError (above max_value).
    """
    _check_sequence(sequence)
    int_type = resolve_int_type(value_type)
    lo = _as_int(min_value, int_type)
    hi = _as_int(max_value, int_type)
    if lo > hi:
        raise InvalidBoundsError(f"min_value {lo} is larger than max_value {hi}")
    if not len(sequence):
        return []
    return _sort(sequence, lo, hi, int_type)
