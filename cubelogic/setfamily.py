"""Bit sets and families of bit sets of a fixed width.

A set is a non-negative ``int``: element ``i`` is a member when bit ``i``
is one.  A :class:`SetFamily` is an ordered list of such sets that all
share the same element count (``size``).
"""

from __future__ import annotations

import re
from typing import IO, Iterable, Iterator

__all__ = [
    "popcount",
    "bit_index",
    "members",
    "from_members",
    "format_set",
    "format_bits",
    "SetFamily",
]

_WORD_BITS = 32
_WORD_MASK = (1 << _WORD_BITS) - 1
_LARGEST_STRING = 120
_WORDS_PER_LINE = 8


def _check_set(value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"a set must be an int, not {type(value).__name__}")
    if value < 0:
        raise ValueError("a set cannot be negative")


def popcount(value: int) -> int:
    """Return the number of elements in the set."""
    _check_set(value)
    return bin(value).count("1")


def bit_index(value: int) -> int:
    """Return the smallest element of the set, or -1 if it is empty."""
    _check_set(value)
    if value == 0:
        return -1
    return (value & -value).bit_length() - 1


def members(value: int) -> Iterator[int]:
    """Yield the elements of the set in ascending order."""
    _check_set(value)
    while value:
        low = value & -value
        yield low.bit_length() - 1
        value ^= low


def from_members(elements: Iterable[int]) -> int:
    """Build a set from an iterable of element numbers."""
    result = 0
    for element in elements:
        if element < 0:
            raise ValueError(f"negative element {element}")
        result |= 1 << element
    return result


def format_set(value: int) -> str:
    """Render a set as ``[a,b,c]``, truncated with ``...`` when long."""
    text = "["
    first = True
    for element in members(value):
        if not first:
            text += ","
        first = False
        text += str(element)
        if len(text) > _LARGEST_STRING - 15:
            text += "..."
            break
    return text + "]"


def format_bits(value: int, size: int) -> str:
    """Render the first ``size`` elements of a set as a row of 0s and 1s."""
    _check_set(value)
    return "".join("1" if value >> i & 1 else "0" for i in range(size))


def _words_for(size: int) -> int:
    return max(1, -(-size // _WORD_BITS))


def _shift_columns(value: int, first: int, count: int) -> int:
    """Delete ``count`` columns at ``first`` (insert blank ones if negative)."""
    low = value & ((1 << first) - 1)
    if count > 0:
        return low | ((value >> (first + count)) << first)
    return low | ((value >> first) << (first - count))


class SetFamily:
    """An ordered collection of sets over ``size`` elements."""

    def __init__(self, size: int, sets: Iterable[int] = ()) -> None:
        if size < 0:
            raise ValueError("set size cannot be negative")
        self.size = size
        self._sets: list[int] = []
        for value in sets:
            self.append(value)

    def _validate(self, value: int) -> int:
        _check_set(value)
        if value >> self.size:
            raise ValueError(
                f"set {format_set(value)} has elements outside 0..{self.size - 1}"
            )
        return value

    def __len__(self) -> int:
        return len(self._sets)

    def __iter__(self) -> Iterator[int]:
        return iter(self._sets)

    def __getitem__(self, index: int) -> int:
        return self._sets[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SetFamily):
            return NotImplemented
        return self.size == other.size and self._sets == other._sets

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        body = ", ".join(format_set(s) for s in self._sets)
        return f"SetFamily(size={self.size}, sets=[{body}])"

    def append(self, value: int) -> None:
        """Add a set at the end of the family."""
        self._sets.append(self._validate(value))

    def delete(self, index: int) -> None:
        """Remove a set by moving the last set into its place."""
        count = len(self._sets)
        if not -count <= index < count:
            raise IndexError("set index out of range")
        index %= count
        last = self._sets.pop()
        if index < len(self._sets):
            self._sets[index] = last

    def copy(self) -> SetFamily:
        """Return an independent copy of the family."""
        return SetFamily(self.size, self._sets)

    def join(self, other: SetFamily) -> SetFamily:
        """Return a new family holding the sets of this one, then of ``other``."""
        if self.size != other.size:
            raise ValueError("sf_join: sf_size mismatch")
        return SetFamily(self.size, [*self._sets, *other._sets])

    def union_all(self) -> int:
        """Return the union of every set in the family."""
        result = 0
        for value in self._sets:
            result |= value
        return result

    def intersect_all(self) -> int:
        """Return the intersection of every set (the full set if empty)."""
        result = (1 << self.size) - 1
        for value in self._sets:
            result &= value
        return result

    def column_counts(self) -> list[int]:
        """Return, for each element, how many sets contain it."""
        counts = [0] * self.size
        for value in self._sets:
            for element in members(value):
                counts[element] += 1
        return counts

    def restricted_column_counts(self, restrict: int) -> list[int]:
        """Column sums limited to ``restrict``, each set weighted 1024/(|set|-1)."""
        counts = [0] * self.size
        for value in self._sets:
            divisor = popcount(value) - 1
            if divisor == 0:
                raise ValueError("cannot weight a set with a single element")
            weight = 1024 // divisor if divisor > 0 else -(1024 // -divisor)
            for element in members(value & restrict):
                if element < self.size:
                    counts[element] += weight
        return counts

    def delete_columns(self, first: int, count: int) -> SetFamily:
        """Delete ``count`` columns from ``first``; negative ``count`` inserts."""
        if first < 0 or first > self.size:
            raise ValueError("first column out of range")
        if count > 0 and first + count > self.size:
            raise ValueError("cannot delete past the last column")
        return SetFamily(
            self.size - count,
            (_shift_columns(value, first, count) for value in self._sets),
        )

    def insert_columns(self, first: int, count: int) -> SetFamily:
        """Insert ``count`` empty columns so that the first new one is ``first``."""
        if count < 0:
            raise ValueError("column count cannot be negative")
        return self.delete_columns(first, -count)

    def delete_column_range(self, first: int, last: int) -> SetFamily:
        """Delete columns ``first`` to ``last`` inclusive."""
        return self.delete_columns(first, last - first + 1)

    def compress(self, mask: int) -> SetFamily:
        """Keep only the columns that are members of ``mask``."""
        kept = [i for i in members(mask) if i < self.size]
        result = []
        for value in self._sets:
            packed = 0
            for column, source in enumerate(kept):
                if value >> source & 1:
                    packed |= 1 << column
            result.append(packed)
        return SetFamily(popcount(mask), result)

    def transpose(self) -> SetFamily:
        """Return the family with rows and columns exchanged."""
        columns = [0] * self.size
        for row, value in enumerate(self._sets):
            for element in members(value):
                columns[element] |= 1 << row
        return SetFamily(len(self._sets), columns)

    def permute(self, columns: list[int]) -> SetFamily:
        """Return a family whose column ``j`` is column ``columns[j]`` of this one."""
        result = []
        for value in self._sets:
            packed = 0
            for target, source in enumerate(columns):
                if value >> source & 1:
                    packed |= 1 << target
            result.append(packed)
        return SetFamily(len(columns), result)

    def write(self, stream: IO[str]) -> None:
        """Write the family in a compact hexadecimal word format."""
        stream.write(f"{len(self._sets)} {self.size}\n")
        nwords = _words_for(self.size)
        for value in self._sets:
            fields = [nwords] + [
                (value >> (_WORD_BITS * w)) & _WORD_MASK for w in range(nwords)
            ]
            last = len(fields) - 1
            for j, field in enumerate(fields):
                stream.write(f"{field:x} ")
                if (j + 1) % _WORDS_PER_LINE == 0 and j != last:
                    stream.write("\n\t")
            stream.write("\n")
        stream.flush()

    @classmethod
    def read(cls, stream: IO[str]) -> SetFamily:
        """Read a family written by :meth:`write`."""
        tokens = iter(stream.read().split())
        try:
            count = int(next(tokens))
            size = int(next(tokens))
            family = cls(size)
            for _ in range(count):
                nwords = int(next(tokens), 16)
                value = 0
                for w in range(nwords):
                    value |= int(next(tokens), 16) << (_WORD_BITS * w)
                family.append(value)
        except StopIteration:
            raise ValueError("unexpected end of set family data") from None
        return family

    def bit_matrix(self) -> str:
        """Render the family as numbered rows of 0s and 1s."""
        return "".join(
            f"[{i:4d}] {format_bits(value, self.size)}\n"
            for i, value in enumerate(self._sets)
        )

    @classmethod
    def read_bit_matrix(cls, stream: IO[str]) -> SetFamily:
        """Read ``rows cols`` followed by one line of 0s and 1s per row."""
        text = stream.read()
        header = re.match(r"\s*([+-]?\d+)\s+([+-]?\d+)\s*", text)
        if header is None:
            raise ValueError("Error reading set family")
        rows, cols = int(header.group(1)), int(header.group(2))
        pos = header.end()
        family = cls(cols)
        for _ in range(rows):
            value = 0
            for j in range(cols):
                char = text[pos] if pos < len(text) else ""
                pos += 1
                if char == "1":
                    value |= 1 << j
                elif char != "0":
                    raise ValueError("Error reading set family")
            if pos >= len(text) or text[pos] != "\n":
                raise ValueError("Error reading set family (at end of line)")
            pos += 1
            family.append(value)
        return family