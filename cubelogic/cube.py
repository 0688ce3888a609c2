"""Cube geometry for multiple-valued covers.

A cube is a bit set (an ``int``) in positional notation: each variable owns
a contiguous run of bits, one bit per value ("part").  Binary variables come
first and own two bits each: the lower bit is the value 0, the upper bit
the value 1.  A variable whose bits are all set is a don't-care in that
cube, and a variable with no bits set makes the cube empty.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from .setfamily import members, popcount

__all__ = [
    "CubeStructure",
    "size_descending_key",
    "size_ascending_key",
    "lex_key",
    "d1_key",
]

# Gray-code layout of up to eight binary inputs on a 16 x 16 Karnaugh map.
_MAP_INDEX: tuple[tuple[int, ...], ...] = (
    (0, 1, 3, 2, 16, 17, 19, 18, 80, 81, 83, 82, 64, 65, 67, 66),
    (4, 5, 7, 6, 20, 21, 23, 22, 84, 85, 87, 86, 68, 69, 71, 70),
    (12, 13, 15, 14, 28, 29, 31, 30, 92, 93, 95, 94, 76, 77, 79, 78),
    (8, 9, 11, 10, 24, 25, 27, 26, 88, 89, 91, 90, 72, 73, 75, 74),
    (32, 33, 35, 34, 48, 49, 51, 50, 112, 113, 115, 114, 96, 97, 99, 98),
    (36, 37, 39, 38, 52, 53, 55, 54, 116, 117, 119, 118, 100, 101, 103, 102),
    (44, 45, 47, 46, 60, 61, 63, 62, 124, 125, 127, 126, 108, 109, 111, 110),
    (40, 41, 43, 42, 56, 57, 59, 58, 120, 121, 123, 122, 104, 105, 107, 106),
    (160, 161, 163, 162, 176, 177, 179, 178, 240, 241, 243, 242, 224, 225, 227, 226),
    (164, 165, 167, 166, 180, 181, 183, 182, 244, 245, 247, 246, 228, 229, 231, 230),
    (172, 173, 175, 174, 188, 189, 191, 190, 252, 253, 255, 254, 236, 237, 239, 238),
    (168, 169, 171, 170, 184, 185, 187, 186, 248, 249, 251, 250, 232, 233, 235, 234),
    (128, 129, 131, 130, 144, 145, 147, 146, 208, 209, 211, 210, 192, 193, 195, 194),
    (132, 133, 135, 134, 148, 149, 151, 150, 212, 213, 215, 214, 196, 197, 199, 198),
    (140, 141, 143, 142, 156, 157, 159, 158, 220, 221, 223, 222, 204, 205, 207, 206),
    (136, 137, 139, 138, 152, 153, 155, 154, 216, 217, 219, 218, 200, 201, 203, 202),
)


class CubeStructure:
    """Layout of the variables of a cube and the cube operations on it."""

    def __init__(self, part_sizes: Iterable[int], num_binary_vars: int) -> None:
        sizes = list(part_sizes)
        if not 0 <= num_binary_vars <= len(sizes):
            raise ValueError("number of binary variables out of range")
        for var, part_size in enumerate(sizes):
            if part_size < 1:
                raise ValueError(f"variable {var} must have at least one part")
            if var < num_binary_vars and part_size != 2:
                raise ValueError(f"binary variable {var} must have two parts")
        self.part_sizes: tuple[int, ...] = tuple(sizes)
        self.num_binary_vars = num_binary_vars
        self.num_vars = len(sizes)

        firsts = []
        position = 0
        for part_size in sizes:
            firsts.append(position)
            position += part_size
        self._first: tuple[int, ...] = tuple(firsts)
        self._masks: tuple[int, ...] = tuple(
            ((1 << part_size) - 1) << first for first, part_size in zip(firsts, sizes)
        )
        self.size = position
        self.fullset = (1 << position) - 1
        self.output = self.num_vars - 1 if self.num_vars > num_binary_vars else -1

    def __repr__(self) -> str:
        return (
            f"CubeStructure(part_sizes={list(self.part_sizes)}, "
            f"num_binary_vars={self.num_binary_vars})"
        )

    def _check_var(self, var: int) -> int:
        if not 0 <= var < self.num_vars:
            raise IndexError(f"variable {var} out of range")
        return var

    def first_part(self, var: int) -> int:
        """Return the bit number of the first part of ``var``."""
        return self._first[self._check_var(var)]

    def last_part(self, var: int) -> int:
        """Return the bit number of the last part of ``var``."""
        var = self._check_var(var)
        return self._first[var] + self.part_sizes[var] - 1

    def var_mask(self, var: int) -> int:
        """Return the set of all parts of ``var``."""
        return self._masks[self._check_var(var)]

    def _disjoint_masks(self, a: int, b: int) -> Iterator[int]:
        for mask in self._masks:
            if not a & b & mask:
                yield mask

    def full_row(self, p: int, cof: int) -> bool:
        """Return True if ``p`` is the full cube with respect to ``cof``."""
        return (p | cof) == self.fullset

    def cdist0(self, a: int, b: int) -> bool:
        """Return True if ``a`` and ``b`` intersect in every variable."""
        return next(self._disjoint_masks(a, b), None) is None

    def cdist01(self, a: int, b: int) -> int:
        """Return the distance of ``a`` and ``b``, capped at 2."""
        distance = 0
        for _ in self._disjoint_masks(a, b):
            distance += 1
            if distance > 1:
                return 2
        return distance

    def cdist(self, a: int, b: int) -> int:
        """Return the number of variables in which ``a`` and ``b`` are disjoint."""
        return sum(1 for _ in self._disjoint_masks(a, b))

    def force_lower(self, xlower: int, a: int, b: int) -> int:
        """Add to ``xlower`` the parts of ``a`` in variables where ``a`` misses ``b``."""
        for mask in self._disjoint_masks(a, b):
            xlower |= a & mask
        return xlower

    def consensus(self, a: int, b: int) -> int:
        """Return the consensus of two cubes that are distance 1 apart."""
        result = 0
        for mask in self._masks:
            common = a & b & mask
            result |= common if common else (a | b) & mask
        return result

    def cactive(self, a: int) -> int:
        """Return the single variable that is not full in ``a``, else -1."""
        active = -1
        count = 0
        for var, mask in enumerate(self._masks):
            if mask & ~a:
                count += 1
                if count > 1:
                    return -1
                active = var
        return active

    def ccommon(self, a: int, b: int, cof: int) -> bool:
        """Return True if ``a`` and ``b`` share a variable that is not full."""
        for mask in self._masks:
            if mask & ~a & ~cof and mask & ~b & ~cof:
                return True
        return False

    def minterms(self, cover: Iterable[int]) -> int:
        """Return the set of minterm numbers covered by ``cover``.

        The last variable is the most significant digit of a minterm number.
        """
        result = 0
        for cube in cover:
            indices = [0]
            for var in reversed(range(self.num_vars)):
                first = self._first[var]
                offsets = [
                    part - first for part in members(cube & self._masks[var])
                ]
                part_size = self.part_sizes[var]
                indices = [z * part_size + off for z in indices for off in offsets]
            for index in indices:
                result |= 1 << index
        return result

    def karnaugh_map(self, cover: Iterable[int]) -> str:
        """Draw a Karnaugh map of each output of ``cover``."""
        if self.num_vars == 0:
            raise ValueError("cannot map a cube with no variables")
        minterm_set = self.minterms(cover)
        largest_input = 1 << self.num_binary_vars
        num_outputs = self.part_sizes[self.num_vars - 1]
        out: list[str] = []
        for output in range(num_outputs):
            output_offset = output * largest_input
            out.append(f"\n\nOutput space # {output}\n")
            for block in range(max(self.num_binary_vars - 8, 0) + 1):
                other_offset = block * 256
                for k, row in enumerate(_MAP_INDEX):
                    some_output = False
                    for j, base in enumerate(row):
                        index = base + other_offset
                        if index < largest_input:
                            hit = minterm_set >> (index + output_offset) & 1
                            out.append("1" if hit else ".")
                            some_output = True
                        if (j + 1) % 4 == 0:
                            out.append(" ")
                        if (j + 1) % 8 == 0:
                            out.append("  ")
                    if some_output:
                        out.append("\n")
                    if (k + 1) % 4 == 0:
                        if k != 15 and _MAP_INDEX[k + 1][0] >= largest_input:
                            break
                        out.append("\n")
                    if (k + 1) % 8 == 0:
                        out.append("\n")
        return "".join(out)


def size_descending_key(a: int) -> tuple[int, int]:
    """Sort key: larger cubes first, ties broken by descending bit value."""
    return (-popcount(a), -a)


def size_ascending_key(a: int) -> tuple[int, int]:
    """Sort key: smaller cubes first, ties broken by ascending bit value."""
    return (popcount(a), a)


def lex_key(a: int) -> int:
    """Sort key for descending lexical order of cubes."""
    return -a


def d1_key(a: int, mask: int) -> int:
    """Sort key for distance-1 merging: cubes equal outside ``mask`` sort together."""
    return -(a | mask)