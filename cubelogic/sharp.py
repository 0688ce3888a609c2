"""Sharp, disjoint sharp and intersection of cubes and covers."""

from __future__ import annotations

from typing import Iterable

from .cube import CubeStructure, size_descending_key
from .setfamily import SetFamily

__all__ = [
    "sharp",
    "cb_sharp",
    "cv_sharp",
    "dsharp",
    "cb1_dsharp",
    "cb_dsharp",
    "cv_dsharp",
    "make_disjoint",
    "cv_intersect",
]


def _contain(size: int, cubes: Iterable[int]) -> SetFamily:
    """Drop duplicate cubes and cubes contained in another cube."""
    kept: list[int] = []
    for cube in sorted(set(cubes), key=size_descending_key):
        if not any(cube & ~other == 0 for other in kept):
            kept.append(cube)
    return SetFamily(size, kept)


def _union(size: int, a: Iterable[int], b: Iterable[int]) -> SetFamily:
    return _contain(size, [*a, *b])


def sharp(structure: CubeStructure, a: int, b: int) -> SetFamily:
    """Return the cubes of ``a`` that are not in ``b`` (possibly overlapping)."""
    result = SetFamily(structure.size)
    if structure.cdist0(a, b):
        difference = a & ~b
        for var in range(structure.num_vars):
            mask = structure.var_mask(var)
            part = difference & mask
            if part:
                result.append(part | (a & ~mask))
    else:
        result.append(a)
    return result


def cb_sharp(structure: CubeStructure, c: int, cover: Iterable[int]) -> SetFamily:
    """Return the sharp product of a cube with a cover."""
    cubes = list(cover)
    if not cubes:
        return SetFamily(structure.size, [c])

    def recur(first: int, last: int) -> SetFamily:
        if first == last:
            return sharp(structure, c, cubes[first])
        middle = (first + last) // 2
        return cv_intersect(structure, recur(first, middle), recur(middle + 1, last))

    return recur(0, len(cubes) - 1)


def cv_sharp(
    structure: CubeStructure, a_cover: Iterable[int], b_cover: Iterable[int]
) -> SetFamily:
    """Return the sharp product of two covers."""
    b_cubes = list(b_cover)
    result = SetFamily(structure.size)
    for cube in a_cover:
        result = _union(structure.size, result, cb_sharp(structure, cube, b_cubes))
    return result


def dsharp(structure: CubeStructure, a: int, b: int) -> SetFamily:
    """Return disjoint cubes covering the points of ``a`` not in ``b``."""
    result = SetFamily(structure.size)
    if structure.cdist0(a, b):
        difference = a & ~b
        common = a & b
        done = 0
        for var in range(structure.num_vars):
            var_mask = structure.var_mask(var)
            if difference & var_mask:
                earlier = common & done
                done |= var_mask
                result.append((difference & var_mask) | earlier | (a & ~done))
            else:
                done |= var_mask
    else:
        result.append(a)
    return result


def cb1_dsharp(structure: CubeStructure, cover: Iterable[int], c: int) -> SetFamily:
    """Return the disjoint sharp of a cover with a cube."""
    result = SetFamily(structure.size)
    for cube in cover:
        result = _union(structure.size, result, dsharp(structure, cube, c))
    return result


def cb_dsharp(structure: CubeStructure, c: int, cover: Iterable[int]) -> SetFamily:
    """Return the disjoint sharp of a cube with a cover."""
    result = SetFamily(structure.size, [c])
    for cube in cover:
        result = cb1_dsharp(structure, result, cube)
    return result


def cv_dsharp(
    structure: CubeStructure, a_cover: Iterable[int], b_cover: Iterable[int]
) -> SetFamily:
    """Return the disjoint sharp product of two covers."""
    b_cubes = list(b_cover)
    result = SetFamily(structure.size)
    for cube in a_cover:
        result = _union(structure.size, result, cb_dsharp(structure, cube, b_cubes))
    return result


def make_disjoint(structure: CubeStructure, cover: Iterable[int]) -> SetFamily:
    """Return a cover of the same points whose cubes do not overlap."""
    result = SetFamily(structure.size)
    for cube in cover:
        result = result.join(cb_dsharp(structure, cube, result))
    return result


def cv_intersect(
    structure: CubeStructure, a_cover: Iterable[int], b_cover: Iterable[int]
) -> SetFamily:
    """Return the intersection of two covers, free of contained cubes."""
    b_cubes = list(b_cover)
    products = [
        a & b for a in a_cover for b in b_cubes if structure.cdist0(a, b)
    ]
    return _contain(structure.size, products)