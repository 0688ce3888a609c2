"""Choosing which binary variables to pair into four-valued variables.

A pairing is a tuple of ``(var1, var2)`` tuples that use 1-based variable
numbers, no variable appearing twice.  A cost array is a square matrix
where ``cost_array[i][j]`` (with ``i < j``) estimates what pairing
variables ``i + 1`` and ``j + 1`` gains.
"""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

__all__ = [
    "generate_all_pairs",
    "pairing_cost",
    "pair_best_cost",
    "greedy_best_cost",
    "format_pair",
]

Pair = tuple[int, int]
Pairing = tuple[Pair, ...]


def _check_cost_array(cost_array: Sequence[Sequence[int]]) -> int:
    n = len(cost_array)
    for row in cost_array:
        if len(row) != n:
            raise ValueError("cost array must be square")
    return n


def generate_all_pairs(n: int) -> Iterator[Pairing]:
    """Yield every maximal pairing of the variables ``1 .. n``.

    With an odd number of variables each pairing leaves one variable out.
    """
    if n < 0:
        raise ValueError("number of variables cannot be negative")

    def recur(current: tuple[Pair, ...], candidate: list[int]) -> Iterator[Pairing]:
        if len(candidate) < 2:
            yield current
            return
        first, rest = candidate[0], candidate[1:]
        for other in rest:
            remaining = [v for v in rest if v != other]
            yield from recur(current + ((first + 1, other + 1),), remaining)
        if len(candidate) % 2 == 1:
            yield from recur(current, rest)

    yield from recur((), list(range(n)))


def pairing_cost(pairs: Sequence[Pair], cost_array: Sequence[Sequence[int]]) -> int:
    """Return the summed cost of the pairs in a pairing."""
    return sum(cost_array[var1 - 1][var2 - 1] for var1, var2 in pairs)


def pair_best_cost(cost_array: Sequence[Sequence[int]]) -> Pairing:
    """Return the first pairing of greatest cost, trying every pairing."""
    n = _check_cost_array(cost_array)
    best_cost = -1
    best_pair: Optional[Pairing] = None
    for pairing in generate_all_pairs(n):
        cost = pairing_cost(pairing, cost_array)
        if cost > best_cost:
            best_cost = cost
            best_pair = pairing
    if best_pair is None:
        raise ValueError("no pairing has a cost above -1")
    return best_pair


def greedy_best_cost(cost_array: Sequence[Sequence[int]]) -> tuple[int, Pairing]:
    """Pair variables greedily by highest cost; return (total cost, pairing)."""
    n = _check_cost_array(cost_array)
    candidate = list(range(n))
    pairs: list[Pair] = []
    total_cost = 0
    while len(candidate) >= 2:
        best: Optional[Pair] = None
        max_cost = -1
        for index, i in enumerate(candidate):
            for j in candidate[index + 1 :]:
                cost = cost_array[i][j]
                if best is None or cost > max_cost:
                    if best is None and cost <= max_cost:
                        best = (i, j)
                        max_cost = cost
                        continue
                    max_cost = cost
                    best = (i, j)
        assert best is not None
        besti, bestj = best
        pairs.append((besti + 1, bestj + 1))
        candidate.remove(besti)
        candidate.remove(bestj)
        total_cost += max_cost
    return total_cost, tuple(pairs)


def format_pair(pairs: Sequence[Pair]) -> str:
    """Render a pairing as ``pair is (a b) (c d)``."""
    return "pair is" + "".join(f" ({var1} {var2})" for var1, var2 in pairs)