# cubelogic

This package provides building blocks for two-level (sum-of-products) logic
work in pure Python. It uses *positional cube notation*. A cube is a bit set
held in a plain `int`, with one bit for each value of each variable. A binary
variable takes two bits: the lower bit for `0` and the upper bit for `1`. A
multiple-valued variable takes one bit per value. A cover is a family of
cubes.

## Modules

- `cubelogic.setfamily`
  - Bit-set helpers: `popcount`, `bit_index`, `members`, `from_members`,
    `format_set` and `format_bits`.
  - `SetFamily`, an ordered family of bit sets of equal width. It offers:
    - `append` and `delete`. `delete` moves the last set into the gap.
    - `copy` and `join`.
    - `union_all` and `intersect_all`.
    - `column_counts` and `restricted_column_counts`.
    - Column editing with `delete_columns`, `insert_columns`,
      `delete_column_range`, `compress` and `permute`.
    - `transpose`.
    - A hexadecimal text format, through `write` and `SetFamily.read`.
    - A 0/1 matrix format, through `bit_matrix` and
      `SetFamily.read_bit_matrix`.
- `cubelogic.cube`
  - `CubeStructure` describes how the variables are laid out in a cube, and
    provides:
    - The layout: `first_part`, `last_part` and `var_mask`.
    - Distance tests: `cdist0`, `cdist01` and `cdist`.
    - Cube operations: `full_row`, `consensus`, `force_lower`, `cactive`
      and `ccommon`.
    - `minterms`, which expands a cover into its minterm numbers.
    - `karnaugh_map`, which renders a cover as a text Karnaugh map.
  - Sort keys for ordering cubes: `size_descending_key`,
    `size_ascending_key`, `lex_key` and `d1_key`.
- `cubelogic.sharp`
  - Sharp products: `sharp`, `cb_sharp` and `cv_sharp`.
  - Disjoint-sharp products: `dsharp`, `cb1_dsharp`, `cb_dsharp` and
    `cv_dsharp`.
  - `make_disjoint`.
  - `cv_intersect`, the intersection of two covers. It removes contained
    cubes from the result.
- `cubelogic.pairing`
  - `generate_all_pairs` lists every maximal pairing of the variables
    `1..n`.
  - `pairing_cost` scores a pairing against a cost matrix.
  - `pair_best_cost` searches every pairing for the best one, and
    `greedy_best_cost` builds one greedily.
  - `format_pair` renders a pairing as text.
- `cubelogic.dimacs`
  - `parse_solution` and `parse_solution_stream` read a SAT solver's answer.
    They skip `c` comment lines, check the `s` status line and read the `v`
    literal lines. They return a list with `True`, `False` or `None` for
    each variable.
  - A malformed number raises `DimacsParseError`.
  - A status other than `SATISFIABLE` raises `NotSatisfiableError`.

## A short tour

```python
from cubelogic.cube import CubeStructure
from cubelogic.setfamily import from_members, members
from cubelogic.sharp import sharp

# Two binary inputs and one single-valued output.
# Bits: a=0 -> 0, a=1 -> 1, b=0 -> 2, b=1 -> 3, output -> 4
structure = CubeStructure([2, 2, 1], 2)

a_and_b = from_members([1, 3, 4])   # a & b
just_a = from_members([1, 2, 3, 4])  # a

print(structure.cdist0(a_and_b, just_a))  # True: they intersect
for cube in sharp(structure, just_a, a_and_b):
    print(list(members(cube)))            # [1, 2, 4], i.e. a & !b
```

Choosing a pairing from a cost matrix:

```python
from cubelogic.pairing import format_pair, pair_best_cost

costs = [
    [0, 3, 1, 0],
    [0, 0, 0, 2],
    [0, 0, 0, 4],
    [0, 0, 0, 0],
]
print(format_pair(pair_best_cost(costs)))
```

Reading a solver's answer:

```python
from cubelogic.dimacs import parse_solution

assignment = parse_solution("s SATISFIABLE\nv 1 -2 3 0\n")
# [True, False, True]
```

## What it does not do

This is a library of cube and cover operations, with no command to run.

- It does not read or write PLA files.
- It has no unate complement.
- It does not run a complete minimization loop (expand, reduce, irredundant)
  on a cover. You can compose those steps yourself from the operations
  above.

## Requirements

Python 3.10 or later. The package has no runtime dependencies. The tests use
pytest, which the `test` extra provides.