import io

import pytest

from cubelogic.setfamily import (
    SetFamily,
    bit_index,
    format_bits,
    format_set,
    from_members,
    members,
    popcount,
)


def _family():
    return SetFamily(
        6,
        [from_members([0, 1]), from_members([1, 2, 5]), from_members([3]), 0],
    )


def test_popcount_agrees_with_members():
    for value in range(256):
        assert popcount(value) == len(list(members(value)))


def test_popcount_full_byte():
    assert popcount(255) == 8
    assert popcount(0) == 0


def test_popcount_rejects_negative():
    with pytest.raises(ValueError):
        popcount(-1)


def test_bit_index_empty():
    assert bit_index(0) == -1


def test_bit_index_is_smallest_member():
    for value in range(1, 300):
        assert bit_index(value) == min(members(value))


def test_members_round_trip():
    elements = [0, 4, 31, 32, 100]
    assert list(members(from_members(elements))) == elements


def test_from_members_rejects_negative():
    with pytest.raises(ValueError):
        from_members([2, -1])


def test_format_set():
    assert format_set(from_members([1, 3, 5])) == "[1,3,5]"
    assert format_set(0) == "[]"


def test_format_set_truncates():
    text = format_set(from_members(range(100)))
    assert text.endswith("...]")
    assert len(text) <= 120


def test_format_bits_round_trip():
    for value in (0, 1, 5, 0b110010):
        bits = format_bits(value, 8)
        assert len(bits) == 8
        assert int(bits[::-1], 2) == value


def test_family_rejects_out_of_range_set():
    with pytest.raises(ValueError):
        SetFamily(3, [from_members([3])])


def test_family_basic_access():
    family = _family()
    assert len(family) == 4
    assert family[1] == from_members([1, 2, 5])
    assert list(family) == [family[i] for i in range(4)]


def test_append_validates():
    family = SetFamily(2)
    family.append(from_members([1]))
    assert list(family) == [from_members([1])]
    with pytest.raises(ValueError):
        family.append(from_members([2]))


def test_delete_moves_last_into_place():
    family = SetFamily(4, [1, 2, 4])
    family.delete(0)
    assert list(family) == [4, 2]
    family.delete(1)
    assert list(family) == [4]
    with pytest.raises(IndexError):
        family.delete(5)


def test_copy_is_independent():
    family = _family()
    duplicate = family.copy()
    duplicate.append(1)
    assert duplicate != family
    assert len(duplicate) == len(family) + 1


def test_join():
    a = SetFamily(3, [1, 2])
    b = SetFamily(3, [4])
    joined = a.join(b)
    assert list(joined) == [1, 2, 4]
    assert joined.size == 3


def test_join_size_mismatch():
    with pytest.raises(ValueError):
        SetFamily(3, [1]).join(SetFamily(4, [1]))


def test_union_and_intersection():
    family = SetFamily(4, [from_members([0, 1]), from_members([1, 2])])
    assert family.union_all() == from_members([0, 1, 2])
    assert family.intersect_all() == from_members([1])


def test_intersect_all_of_empty_is_full():
    assert SetFamily(5).intersect_all() == from_members(range(5))


def test_column_counts_invariant():
    family = _family()
    counts = family.column_counts()
    assert len(counts) == family.size
    assert sum(counts) == sum(popcount(s) for s in family)
    for column, count in enumerate(counts):
        assert count == sum(1 for s in family if s >> column & 1)


def test_restricted_column_counts_weight():
    family = SetFamily(4, [from_members([0, 1])])
    counts = family.restricted_column_counts(from_members([0]))
    assert counts[0] == 1024
    assert counts[1:] == [0, 0, 0]


def test_restricted_column_counts_single_element_set():
    family = SetFamily(4, [from_members([2])])
    with pytest.raises(ValueError):
        family.restricted_column_counts(from_members([2]))


def test_insert_then_delete_columns_round_trip():
    family = _family()
    widened = family.insert_columns(2, 3)
    assert widened.size == family.size + 3
    for value in widened:
        assert value & from_members([2, 3, 4]) == 0
    assert widened.delete_columns(2, 3) == family


def test_delete_columns_preserves_other_columns():
    family = _family()
    narrowed = family.delete_columns(1, 2)
    assert narrowed.size == family.size - 2
    assert narrowed.insert_columns(1, 2) == family.compress(
        from_members([0, 3, 4, 5])
    ).insert_columns(1, 2)


def test_delete_column_range_matches_delete_columns():
    family = _family()
    assert family.delete_column_range(2, 4) == family.delete_columns(2, 3)


def test_compress_full_mask_is_identity():
    family = _family()
    assert family.compress(from_members(range(family.size))) == family


def test_compress_keeps_selected_columns():
    family = _family()
    mask = from_members([1, 3, 5])
    compressed = family.compress(mask)
    assert compressed.size == 3
    for original, packed in zip(family, compressed):
        assert popcount(packed) == popcount(original & mask)


def test_transpose_twice_is_identity():
    family = _family()
    assert family.transpose().transpose() == family


def test_transpose_membership():
    family = _family()
    flipped = family.transpose()
    assert flipped.size == len(family)
    assert len(flipped) == family.size
    for row, value in enumerate(family):
        for column in range(family.size):
            assert (value >> column & 1) == (flipped[column] >> row & 1)


def test_permute_identity_and_reverse():
    family = _family()
    assert family.permute(list(range(family.size))) == family
    reversed_family = family.permute(list(range(family.size))[::-1])
    for original, flipped in zip(family, reversed_family):
        assert format_bits(flipped, family.size) == format_bits(
            original, family.size
        )[::-1]


def test_write_read_round_trip():
    family = _family()
    stream = io.StringIO()
    family.write(stream)
    stream.seek(0)
    assert SetFamily.read(stream) == family


def test_write_read_round_trip_wide():
    family = SetFamily(
        300, [from_members([0, 31, 32, 63, 64, 299]), 0, from_members(range(300))]
    )
    stream = io.StringIO()
    family.write(stream)
    stream.seek(0)
    assert SetFamily.read(stream) == family


def test_read_truncated_data():
    with pytest.raises(ValueError):
        SetFamily.read(io.StringIO("2 4\n1 3\n"))


def test_bit_matrix_format():
    family = SetFamily(3, [from_members([0, 2])])
    assert family.bit_matrix() == "[   0] 101\n"


def test_read_bit_matrix():
    family = SetFamily.read_bit_matrix(io.StringIO("2 3\n101\n010\n"))
    assert family.size == 3
    assert list(family) == [from_members([0, 2]), from_members([1])]


def test_read_bit_matrix_bad_character():
    with pytest.raises(ValueError, match="Error reading set family"):
        SetFamily.read_bit_matrix(io.StringIO("1 3\n1x1\n"))


def test_read_bit_matrix_missing_newline():
    with pytest.raises(ValueError, match="at end of line"):
        SetFamily.read_bit_matrix(io.StringIO("1 3\n1011\n"))