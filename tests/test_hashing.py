import pytest

from dsakit.hashing import ChainedHashTable, FamilyTable, digital_root, family_of


def test_digital_root_non_positive_is_zero():
    assert digital_root(0) == 0
    assert digital_root(-25) == 0


@pytest.mark.parametrize("n", [1, 9, 10, 99, 123, 999, 987654321])
def test_digital_root_is_single_digit_congruent_mod_nine(n):
    root = digital_root(n)
    assert 1 <= root <= 9
    assert root % 9 == n % 9


def test_digital_root_pinned():
    assert digital_root(999) == 9


@pytest.mark.parametrize("sapid", [500123, 590000999, 1000, 42, 7])
def test_family_uses_last_three_digits(sapid):
    assert family_of(sapid) == digital_root(sapid % 1000)
    assert family_of(sapid) == family_of(sapid + 1000)


def test_family_table_newest_first_and_collisions():
    table = FamilyTable()
    first = table.insert(500123)
    second = table.insert(600123)
    assert first == second == family_of(500123)
    assert table.bucket(first) == [600123, 500123]
    assert table.collisions() == {first: 2}


def test_family_table_allows_duplicates():
    table = FamilyTable()
    table.insert(123)
    table.insert(123)
    assert table.bucket(family_of(123)) == [123, 123]


def test_family_table_format():
    table = FamilyTable()
    family = table.insert(500123)
    table.insert(700123)
    text = table.format().splitlines()
    assert text[0] == "--- Family Buckets ---"
    assert text[family + 1] == (
        f"Family {family}: 700123 -> 500123 -> NULL  [Collision detected: 2 entries]"
    )
    assert len(text) == 11


def test_bucket_out_of_range():
    with pytest.raises(IndexError):
        FamilyTable().bucket(10)
    with pytest.raises(IndexError):
        ChainedHashTable().bucket(-1)


def test_chained_insert_search_delete():
    table = ChainedHashTable()
    family = table.insert(500123)
    assert table.search(500123) == family
    assert 500123 in table
    assert table.delete(500123) == family
    assert table.search(500123) is None
    assert 500123 not in table


def test_chained_duplicate_rejected():
    table = ChainedHashTable()
    table.insert(500123)
    with pytest.raises(ValueError):
        table.insert(500123)
    assert table.bucket(family_of(500123)) == [500123]


def test_chained_delete_missing():
    with pytest.raises(KeyError):
        ChainedHashTable().delete(123)


def test_chained_keeps_insertion_order():
    table = ChainedHashTable()
    family = table.insert(500123)
    table.insert(600123)
    table.insert(700123)
    table.delete(600123)
    assert table.bucket(family) == [500123, 700123]


def test_chained_format():
    table = ChainedHashTable()
    family = table.insert(500123)
    lines = table.format().splitlines()
    assert lines[0] == "Hash Table (Separate Chaining):"
    assert lines[family + 1] == f"Family {family}: 500123 -> NULL"
    other = (family + 1) % 10
    assert lines[other + 1] == f"Family {other}: EMPTYNULL"