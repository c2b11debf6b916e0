import random

import pytest

from algolab.hashfuncs import random_words
from algolab.hashtables import ChainHash, CustomProbing, DoubleHash

FACTORIES = [
    lambda: ChainHash(11),
    lambda: DoubleHash(101),
    lambda: CustomProbing(101, 2, 4),
]


@pytest.fixture(params=FACTORIES, ids=["chain", "double", "custom"])
def table(request):
    return request.param()


@pytest.fixture
def words():
    return random_words(40, 6, random.Random(5))


def test_round_trip(table, words):
    for value, word in enumerate(words, start=1):
        table.insert(word, value)
    for value, word in enumerate(words, start=1):
        assert table.search(word) == value


def test_missing_key(table, words):
    for word in words[:10]:
        table.insert(word, 1)
    assert table.search("zzzzzzzz") is None
    assert table.delete("zzzzzzzz") is False


def test_delete_then_others_remain(table, words):
    for value, word in enumerate(words, start=1):
        table.insert(word, value)
    assert table.delete(words[0]) is True
    assert table.search(words[0]) is None
    assert table.delete(words[0]) is False
    for value, word in enumerate(words[1:], start=2):
        assert table.search(word) == value


def test_reset_probes(table, words):
    for word in words:
        table.insert(word, 7)
    for word in words:
        table.search(word)
    assert table.probes >= len(words)
    table.reset_probes()
    assert table.probes == 0


def test_chain_single_bucket_collisions_and_probes():
    table = ChainHash(1)
    keys = ["a", "b", "c"]
    for value, key in enumerate(keys):
        table.insert(key, value)
    assert table.collisions == len(keys) - 1
    table.search(keys[2])
    assert table.probes == 3


def test_chain_delete_middle_of_chain():
    table = ChainHash(1)
    for value, key in enumerate(["x", "y", "z"]):
        table.insert(key, value)
    assert table.delete("y") is True
    assert table.search("x") == 0
    assert table.search("z") == 2
    assert table.search("y") is None


def test_double_single_lookup_counts_one_probe():
    table = DoubleHash(13)
    table.insert("abc", 5)
    assert table.collisions == 0
    assert table.search("abc") == 5
    assert table.probes == 1


def test_double_tombstone_keeps_chain():
    table = DoubleHash(7)
    keys = ["ab", "ba", "ac", "ca", "bc"]
    for value, key in enumerate(keys):
        table.insert(key, value)
    table.delete(keys[0])
    for value, key in enumerate(keys[1:], start=1):
        assert table.search(key) == value
    table.insert(keys[0], 99)
    assert table.search(keys[0]) == 99


def test_double_full_table_overflows():
    table = DoubleHash(7)
    for key in ["b", "c", "d", "e", "f", "g", "bb"]:
        table.insert(key, 1)
    assert table.collisions > 0
    with pytest.raises(OverflowError):
        table.insert("cc", 2)


def test_open_addressing_single_slot_overflows():
    table = CustomProbing(1, 2, 4)
    table.insert("a", 1)
    with pytest.raises(OverflowError):
        table.insert("b", 2)


def test_invalid_size():
    with pytest.raises(ValueError):
        ChainHash(0)
    with pytest.raises(ValueError):
        DoubleHash(-3)