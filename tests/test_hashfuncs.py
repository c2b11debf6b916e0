import random
import string

import pytest

from algolab.hashfuncs import (
    basic_hash,
    djb_hash,
    poly_roll_hash,
    poly_sum_hash,
    random_words,
    sdbm_hash,
)


def test_random_words_shape_and_uniqueness():
    words = random_words(200, 5, random.Random(3))
    assert len(words) == 200
    assert len(set(words)) == 200
    assert all(len(w) == 5 for w in words)
    assert all(set(w) <= set(string.ascii_lowercase) for w in words)


def test_random_words_deterministic_with_seed():
    first = random_words(50, 4, random.Random(9))
    second = random_words(50, 4, random.Random(9))
    assert first == second
    assert len(set(first)) == 50
    assert all(len(w) == 4 for w in first)


def test_random_words_can_exhaust_alphabet():
    words = random_words(26, 1, random.Random(1))
    assert set(words) == set(string.ascii_lowercase)


def test_random_words_impossible_request():
    with pytest.raises(ValueError):
        random_words(27, 1, random.Random(1))


def test_basic_hash_is_order_independent():
    assert basic_hash("hashing") == basic_hash("gnihsah")
    assert basic_hash("abcxyz") == basic_hash("zyxcba")


def test_basic_hash_of_a_letters_is_zero():
    assert basic_hash("aaaaa") == 0


def test_basic_hash_grows_with_letter():
    assert basic_hash("key" + "b") == basic_hash("key") + basic_hash("b")


@pytest.mark.parametrize("length", [7, 101, 20011])
def test_djb_and_sdbm_in_range(length):
    for word in random_words(100, 7, random.Random(length)):
        assert 0 <= djb_hash(word, length) < length
        assert 0 <= sdbm_hash(word, length) < length


def test_single_letter_hashes_equal_offset():
    for ch in string.ascii_lowercase:
        assert djb_hash(ch, 1000) == basic_hash(ch)
        assert sdbm_hash(ch, 1000) == basic_hash(ch)


def test_empty_key_hashes_to_zero():
    assert djb_hash("", 7) == sdbm_hash("", 7) == basic_hash("")


def test_uppercase_wraps_into_range():
    assert 0 <= sdbm_hash("A", 10) < 10
    assert 0 <= djb_hash("HELLO", 13) < 13


def test_poly_roll_with_base_one_matches_basic_sum():
    for word in random_words(30, 6, random.Random(4)):
        assert poly_roll_hash(word, 97, 1) == basic_hash(word) % 97


def test_poly_sum_hash_order_independent_and_value():
    assert poly_sum_hash("abc") == poly_sum_hash("cba")
    assert poly_sum_hash("c") == 8