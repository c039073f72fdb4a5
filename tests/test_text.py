import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.text import (
    compress,
    is_palindrome,
    remove_occurrences,
    reverse_string,
    reverse_words,
)


def test_remove_occurrences_source_example():
    assert remove_occurrences("daabcbaabcbc", "abc") == "dab"


def test_remove_occurrences_without_match():
    assert remove_occurrences("hello", "xyz") == "hello"


def test_remove_occurrences_empty_part_rejected():
    with pytest.raises(ValueError):
        remove_occurrences("abc", "")


@given(st.text(alphabet="abc", max_size=30), st.text(alphabet="abc", min_size=1, max_size=3))
def test_remove_occurrences_leaves_no_part(s, part):
    result = remove_occurrences(s, part)
    assert part not in result
    assert len(s) - len(result) == (len(s) - len(result)) // len(part) * len(part)


def test_reverse_string_example():
    assert reverse_string("abcde") == "edcba"


@given(st.text())
def test_reverse_string_round_trip(s):
    assert reverse_string(reverse_string(s)) == s
    assert len(reverse_string(s)) == len(s)


def test_reverse_words_source_example():
    assert reverse_words("the sky is blue") == "blue is sky the"


def test_reverse_words_collapses_spaces():
    assert reverse_words("  hello   world  ") == "world hello"


def test_reverse_words_only_spaces():
    assert reverse_words("    ") == ""


@given(st.lists(st.text(alphabet="xyz", min_size=1, max_size=5), max_size=8))
def test_reverse_words_twice_restores_order(words):
    sentence = " ".join(words)
    assert reverse_words(reverse_words(sentence)) == sentence
    assert reverse_words(sentence).split() == words[::-1]


def test_compress_source_example():
    assert compress(["a", "a", "b", "b", "c", "c", "d", "e"]) == list("a2b2c2de")


def test_compress_multi_digit_count():
    assert compress("a" * 12) == ["a", "1", "2"]


def test_compress_empty():
    assert compress([]) == []


@given(st.text(alphabet="abcdef", max_size=40))
def test_compress_never_longer(s):
    assert len(compress(s)) <= len(s)


@given(st.lists(st.sampled_from("abcdef"), unique=True))
def test_compress_distinct_characters_unchanged(chars):
    assert compress(chars) == chars


def test_is_palindrome_source_example():
    assert is_palindrome("Ac3e3c&a") is True


@pytest.mark.parametrize("text", ["", "a", "A man, a plan, a canal: Panama", "!!"])
def test_is_palindrome_true(text):
    assert is_palindrome(text) is True


@pytest.mark.parametrize("text", ["ab", "race a car", "0P"])
def test_is_palindrome_false(text):
    assert is_palindrome(text) is False


@given(st.text(alphabet="abcXYZ019 ,.!", max_size=20))
def test_mirrored_text_is_palindrome(s):
    assert is_palindrome(s + reverse_string(s))
    assert is_palindrome(s.upper() + reverse_string(s).lower())