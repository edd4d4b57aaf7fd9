"""
Unit tests for the :mod:`ustr.text.manipulate` module.
"""

import pytest

from ustr.text.check import count_occurrences
from ustr.text.manipulate import (
    capitalize,
    center_align,
    decapitalize,
    left_align,
    left_trim,
    replace,
    replace_count,
    replace_inplace,
    right_align,
    right_trim,
    split,
    strip,
    strip_inplace,
    to_lower,
    to_upper,
    trim,
)


# ....................{ TRIM                               }....................
def test_trim_pad_set():
    assert trim("_ _-_abc_-_ _", " _-") == "abc"
    assert left_trim("_-_ _abc ", " _-") == "abc "
    assert right_trim(" abc_-_ _", " _-") == " abc"


def test_trim_default_space():
    assert trim("123  ") == "123"
    assert trim("  123") == "123"
    assert trim(" Hello world!  ") == "Hello world!"


def test_trim_all_pad_is_empty():
    assert trim("   ") == ""
    assert left_trim("---", "-") == ""
    assert right_trim("---", "-") == ""


def test_trim_without_pad_is_unchanged():
    assert trim("abc") == "abc"


@pytest.mark.parametrize("text", ["  a b  ", "x", "", "   ", "__x__"])
def test_trim_idempotent(text):
    once = trim(text, " _")
    assert trim(once, " _") == once
    assert trim(left_align(once, 12), " _") == once


# ....................{ CASE                               }....................
def test_case_mapping():
    assert to_upper("hello there!") == "HELLO THERE!"
    assert to_lower("HELLO THERE!") == "hello there!"


def test_case_mapping_is_ascii_only():
    assert to_upper("straße 1é") == "STRAßE 1é"


# ....................{ ALIGN                              }....................
def test_align():
    assert right_align("hello", 10) == "     hello"
    assert left_align("hello", 10) == "hello     "
    assert center_align("hello", 10) == "  hello   "


def test_align_fill():
    assert center_align("ab", 6, "*") == "**ab**"
    assert right_align("7", 3, "0") == "007"


@pytest.mark.parametrize("align", [left_align, right_align, center_align])
@pytest.mark.parametrize("width", [0, 3, 5, 8, 11])
def test_align_length(align, width):
    text = "hello"
    assert len(align(text, width)) == max(width, len(text))


@pytest.mark.parametrize("align", [left_align, right_align, center_align])
def test_align_does_not_truncate(align):
    assert align("hello world", 4) == "hello world"


def test_align_rejects_bad_arguments():
    with pytest.raises(ValueError, match="fill"):
        left_align("a", 4, "ab")
    with pytest.raises(ValueError, match="width"):
        center_align("a", -1)


# ....................{ REPLACE                            }....................
def test_replace_all():
    assert replace("Hello there!", "there", "friend", 0) == "Hello friend!"


def test_replace_limit():
    text = "ratio and ratio and ratio"
    assert replace(text, "ratio", "RATIO", 1) == "RATIO and ratio and ratio"
    assert replace(text, "ratio", "RATIO", 2) == "RATIO and RATIO and ratio"


def test_replace_does_not_rematch_substitute():
    assert replace("aa", "a", "aa") == "aaaa"
    assert replace_count("xax", "a", "aba") == ("xabax", 1)


def test_replace_empty_pattern_is_noop():
    assert replace_count("abc", "", "x") == ("abc", 0)


def test_replace_counts():
    assert replace_count("a-b-c-d", "-", "+", 2) == ("a+b+c-d", 2)
    assert replace_count("abc", "z", "+") == ("abc", 0)


def test_replace_keeps_or_grows_substitute_count():
    text = "cat dog cat bird cat"
    result = replace(text, "cat", "fish")
    assert count_occurrences(result, "fish") >= count_occurrences(text, "cat")


def test_replace_negative_limit_rejected():
    with pytest.raises(ValueError, match="limit"):
        replace("abc", "a", "b", -1)


def test_replace_inplace_mutates_buffer():
    buffer = bytearray(b"Hello world!")
    result = replace_inplace(buffer, "world", "friend", 0)
    assert result is buffer
    assert buffer == bytearray(b"Hello friend!")


def test_replace_inplace_limit_and_bytes():
    buffer = bytearray(b"a.b.c")
    replace_inplace(buffer, b".", b"..", 1)
    assert buffer == bytearray(b"a..b.c")


def test_replace_inplace_empty_pattern():
    buffer = bytearray(b"abc")
    assert replace_inplace(buffer, "", "x") == bytearray(b"abc")


# ....................{ STRIP / SPLIT                      }....................
def test_strip():
    assert strip("a-b--c-", "-") == "abc"
    assert strip("abc", "z") == "abc"


def test_strip_rejects_multiple_characters():
    with pytest.raises(ValueError, match="single character"):
        strip("abc", "ab")


def test_strip_inplace():
    buffer = bytearray(b"1,000,000")
    assert strip_inplace(buffer, ",") is buffer
    assert buffer == bytearray(b"1000000")


def test_split_drops_empty_tokens():
    assert split("a,,b; c", ",; ") == ["a", "b", "c"]
    assert split("  one two  ") == ["one", "two"]
    assert split(",,,", ",") == []
    assert split("", ",") == []


def test_split_without_delimiters():
    assert split("a b", "") == ["a b"]


# ....................{ CAPITALIZE                         }....................
def test_capitalize_limit():
    assert capitalize("hello there friend!", 2) == "Hello There friend!"
    assert decapitalize("Hello There Friend!", 2) == "hello there Friend!"


def test_capitalize_default_first_word():
    assert capitalize("hello there") == "Hello there"


def test_capitalize_all():
    assert capitalize("hello there friend!", 0) == "Hello There Friend!"
    assert decapitalize(" Two Quantities Are", 0) == " two quantities are"


def test_capitalize_leading_space():
    text = " two quantities are in the golden "
    assert capitalize(text, 3) == " Two Quantities Are in the golden "


def test_capitalize_only_spaces_start_words():
    assert capitalize("one\ttwo\nthree four", 0) == "One\ttwo\nthree Four"


def test_capitalize_non_letters_use_up_limit():
    assert capitalize("a  b c", 2) == "A  b c"
    assert capitalize("1 a b", 1) == "1 A b"


def test_capitalize_empty():
    assert capitalize("", 0) == ""
