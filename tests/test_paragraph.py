"""
Unit tests for the :mod:`ustr.text.paragraph` module.
"""

import re

import pytest

from ustr.text.paragraph import (
    merge_paragraph,
    split_paragraph,
    unwrap_paragraph,
    wrap_to_width,
)


def _collapse_spaces(text: str) -> str:
    return re.sub(" +", " ", text)


def test_wrap_fixed_words():
    assert wrap_to_width("AAAA BBBB CCCC DDDD", 4) == "AAAA\nBBBB\nCCCC\nDDDD"


def test_unwrap_fixed_words():
    assert unwrap_paragraph("AAAA\nBBBB\nCCCC\nDDDD") == "AAAA BBBB CCCC DDDD"


def test_aliases():
    assert split_paragraph is wrap_to_width
    assert merge_paragraph is unwrap_paragraph


def test_wrap_fills_lines_greedily():
    assert wrap_to_width("one two three", 8) == "one two\nthree"


def test_wrap_collapses_whitespace_run_at_break():
    assert wrap_to_width("AAAA  \t BBBB", 4) == "AAAA\nBBBB"


def test_wrap_trailing_whitespace_becomes_break():
    assert wrap_to_width("AAAA BBBB  ", 4) == "AAAA\nBBBB\n"


def test_wrap_short_text_untouched():
    assert wrap_to_width("short", 10) == "short"
    assert wrap_to_width("", 4) == ""


def test_wrap_stops_at_overlong_word():
    text = "AAAAAAAA BB CC"
    assert wrap_to_width(text, 4) == text


def test_wrap_stops_after_last_breakable_line():
    assert wrap_to_width("AA BB CCCCCCCC DD", 5) == "AA BB\nCCCCCCCC DD"


def test_wrap_never_rebreaks_earlier_line():
    assert wrap_to_width("A B CCCCCCCCCCC", 4) == "A B\nCCCCCCCCCCC"


def test_wrap_starts_after_existing_break():
    assert wrap_to_width("aa bb\ncc dd", 3) == "aa\nbb\ncc\ndd"


def test_wrap_zero_width_is_identity():
    assert wrap_to_width("AAAA BBBB", 0) == "AAAA BBBB"


def test_wrap_width_one_breaks_every_run():
    assert wrap_to_width("A B C", 1) == "A\nB\nC"


def test_wrap_terminates_when_newline_is_whitespace():
    assert wrap_to_width("AA\nBB CC", 2, whitespace=" \n") == "AA\nBB\nCC"


def test_wrap_custom_whitespace():
    assert wrap_to_width("AAAA-BBBB", 4, whitespace="-") == "AAAA\nBBBB"


def test_wrap_negative_width_rejected():
    with pytest.raises(ValueError, match="width"):
        wrap_to_width("AAAA", -1)


def test_unwrap_collapses_runs():
    assert unwrap_paragraph("one   two\n\n\nthree") == "one two three"


def test_unwrap_keeps_first_character():
    assert unwrap_paragraph("\nabc") == "\nabc"
    assert unwrap_paragraph(" a  b") == " a b"


def test_unwrap_does_not_rescan_output():
    assert unwrap_paragraph("a \nb") == "a  b"


def test_unwrap_short_inputs():
    assert unwrap_paragraph("") == ""
    assert unwrap_paragraph("\n") == "\n"


@pytest.mark.parametrize("width", [2, 3, 4, 7, 10, 40])
@pytest.mark.parametrize(
    "text",
    [
        "Two quantities are in the golden ratio if their ratio is the same "
        "as the ratio of their sum to the larger of the two quantities.",
        "a  b   c    d",
        "supercalifragilistic is long",
        "x",
    ],
)
def test_unwrap_inverts_wrap(text, width):
    assert unwrap_paragraph(wrap_to_width(text, width)) == _collapse_spaces(text)


@pytest.mark.parametrize(
    "text, width, expected",
    [
        # The first character is copied as-is, so only the run after it collapses.
        (" a  b", 2, " a b"),
        ("  a b", 3, "  a b"),
        ("\ta  b", 3, "\ta b"),
        # Tabs away from a break stay untouched.
        ("a\tb c", 3, "a\tb c"),
    ],
)
def test_unwrap_of_wrap_keeps_first_character(text, width, expected):
    assert unwrap_paragraph(wrap_to_width(text, width)) == expected


@pytest.mark.parametrize("width", [12, 20, 40])
def test_wrapped_lines_fit_width(width):
    text = (
        "Two quantities are in the golden ratio if their ratio is the same "
        "as the ratio of their sum to the larger of the two quantities."
    )
    for line in wrap_to_width(text, width).split("\n"):
        assert len(line) <= width
