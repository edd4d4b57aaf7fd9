"""
Substring predicates.

Case-insensitive comparisons fold ASCII letters only.
"""

__all__ = [
    "starts_with",
    "ends_with",
    "is_abbreviation_of",
    "equal",
    "count_occurrences",
    "any_word_matches",
]

from typing import Iterable, Iterator

from ustr._checks import require_non_negative
from ustr.text.manipulate import to_lower


def _fold(text: str, case_sensitive: bool) -> str:
    return text if case_sensitive else to_lower(text)


def _matches_pairwise(
    left: Iterator[str],
    right: Iterator[str],
    limit: int,
) -> bool:
    """
    Walk both iterators in step while characters agree.

    Returns True once limit characters have matched (limit > 0) or
    when both iterators run out together.
    """
    sentinel = object()
    matched = 0
    while True:
        a = next(left, sentinel)
        b = next(right, sentinel)
        if a is sentinel or b is sentinel:
            return a is sentinel and b is sentinel
        if a != b:
            return False
        matched += 1
        if limit and matched >= limit:
            return True


def _affix_matches(
    text: str,
    affix: str,
    case_sensitive: bool,
    limit: int,
    from_end: bool,
) -> bool:
    require_non_negative("limit", limit)
    if affix is text:
        return True
    if len(affix) > len(text) or not text or not affix:
        return False
    text = _fold(text, case_sensitive)
    affix = _fold(affix, case_sensitive)
    if from_end:
        text, affix = text[::-1], affix[::-1]
    # Only the overlapping part of text takes part in the comparison.
    return _matches_pairwise(iter(text[: len(affix)]), iter(affix), limit)


def starts_with(
    text: str,
    prefix: str,
    case_sensitive: bool = False,
    limit: int = 0,
) -> bool:
    """
    Check whether text begins with prefix.

    Args:
        text: Source text
        prefix: Prefix to look for
        case_sensitive: Compare letters with their case
        limit: Only compare the first limit characters (0 compares all)

    Returns:
        True if text begins with prefix. Always True when both arguments
        are the same object; False if prefix is longer than text or
        either is empty.

    Example:
        >>> starts_with("Hello world!", "hello")
        True
        >>> starts_with("Hello there!", "HelAA", True, 3)
        True
    """
    return _affix_matches(text, prefix, case_sensitive, limit, from_end=False)


def ends_with(
    text: str,
    suffix: str,
    case_sensitive: bool = False,
    limit: int = 0,
) -> bool:
    """
    Check whether text ends with suffix.

    The limit counts characters from the end of both strings.

    Example:
        >>> ends_with("Hello world!", "World!")
        True
        >>> ends_with("Hello there!", "AAAre!", True, 3)
        True
    """
    return _affix_matches(text, suffix, case_sensitive, limit, from_end=True)


def is_abbreviation_of(
    short: str,
    long: str,
    case_sensitive: bool = False,
    min_length: int = 1,
) -> bool:
    """
    Check whether short is an abbreviation of long.

    Args:
        short: Candidate abbreviation
        long: Full word
        case_sensitive: Compare letters with their case
        min_length: Minimum length short must have

    Returns:
        True if short is a non-empty prefix of long at least min_length long

    Example:
        >>> is_abbreviation_of("mag", "magic", True, 3)
        True
        >>> is_abbreviation_of("ma", "magic", True, 3)
        False
    """
    require_non_negative("min_length", min_length)
    if not short or len(short) < min_length or len(short) > len(long):
        return False
    return _fold(long, case_sensitive).startswith(_fold(short, case_sensitive))


def equal(a: str, b: str, case_sensitive: bool = False, limit: int = 0) -> bool:
    """
    Compare two strings, optionally only up to limit characters.

    With limit 0 this is plain equality (under the case rule). With a
    positive limit, strings that agree on their first limit characters
    compare equal even if they differ afterwards.

    Example:
        >>> equal("Hello", "hello")
        True
        >>> equal("cat", "catalog", limit=3)
        True
        >>> equal("str", "stat")
        False
    """
    require_non_negative("limit", limit)
    return _matches_pairwise(
        iter(_fold(a, case_sensitive)), iter(_fold(b, case_sensitive)), limit
    )


def count_occurrences(text: str, pattern: str, case_sensitive: bool = True) -> int:
    """
    Count non-overlapping literal occurrences of pattern in text.

    Example:
        >>> count_occurrences("apple orange apple apple", "apple")
        3
        >>> count_occurrences("Cat, Dog, cat, Cat", "cat", case_sensitive=False)
        3
    """
    if not text or not pattern:
        return 0
    return _fold(text, case_sensitive).count(_fold(pattern, case_sensitive))


def any_word_matches(
    control: str,
    words: Iterable[str],
    case_sensitive: bool = False,
    check_prefix: bool = False,
    check_suffix: bool = False,
    check_exact: bool = True,
) -> bool:
    """
    Check control against a list of words.

    Args:
        control: Text to look for
        words: Candidate words
        case_sensitive: Compare letters with their case
        check_prefix: Accept a word that begins with control
        check_suffix: Accept a word that ends with control
        check_exact: Accept a word equal to control

    Returns:
        True if any enabled check holds for any word

    Example:
        >>> any_word_matches("mag", ["magic", "tragic"], check_prefix=True)
        True
        >>> any_word_matches("gic", ["magic"], check_suffix=True, check_exact=False)
        True
    """
    for word in words:
        if check_exact and equal(word, control, case_sensitive):
            return True
        if check_prefix and starts_with(word, control, case_sensitive):
            return True
        if check_suffix and ends_with(word, control, case_sensitive):
            return True
    return False
