"""Delimiter-preserving splitting of documentation text."""

from dataclasses import dataclass
from typing import Callable, Collection, List, Union

from docprops.application.services.exceptions import DelimiterSpecError

DelimiterSpec = Union[str, Collection[str], Callable[[str], bool]]


@dataclass(frozen=True)
class SplitToken:
    """A content span of word characters or a single delimiter character."""

    text: str
    delimiter: bool = False


def delimiter_predicate(delimiter: DelimiterSpec) -> Callable[[str], bool]:
    """Turn a delimiter specification into a predicate over characters.

    Args:
        delimiter: A single character, a collection of single characters,
            or a predicate

    Returns:
        Predicate answering whether a character is a delimiter

    Raises:
        DelimiterSpecError: If the specification is none of the above
    """
    if isinstance(delimiter, str):
        if len(delimiter) != 1:
            raise DelimiterSpecError(
                f"Delimiter string must be a single character, got {delimiter!r}"
            )
        return lambda char: char == delimiter
    if callable(delimiter):
        return delimiter
    if isinstance(delimiter, Collection):
        chars = frozenset(delimiter)
        bad = [c for c in chars if not isinstance(c, str) or len(c) != 1]
        if bad:
            raise DelimiterSpecError(
                f"Delimiter set must contain single characters, got {bad!r}"
            )
        return lambda char: char in chars
    raise DelimiterSpecError(f"Unsupported delimiter specification: {delimiter!r}")


def word_predicate(extra_chars: str) -> Callable[[str], bool]:
    """Build the predicate for word characters: alphanumerics plus ``extra_chars``."""
    extra = frozenset(extra_chars)
    return lambda char: char.isalnum() or char in extra


def split_preserving(text: str, delimiter: DelimiterSpec) -> List[SplitToken]:
    """Split ``text`` into content runs and single-character delimiters.

    Every character of ``text`` ends up in exactly one token, in the
    original order, so joining the token texts gives back ``text``.

    Raises:
        DelimiterSpecError: If ``delimiter`` is malformed, before scanning
    """
    is_delimiter = delimiter_predicate(delimiter)
    tokens: List[SplitToken] = []
    start = 0

    for index, char in enumerate(text):
        if is_delimiter(char):
            if start < index:
                tokens.append(SplitToken(text[start:index]))
            tokens.append(SplitToken(char, delimiter=True))
            start = index + 1

    if start < len(text):
        tokens.append(SplitToken(text[start:]))

    return tokens
