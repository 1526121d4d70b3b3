"""Custom exceptions for the documentation property services."""


class DelimiterSpecError(ValueError):
    """Raised when a delimiter specification is malformed.

    A delimiter must be a single character, a collection of single
    characters, or a predicate over characters. The error is raised before
    any input is scanned.
    """


class NameLookupError(LookupError):
    """Raised by a namespace when a token cannot be interned as a name."""


class InvalidSegmentError(TypeError):
    """Raised when pre-structured rich text contains an unknown element.

    Elements must be plain strings, tagged segments or (category, content)
    pairs.
    """
