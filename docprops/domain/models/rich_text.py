"""
Rich text domain model.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Union


class TokenCategory(Enum):
    """
    Category assigned to a word of a documentation string.

    - PLAIN_TEXT: Unclassified word or delimiter, merged with its neighbours.
    - ARGUMENT_REF: Word naming one of the documented callable's arguments.
    - FUNCTION_REF: Word naming a callable in the namespace.
    - VARIABLE_REF: Word naming a bound value in the namespace.
    - KEYWORD_REF: Word starting with the keyword marker.
    """

    PLAIN_TEXT = "plain-text"
    ARGUMENT_REF = "argument-ref"
    FUNCTION_REF = "function-ref"
    VARIABLE_REF = "variable-ref"
    KEYWORD_REF = "keyword-ref"


# Upstream markup parsers may tag regions with their own string categories.
Category = Union[TokenCategory, str]


@dataclass(frozen=True)
class TaggedSegment:
    """A tagged region of rich text whose children are rich text again."""

    category: Category
    children: "RichText"


RichTextNode = Union[str, TaggedSegment]
RichText = Union[str, List[RichTextNode]]


def to_plain_text(rich: RichText) -> str:
    """Concatenate every leaf string of ``rich``, dropping the tags.

    Args:
        rich: A plain string, a tagged segment or a sequence of nodes

    Returns:
        The text the rich structure was built from
    """
    if isinstance(rich, str):
        return rich
    if isinstance(rich, TaggedSegment):
        return to_plain_text(rich.children)
    return "".join(to_plain_text(node) for node in rich)
