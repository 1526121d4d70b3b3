"""
Domain models package.
"""

from .rich_text import (
    Category,
    RichText,
    RichTextNode,
    TaggedSegment,
    TokenCategory,
    to_plain_text,
)
from .accessor import (
    AccessorRole,
    MethodDescriptor,
    MethodKind,
    MethodName,
    SetterName,
    SlotAccessor,
    SlotRelationship,
    setter_target_of,
)

__all__ = [
    "Category",
    "RichText",
    "RichTextNode",
    "TaggedSegment",
    "TokenCategory",
    "to_plain_text",
    "AccessorRole",
    "MethodDescriptor",
    "MethodKind",
    "MethodName",
    "SetterName",
    "SlotAccessor",
    "SlotRelationship",
    "setter_target_of",
]
