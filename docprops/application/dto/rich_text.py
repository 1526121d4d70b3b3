from pydantic import BaseModel
from typing import List, Optional, Union

from docprops.domain.models import (
    RichText,
    SlotRelationship,
    TaggedSegment,
    TokenCategory,
)


class SegmentResponse(BaseModel):
    category: Optional[str] = None
    text: Optional[str] = None
    children: List["SegmentResponse"] = []

    @classmethod
    def from_rich_text(cls, rich: Union[RichText, TaggedSegment]) -> List["SegmentResponse"]:
        """Convert rich text into a flat list of serializable segments."""
        if isinstance(rich, str):
            return [cls(text=rich)]
        if isinstance(rich, TaggedSegment):
            category = rich.category
            if isinstance(category, TokenCategory):
                category = category.value
            children = rich.children
            if isinstance(children, str):
                return [cls(category=category, text=children)]
            return [cls(category=category, children=cls.from_rich_text(children))]
        segments: List[SegmentResponse] = []
        for node in rich:
            segments.extend(cls.from_rich_text(node))
        return segments


class SlotAccessorResponse(BaseModel):
    role: str
    name: str

    @classmethod
    def from_relationship(cls, relationship: SlotRelationship) -> List["SlotAccessorResponse"]:
        return [cls(role=entry.role.value, name=str(entry.name)) for entry in relationship]


SegmentResponse.model_rebuild()
