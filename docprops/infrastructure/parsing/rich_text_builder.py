from typing import Iterable, List, Optional, Tuple, Union

from docprops.application.services.exceptions import InvalidSegmentError
from docprops.domain.models import (
    Category,
    RichText,
    RichTextNode,
    TaggedSegment,
    TokenCategory,
)

SegmentInput = Union[str, TaggedSegment, Tuple[Category, object]]


class RichTextBuilder:
    """
    Folds a sequence of plain strings and tagged regions into rich text.
    """

    @classmethod
    def fold(cls, content: Union[str, Iterable[SegmentInput]]) -> RichText:
        """
        Merge adjacent plain strings and fold tagged regions recursively.

        A plain string is returned unchanged. Regions tagged as plain text
        are spliced into the surrounding run, keeping their own tagged
        regions. Plain elements must be strings; a (None, content) pair is
        rejected.
        """
        if isinstance(content, str):
            return content

        nodes: List[RichTextNode] = []
        run: List[str] = []

        for element in content:
            category, children = cls._unpack(element)
            if category is None:
                run.append(children)
                continue
            if category is TokenCategory.PLAIN_TEXT:
                # Splice the folded region so its own tagged regions survive
                folded = cls.fold(children)
                for node in [folded] if isinstance(folded, str) else folded:
                    if isinstance(node, str):
                        run.append(node)
                        continue
                    if run:
                        nodes.append("".join(run))
                        run = []
                    nodes.append(node)
                continue

            # Flush the plain run before the tagged region
            if run:
                nodes.append("".join(run))
                run = []
            nodes.append(TaggedSegment(category, cls.fold(children)))

        if run:
            nodes.append("".join(run))

        return nodes

    @staticmethod
    def _unpack(element: SegmentInput) -> Tuple[Optional[Category], object]:
        if isinstance(element, str):
            return None, element
        if isinstance(element, TaggedSegment) and element.category is not None:
            return element.category, element.children
        if isinstance(element, tuple) and len(element) == 2 and element[0] is not None:
            return element[0], element[1]
        raise InvalidSegmentError(f"Cannot fold rich text element {element!r}")
