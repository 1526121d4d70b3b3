"""Service for describing how a class slot is read and written."""

import logging
from typing import Callable, Optional

from docprops.application.interfaces.inamespace import INamespace
from docprops.domain.models import (
    AccessorRole,
    MethodKind,
    MethodName,
    SlotAccessor,
    SlotRelationship,
    setter_target_of,
)

SetterTarget = Callable[[MethodName], Optional[str]]


def classify(
    reader: Optional[MethodName],
    writer: Optional[MethodName],
    setter_target: SetterTarget = setter_target_of,
) -> SlotRelationship:
    """Summarise a slot's reader and writer as accessor relationships.

    A reader paired with a writer that is the setter of that very reader
    collapses into a single ACCESSOR entry.

    Args:
        reader: Exported reader method of the slot, if any
        writer: Exported writer method of the slot, if any
        setter_target: Returns X for a setter-of(X) name, None otherwise

    Returns:
        Zero, one or two (role, name) entries
    """
    if reader is None and writer is None:
        return ()
    if writer is None:
        return (SlotAccessor(AccessorRole.READER, reader),)
    if reader is None:
        return (SlotAccessor(AccessorRole.WRITER, writer),)
    if setter_target(writer) == reader:
        return (SlotAccessor(AccessorRole.ACCESSOR, reader),)
    return (
        SlotAccessor(AccessorRole.READER, reader),
        SlotAccessor(AccessorRole.WRITER, writer),
    )


class SlotAccessorService:
    """Finds the reader and writer of a slot and classifies them.

    Only methods specialized on exactly the requested class and slot are
    considered, and candidates that are not exported from the namespace are
    dropped before classification.
    """

    def __init__(self, namespace: INamespace):
        """Initialize the service.

        Args:
            namespace: Namespace providing methods and export information
        """
        self.namespace = namespace
        self.logger = logging.getLogger(__name__)

    def describe_slot(self, cls: str, slot: str) -> SlotRelationship:
        """Describe how ``slot`` of ``cls`` is exposed.

        Args:
            cls: Name of the class
            slot: Name of the slot

        Returns:
            The accessor relationship of the slot
        """
        reader = self._exported(self.find_candidate(cls, slot, MethodKind.READER))
        writer = self._exported(self.find_candidate(cls, slot, MethodKind.WRITER))
        relationship = classify(reader, writer, self.namespace.setter_target)
        self.logger.debug(f"Slot {cls}.{slot} exposed as {relationship}")
        return relationship

    def find_candidate(
        self, cls: str, slot: str, kind: MethodKind
    ) -> Optional[MethodName]:
        """Get the first method of ``kind`` specialized on ``cls``'s ``slot``."""
        names = [
            m.name
            for m in self.namespace.specialized_methods(cls, slot)
            if m.kind is kind and m.owner == cls and m.slot == slot
        ]
        if not names:
            return None
        if len(names) > 1:
            # TODO: let the namespace rank duplicate candidates instead of taking the first
            self.logger.warning(
                f"{len(names)} {kind.value} methods for {cls}.{slot}, using {names[0]}"
            )
        return names[0]

    def _exported(self, name: Optional[MethodName]) -> Optional[MethodName]:
        if name is None:
            return None
        if not self.namespace.is_exported(name):
            self.logger.debug(f"Ignoring internal method {name}")
            return None
        return name
