"""Interface for the symbol namespace consulted while documenting."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from docprops.domain.models import MethodDescriptor, MethodName


class INamespace(ABC):
    """Read-only view of a namespace's symbol table.

    Defines the contract for how the documentation services resolve words
    to names and query those names. The implementation (an in-memory table,
    an adapter over a host's own metadata, etc.) lives in the
    infrastructure layer. Query methods must answer False or None for
    unknown names instead of raising.
    """

    @abstractmethod
    def intern_name(self, raw: str) -> Optional[str]:
        """Convert raw text to the namespace's canonical name form.

        Args:
            raw: A word taken from a documentation string

        Returns:
            The canonical name, or None if the text is not a valid name

        Raises:
            NameLookupError: Implementations may raise instead of returning None
        """
        pass

    @abstractmethod
    def is_callable(self, name: str) -> bool:
        """Check whether ``name`` denotes a callable."""
        pass

    @abstractmethod
    def is_bound_value(self, name: str) -> bool:
        """Check whether ``name`` is bound to a value."""
        pass

    @abstractmethod
    def specialized_methods(self, cls: str, slot: str) -> Sequence[MethodDescriptor]:
        """Get the methods specialized on ``slot`` of ``cls``.

        Args:
            cls: Name of the class
            slot: Name of the slot

        Returns:
            Method descriptors tagged as reader or writer, in discovery order
        """
        pass

    @abstractmethod
    def is_exported(self, name: MethodName) -> bool:
        """Check whether ``name`` is visible outside the namespace."""
        pass

    @abstractmethod
    def setter_target(self, name: MethodName) -> Optional[str]:
        """Return X if ``name`` is the compound setter-of(X) form, else None."""
        pass

    @abstractmethod
    def docstring(self, name: str) -> Optional[str]:
        """Get the full documentation string of ``name``, if any."""
        pass

    @abstractmethod
    def parameter_names(self, name: str) -> List[str]:
        """Get the parameter names of the callable ``name``.

        Returns:
            Parameter names in declaration order, empty for non-callables
        """
        pass
