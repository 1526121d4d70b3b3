"""In-memory namespace backed by explicitly registered symbols."""

import logging
import re
from typing import Dict, Iterable, List, Optional, Sequence, Set

from docprops.application.interfaces.inamespace import INamespace
from docprops.config import DEFAULT_KEYWORD_MARKER
from docprops.domain.models import (
    MethodDescriptor,
    MethodKind,
    MethodName,
    setter_target_of,
)

_NUMBER_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


class SymbolTable(INamespace):
    """Namespace whose functions, variables and methods are registered by hand.

    Names are stored as given. When ``case_sensitive`` is False, interning
    upper-cases the raw text and every registered name is upper-cased too,
    so ``foo``, ``Foo`` and ``FOO`` resolve to the same symbol.
    """

    def __init__(
        self,
        case_sensitive: bool = True,
        keyword_marker: str = DEFAULT_KEYWORD_MARKER,
    ):
        """Initialize an empty table.

        Args:
            case_sensitive: Whether names keep their case when interned
            keyword_marker: Leading character of keyword tokens, which never
                intern to names of this namespace
        """
        self.case_sensitive = case_sensitive
        self.keyword_marker = keyword_marker
        self.logger = logging.getLogger(__name__)
        self._functions: Dict[str, List[str]] = {}
        self._variables: Set[str] = set()
        self._docstrings: Dict[str, str] = {}
        self._methods: List[MethodDescriptor] = []
        self._exported: Set[str] = set()

    def _canonical(self, name: str) -> str:
        return name if self.case_sensitive else name.upper()

    def add_function(
        self,
        name: str,
        parameters: Iterable[str] = (),
        docstring: Optional[str] = None,
        exported: bool = False,
    ) -> None:
        """Register a callable with its parameter names and docstring."""
        key = self._canonical(name)
        self._functions[key] = list(parameters)
        if docstring is not None:
            self._docstrings[key] = docstring
        if exported:
            self._exported.add(key)

    def add_variable(
        self, name: str, docstring: Optional[str] = None, exported: bool = False
    ) -> None:
        """Register a name bound to a value."""
        key = self._canonical(name)
        self._variables.add(key)
        if docstring is not None:
            self._docstrings[key] = docstring
        if exported:
            self._exported.add(key)

    def add_method(
        self,
        name: MethodName,
        kind: MethodKind,
        owner: str,
        slot: str,
        exported: bool = False,
    ) -> MethodDescriptor:
        """Register a reader or writer method specialized on ``owner``'s ``slot``."""
        descriptor = MethodDescriptor(name=name, kind=kind, owner=owner, slot=slot)
        self._methods.append(descriptor)
        if exported:
            self.export(name)
        return descriptor

    def export(self, name: MethodName) -> None:
        """Mark ``name`` as visible outside the namespace."""
        self._exported.add(self._export_key(name))

    def _export_key(self, name: MethodName) -> str:
        # A setter is visible exactly when the name it sets is.
        target = setter_target_of(name)
        return self._canonical(target if target is not None else str(name))

    def intern_name(self, raw: str) -> Optional[str]:
        if not raw or raw.startswith(self.keyword_marker):
            return None
        if _NUMBER_PATTERN.match(raw):
            return None
        return self._canonical(raw)

    def is_callable(self, name: str) -> bool:
        return name in self._functions

    def is_bound_value(self, name: str) -> bool:
        return name in self._variables

    def specialized_methods(self, cls: str, slot: str) -> Sequence[MethodDescriptor]:
        methods = [m for m in self._methods if m.owner == cls and m.slot == slot]
        self.logger.debug(f"Found {len(methods)} methods on {cls}.{slot}")
        return methods

    def is_exported(self, name: MethodName) -> bool:
        return self._export_key(name) in self._exported

    def setter_target(self, name: MethodName) -> Optional[str]:
        return setter_target_of(name)

    def docstring(self, name: str) -> Optional[str]:
        return self._docstrings.get(self._canonical(name))

    def parameter_names(self, name: str) -> List[str]:
        return list(self._functions.get(self._canonical(name), []))
