"""
docprops: documentation property extraction with cross-referenced docstrings and slot accessor summaries.
"""

from docprops.application.services.docstring_service import DocstringService
from docprops.application.services.accessor_service import (
    SlotAccessorService,
    classify,
)
from docprops.infrastructure.namespace.symbol_table import SymbolTable
from docprops.config import Settings, get_settings

__version__ = "0.1.0"

__all__ = [
    "DocstringService",
    "SlotAccessorService",
    "classify",
    "SymbolTable",
    "Settings",
    "get_settings",
]
