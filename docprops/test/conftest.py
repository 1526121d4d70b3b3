import pytest

from docprops.config import get_settings
from docprops.domain.models import MethodKind, SetterName
from docprops.infrastructure.namespace.symbol_table import SymbolTable


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch, tmp_path):
    """Isolate every test from the developer's environment and cached settings."""
    for key in ["LOG_LEVEL", "LOG_FILE", "CASE_SENSITIVE", "WORD_EXTRA_CHARS", "KEYWORD_MARKER"]:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def namespace() -> SymbolTable:
    """A namespace with a few functions, variables and slot methods."""
    ns = SymbolTable()
    ns.add_function("foo", ["x", "y"], docstring="Add X to y using foo.", exported=True)
    ns.add_function("bar")
    ns.add_variable("*limit*", docstring="Upper bound.")
    ns.add_variable("count")

    # box.width: reader and matching setter
    ns.add_method("width", MethodKind.READER, "box", "width", exported=True)
    ns.add_method(SetterName("width"), MethodKind.WRITER, "box", "width")
    # box.height: reader and unrelated writer
    ns.add_method("height", MethodKind.READER, "box", "height", exported=True)
    ns.add_method("set-height", MethodKind.WRITER, "box", "height", exported=True)
    # box.depth: internal reader only
    ns.add_method("%depth", MethodKind.READER, "box", "depth")
    return ns
