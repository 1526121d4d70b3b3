import pytest
from docprops.application.interfaces.inamespace import INamespace
from docprops.application.services.docstring_service import DocstringService
from docprops.application.services.exceptions import NameLookupError
from docprops.domain.models import TaggedSegment, TokenCategory, to_plain_text
from docprops.infrastructure.namespace.symbol_table import SymbolTable


def test_parse_function_reference(namespace: SymbolTable):
    service = DocstringService(namespace, case_sensitive=False)
    assert service.parse("call foo now", []) == [
        "call ",
        TaggedSegment(TokenCategory.FUNCTION_REF, "foo"),
        " now",
    ]


def test_parse_keyword(namespace: SymbolTable):
    service = DocstringService(namespace)
    assert service.parse("lala :lolo", []) == [
        "lala ",
        TaggedSegment(TokenCategory.KEYWORD_REF, ":lolo"),
    ]


def test_parse_empty(namespace: SymbolTable):
    assert DocstringService(namespace).parse("", ["x"]) == []


def test_parse_only_delimiters(namespace: SymbolTable):
    assert DocstringService(namespace).parse(" (.) ", []) == [" (.) "]


def test_parse_variable_and_arguments(namespace: SymbolTable):
    service = DocstringService(namespace)
    result = service.parse("Clamp X to *limit*, see bar.", ["x"])
    assert result == [
        "Clamp ",
        TaggedSegment(TokenCategory.ARGUMENT_REF, "X"),
        " to ",
        TaggedSegment(TokenCategory.VARIABLE_REF, "*limit*"),
        ", see ",
        TaggedSegment(TokenCategory.FUNCTION_REF, "bar"),
        ".",
    ]


def test_argument_beats_function(namespace: SymbolTable):
    """
    A word that is both an argument and a callable is reported as an argument.
    """
    service = DocstringService(namespace)
    result = service.parse("foo", ["foo"])
    assert result == [TaggedSegment(TokenCategory.ARGUMENT_REF, "foo")]


def test_case_sensitivity(namespace: SymbolTable):
    insensitive = DocstringService(namespace, case_sensitive=False)
    sensitive = DocstringService(namespace, case_sensitive=True)

    assert insensitive.classify_word("width", frozenset({"WIDTH"})) is TokenCategory.ARGUMENT_REF
    assert sensitive.parse("the width", ["WIDTH"]) == ["the width"]
    assert sensitive.parse("the WIDTH", ["WIDTH"]) == [
        "the ",
        TaggedSegment(TokenCategory.ARGUMENT_REF, "WIDTH"),
    ]
    assert insensitive.parse("the width", ["WIDTH"]) == [
        "the ",
        TaggedSegment(TokenCategory.ARGUMENT_REF, "width"),
    ]


def test_case_sensitive_matches_only_upper_case_words(namespace: SymbolTable):
    service = DocstringService(namespace, case_sensitive=True)
    assert service.parse("x", ["x"]) == ["x"]
    assert service.parse("X", ["X"]) == [TaggedSegment(TokenCategory.ARGUMENT_REF, "X")]


def test_case_sensitivity_from_settings(namespace: SymbolTable, monkeypatch):
    monkeypatch.setenv("CASE_SENSITIVE", "true")
    service = DocstringService(namespace)
    assert service.case_sensitive is True
    assert service.parse("x", ["X"]) == ["x"]


def test_argument_names_compared_by_string_form(namespace: SymbolTable):
    class Arg:
        def __str__(self):
            return "limit"

    result = DocstringService(namespace).parse("LIMIT it", [Arg()])
    assert result[0] == TaggedSegment(TokenCategory.ARGUMENT_REF, "LIMIT")


def test_numbers_stay_plain(namespace: SymbolTable):
    assert DocstringService(namespace).parse("use 42 items", []) == ["use 42 items"]


class FailingNamespace(SymbolTable):
    """Namespace that refuses to intern anything."""

    def intern_name(self, raw):
        raise NameLookupError(raw)


def test_lookup_failures_fall_through():
    service = DocstringService(FailingNamespace())
    assert service.parse("foo :bar baz", []) == [
        "foo ",
        TaggedSegment(TokenCategory.KEYWORD_REF, ":bar"),
        " baz",
    ]


@pytest.mark.parametrize(
    "text",
    [
        "call foo now",
        "  leading and trailing  ",
        "Clamp X to *limit*,\n\tsee bar (and :keys).",
        "---",
        "émigré foo→bar",
    ],
)
def test_parse_is_lossless(namespace: SymbolTable, text: str):
    result = DocstringService(namespace).parse(text, ["x"])
    assert to_plain_text(result) == text


def test_custom_word_characters(namespace: SymbolTable):
    service = DocstringService(namespace, word_extra_chars="")
    # '*' now delimits, so *limit* is no longer a single word
    assert service.parse("*limit*", []) == ["*limit*"]


def test_parse_docstring_of(namespace: SymbolTable):
    service = DocstringService(namespace)
    assert service.parse_docstring_of("foo") == [
        "Add ",
        TaggedSegment(TokenCategory.ARGUMENT_REF, "X"),
        " to ",
        TaggedSegment(TokenCategory.ARGUMENT_REF, "y"),
        " using ",
        TaggedSegment(TokenCategory.FUNCTION_REF, "foo"),
        ".",
    ]
    assert service.parse_docstring_of("bar") is None


def test_namespace_is_abstract():
    with pytest.raises(TypeError):
        INamespace()  # type: ignore


def test_function_beats_variable(namespace: SymbolTable):
    """
    A name that is both callable and bound is reported as a function.
    """
    namespace.add_function("both")
    namespace.add_variable("both")
    assert DocstringService(namespace).parse("both", []) == [
        TaggedSegment(TokenCategory.FUNCTION_REF, "both")
    ]


class KeywordValueNamespace(SymbolTable):
    """Namespace in which keyword-marked words intern to bound values."""

    def intern_name(self, raw):
        return raw or None

    def is_bound_value(self, name):
        return name == ":kw"


def test_variable_beats_keyword():
    result = DocstringService(KeywordValueNamespace()).parse(":kw :other", [])
    assert result == [
        TaggedSegment(TokenCategory.VARIABLE_REF, ":kw"),
        " ",
        TaggedSegment(TokenCategory.KEYWORD_REF, ":other"),
    ]
