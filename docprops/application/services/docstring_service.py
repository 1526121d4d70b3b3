"""Service that turns documentation strings into cross-referenced rich text."""

import logging
from typing import Iterable, List, Optional

from docprops.application.interfaces.inamespace import INamespace
from docprops.application.services.exceptions import NameLookupError
from docprops.config import get_settings
from docprops.domain.models import RichTextNode, TaggedSegment, TokenCategory
from docprops.infrastructure.parsing.rich_text_builder import RichTextBuilder
from docprops.infrastructure.parsing.splitter import split_preserving, word_predicate


class DocstringService:
    """Tokenizes documentation strings and classifies their words.

    Words are checked, in order, against the bound argument names, the
    callables of the namespace, its bound values and the keyword marker.
    The classified words are then folded into rich text: runs of plain
    words and delimiters become single strings, classified words become
    tagged segments.
    """

    def __init__(
        self,
        namespace: INamespace,
        case_sensitive: Optional[bool] = None,
        word_extra_chars: Optional[str] = None,
        keyword_marker: Optional[str] = None,
    ):
        """Initialize the service.

        Args:
            namespace: Namespace used to resolve words to names
            case_sensitive: Match upper-case words to argument names exactly
                (other words never match); defaults to the configured CASE_SENSITIVE
            word_extra_chars: Non-alphanumeric characters allowed in words;
                defaults to the configured WORD_EXTRA_CHARS
            keyword_marker: Leading character of keyword words; defaults to
                the configured KEYWORD_MARKER
        """
        settings = get_settings()
        self.namespace = namespace
        self.case_sensitive = (
            settings.CASE_SENSITIVE if case_sensitive is None else case_sensitive
        )
        self.keyword_marker = keyword_marker or settings.KEYWORD_MARKER
        is_word = word_predicate(
            settings.WORD_EXTRA_CHARS if word_extra_chars is None else word_extra_chars
        )
        self._is_delimiter = lambda char: not is_word(char)
        self.logger = logging.getLogger(__name__)

    def parse(
        self, text: str, bound_arg_names: Iterable[object] = ()
    ) -> List[RichTextNode]:
        """Parse a documentation string into rich text.

        Args:
            text: The documentation string
            bound_arg_names: Argument names of the documented callable,
                compared by their string form. Matching ignores case unless
                the service is case sensitive, in which case only words
                already in upper-case form match, and only exactly

        Returns:
            Plain strings and tagged segments in document order; joining
            their text gives back ``text``
        """
        arg_names = self._argument_keys(bound_arg_names)
        classified: List[RichTextNode] = []

        for token in split_preserving(text, self._is_delimiter):
            if token.delimiter:
                classified.append(token.text)
                continue
            category = self.classify_word(token.text, arg_names)
            if category is TokenCategory.PLAIN_TEXT:
                classified.append(token.text)
            else:
                classified.append(TaggedSegment(category, token.text))

        nodes = RichTextBuilder.fold(classified)
        self.logger.debug(
            f"Parsed {len(text)} characters into {len(nodes)} rich text nodes"
        )
        return nodes

    def classify_word(self, word: str, arg_names: Iterable[str] = ()) -> TokenCategory:
        """Classify a single content word.

        Args:
            word: A run of word characters
            arg_names: Argument names, already normalised for the case rule

        Returns:
            The first matching category, PLAIN_TEXT if none matches
        """
        if self.case_sensitive:
            # Only words already in upper-case form match, and exactly
            matched = word == word.upper() and word in arg_names
        else:
            matched = word.upper() in arg_names
        if matched:
            return TokenCategory.ARGUMENT_REF

        name = self._intern(word)
        if name is not None:
            if self.namespace.is_callable(name):
                return TokenCategory.FUNCTION_REF
            if self.namespace.is_bound_value(name):
                return TokenCategory.VARIABLE_REF

        if word.startswith(self.keyword_marker):
            return TokenCategory.KEYWORD_REF
        return TokenCategory.PLAIN_TEXT

    def parse_docstring_of(self, name: str) -> Optional[List[RichTextNode]]:
        """Parse the documentation string of a symbol of the namespace.

        The symbol's parameter names are used as the bound arguments.

        Returns:
            Rich text, or None if the symbol has no documentation string
        """
        text = self.namespace.docstring(name)
        if text is None:
            self.logger.debug(f"No documentation string for {name}")
            return None
        return self.parse(text, self.namespace.parameter_names(name))

    def _argument_keys(self, bound_arg_names: Iterable[object]) -> frozenset:
        names = (str(arg) for arg in bound_arg_names)
        if self.case_sensitive:
            return frozenset(names)
        return frozenset(n.upper() for n in names)

    def _intern(self, word: str) -> Optional[str]:
        try:
            return self.namespace.intern_name(word)
        except NameLookupError as e:
            self.logger.debug(f"Could not intern {word!r}: {e}")
            return None
