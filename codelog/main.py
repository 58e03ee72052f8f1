import logging
import os
import re
from typing import Iterable, List, Optional, Tuple

from .core.classifier import EntryClassifier, SymbolLookup, extract_function_name, lookup_symbols
from .core.config import LogConfig
from .core.editing import (
    comment_entries,
    edit_entries,
    insert_snippet,
    remove_entries,
    select_entries,
    uncomment_entries,
)
from .core.engine.symbols import TreeSitterSymbolProvider
from .core.highlighter import LogHighlighter
from .core.locator import StatementLocator
from .core.renderer import SnippetRenderer, indent_of, resolve_variable_name
from .core.workspace import Workspace
from .languages.registry import get_comment_token, get_supported_languages, language_for_file
from .models.log_entry import ClassifiedLogEntry, LogEntry
from .models.range import TextPosition

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r'[\w$]+')


def word_at(line_text: str, column: int) -> str:
    """Identifier-like word touching ``column``, or an empty string."""
    for match in _WORD_RE.finditer(line_text):
        if match.start() <= column <= match.end():
            return match.group(0)
    return ''


class CodeLog:
    """
    Main entry point for codelog.
    Bundles a configuration snapshot with snippet insertion and log statement
    discovery/editing over in-memory documents.
    """

    def __init__(self, config: Optional[LogConfig] = None, symbol_lookup: Optional[SymbolLookup] = None):
        """
        Args:
            config: Configuration snapshot, defaults for every setting when omitted
            symbol_lookup: Document symbol provider; the tree-sitter provider when omitted
        """
        self.config = config or LogConfig()
        self.symbol_lookup = symbol_lookup if symbol_lookup is not None else TreeSitterSymbolProvider()
        self.renderer = SnippetRenderer(self.config)
        self.locator = StatementLocator(self.config)
        self.classifier = EntryClassifier(self.config, self.symbol_lookup)

    @classmethod
    def from_config_file(cls, path: str, symbol_lookup: Optional[SymbolLookup] = None) -> 'CodeLog':
        return cls(LogConfig.from_file(path), symbol_lookup)

    @staticmethod
    def load_file(file_path: str) -> str:
        with open(file_path, 'r', encoding='utf8', newline='') as f:
            return f.read()

    @staticmethod
    def supported_languages() -> List[str]:
        return get_supported_languages()

    def language_for_file(self, file_path: str) -> str:
        """Language id from the file extension, the configured default otherwise."""
        return language_for_file(file_path) or self.config.default_language

    def log_command(self, language_id: str) -> str:
        return self.locator.resolve_command(language_id)

    @staticmethod
    def comment_token(language_id: str) -> str:
        return get_comment_token(language_id)

    # ----- snippet insertion -----

    def render_snippet(self, indent: str, file_name: str, function_name: str,
                       variable_name: str, line_number: int, language_id: str) -> str:
        return self.renderer.render(indent, file_name, function_name, variable_name, line_number, language_id)

    def insert_log(
        self,
        code: str,
        line_index: int,
        language_id: str,
        file_name: str,
        *,
        column: int = 0,
        selected_text: Optional[str] = None,
    ) -> Tuple[str, str]:
        """
        Insert a log snippet below ``line_index`` (0-based).

        The logged expression is the selected text, else the word at
        ``column``, else ``variable``. The function name comes from the
        symbol provider, falling back to the line regex.

        Returns:
            Tuple of (new_code, snippet); the code is unchanged when no
            template exists for the language
        """
        lines = code.split('\n')
        line_text = lines[line_index] if 0 <= line_index < len(lines) else ''
        symbols = lookup_symbols(self.symbol_lookup, code, language_id)
        function_name = extract_function_name(code, TextPosition(line=line_index, column=column), symbols)
        variable_name = resolve_variable_name(selected_text, word_at(line_text, column))
        snippet = self.render_snippet(
            indent_of(line_text),
            file_name,
            function_name,
            variable_name,
            line_index + 1,
            language_id,
        )
        if not snippet:
            logger.info(f'No log template available for {language_id}')
            return code, snippet
        return insert_snippet(code, line_index, snippet), snippet

    # ----- discovery -----

    def find(self, code: str, language_id: str) -> List[LogEntry]:
        return self.locator.find_log_entries(code, language_id)

    def classify(self, code: str, language_id: str) -> List[ClassifiedLogEntry]:
        return self.classifier.find_and_classify(code, language_id)

    def highlighter(self) -> LogHighlighter:
        """A new highlighter owned by the caller."""
        return LogHighlighter(self.locator)

    # ----- editing -----

    def _selected(self, code: str, language_id: str, lines: Optional[Iterable[int]]) -> List[ClassifiedLogEntry]:
        return select_entries(self.classify(code, language_id), lines)

    def comment(self, code: str, language_id: str, lines: Optional[Iterable[int]] = None) -> str:
        entries = [e for e in self._selected(code, language_id, lines) if not e.is_commented]
        return comment_entries(code, entries, language_id)

    def uncomment(self, code: str, language_id: str, lines: Optional[Iterable[int]] = None) -> str:
        entries = [e for e in self._selected(code, language_id, lines) if e.is_commented]
        return uncomment_entries(code, entries, language_id)

    def remove(self, code: str, language_id: str, lines: Optional[Iterable[int]] = None) -> str:
        return remove_entries(code, select_entries(self.find(code, language_id), lines))

    def edit(self, code: str, language_id: str, new_command: str, lines: Optional[Iterable[int]] = None) -> str:
        return edit_entries(code, select_entries(self.find(code, language_id), lines), new_command)

    # ----- workspace -----

    def open_workspace(self, root: str) -> Workspace:
        """Open a workspace rooted at ``root`` and scan it for log statements."""
        return Workspace.open(os.fspath(root), self.config)
