"""
Call-level entry points for hosts.

Each function takes the configuration snapshot explicitly; nothing is cached
between calls.
"""
from typing import List, Optional

from codelog.core.classifier import EntryClassifier, SymbolLookup
from codelog.core.config import LogConfig
from codelog.core.locator import StatementLocator
from codelog.core.renderer import SnippetRenderer
from codelog.languages.registry import get_comment_token
from codelog.models.log_entry import ClassifiedLogEntry, LogEntry


def render_log_snippet(config: LogConfig, indent: str, file_name: str, function_name: str,
                       variable_name: str, line_number: int, language_id: str) -> str:
    """Log snippet text for a cursor position, empty when no template applies."""
    return SnippetRenderer(config).render(indent, file_name, function_name, variable_name, line_number, language_id)


def find_log_entries(config: LogConfig, source_text: str, language_id: str) -> List[LogEntry]:
    """Log statements of ``source_text`` in source order."""
    return StatementLocator(config).find_log_entries(source_text, language_id)


def get_resolved_log_command(config: LogConfig, language_id: str) -> str:
    """The command both rendering and discovery use for ``language_id``."""
    return StatementLocator(config).resolve_command(language_id)


def classify_log_entries(config: LogConfig, source_text: str, language_id: str,
                         symbol_lookup: Optional[SymbolLookup] = None) -> List[ClassifiedLogEntry]:
    """Located and enriched log statements of ``source_text``."""
    return EntryClassifier(config, symbol_lookup).find_and_classify(source_text, language_id)


__all__ = [
    'classify_log_entries',
    'find_log_entries',
    'get_comment_token',
    'get_resolved_log_command',
    'render_log_snippet',
]
