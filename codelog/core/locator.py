"""
Log statement discovery.

Scans source text for calls of the resolved log command and reports each
statement's extent. Statement ends are found by parenthesis balancing, so
nested calls inside the arguments are part of the statement.
"""
import logging
import re
from typing import List, Optional, Pattern

from codelog.core.config import LogConfig
from codelog.languages.registry import SUPPORTED_LANGUAGES, resolve_command, resolve_language
from codelog.models.log_entry import LogEntry

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 25
PREVIEW_ELLIPSIS = '...'


def escape_regexp(text: str) -> str:
    """Escape ``text`` for literal use inside a regular expression."""
    return re.escape(text)


def build_log_pattern(command: str) -> Pattern:
    """Pattern matching ``command`` followed by optional whitespace and ``(``."""
    return re.compile(escape_regexp(command) + r'\s*\(')


def find_closing_parenthesis(code: str, start_index: int) -> int:
    """
    Index just past the ``)`` that balances the first ``(`` at or after ``start_index``.

    Returns ``len(code)`` when the parentheses never balance.
    """
    depth = 0
    for index in range(start_index, len(code)):
        char = code[index]
        if char == '(':
            depth += 1
        elif char == ')':
            depth -= 1
            if depth == 0:
                return index + 1
    return len(code)


def line_number_at(code: str, offset: int) -> int:
    """1-based line number of ``offset``."""
    return code.count('\n', 0, offset) + 1


def make_preview(code: str, start: int) -> str:
    return code[start:start + PREVIEW_LENGTH].strip() + PREVIEW_ELLIPSIS


class StatementLocator:
    """Finds log statements for one configuration snapshot."""

    def __init__(self, config: Optional[LogConfig] = None):
        self.config = config or LogConfig()

    def resolve_command(self, language_id: str) -> str:
        """Log command used for ``language_id``, with the same resolution as the renderer."""
        language = resolve_language(language_id, self.config.default_language, SUPPORTED_LANGUAGES)
        return resolve_command(language, self.config.log_command)

    def find_log_entries(self, code: str, language_id: str) -> List[LogEntry]:
        """
        Locate every call of the resolved log command in ``code``.

        Args:
            code: Source text to scan
            language_id: Editor language id of the source

        Returns:
            Entries in ascending ``start`` order, empty when nothing matches
        """
        if not code:
            return []
        pattern = build_log_pattern(self.resolve_command(language_id))
        entries = []
        # finditer resumes right after each matched "cmd(" regardless of where
        # balancing ended.
        for match in pattern.finditer(code):
            start = match.start()
            end = find_closing_parenthesis(code, start)
            entries.append(LogEntry(
                start=start,
                end=end,
                line=line_number_at(code, start),
                preview=make_preview(code, start),
                full_text=code[start:end].strip(),
            ))
        logger.debug(f"Found {len(entries)} log statements matching '{pattern.pattern}'")
        return entries
