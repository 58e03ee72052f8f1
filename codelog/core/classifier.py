"""
Enrichment of located log entries.

The classifier adds what the edit/remove/comment flows need on top of the raw
locator output. Everything here is heuristic: the enclosing function comes
from a symbol lookup when one is available and otherwise from a regex over
the statement's line; comment state is decided from the line prefix only.

Function name fallback order:
    1. smallest function/method symbol containing the position
    2. ``const|let|var NAME = (async)? function|(...) =>`` on the same line
    3. empty string
"""
import logging
import re
from typing import Callable, List, Optional, Sequence

from codelog.core.config import LogConfig
from codelog.core.error_handling import handle_core_errors
from codelog.core.locator import StatementLocator
from codelog.core.utils.text import line_text_at, position_at, range_between
from codelog.languages.registry import get_comment_token
from codelog.models.log_entry import ClassifiedLogEntry, LogEntry
from codelog.models.range import TextPosition
from codelog.models.symbol import DocumentSymbol

logger = logging.getLogger(__name__)

SymbolLookup = Callable[[str, str], List[DocumentSymbol]]

FUNCTION_ASSIGNMENT_RE = re.compile(
    r'\b(?:const|let|var)\s+([\w$]+)\s*=\s*(?:async\s*)?(?:function\*?|\(.*\))\s*=>'
)
LOG_PAYLOAD_RE = re.compile(r',\s*([^)]*)\s*\)')


def find_function_symbol(symbols: Sequence[DocumentSymbol], position: TextPosition) -> Optional[DocumentSymbol]:
    """Innermost function or method symbol whose range contains ``position``."""
    for symbol in symbols:
        if not symbol.contains(position):
            continue
        nested = find_function_symbol(symbol.children, position)
        if nested is not None:
            return nested
        if symbol.kind.is_callable:
            return symbol
    return None


def function_name_from_line(line_text: str) -> str:
    match = FUNCTION_ASSIGNMENT_RE.search(line_text)
    return match.group(1) if match else ''


def extract_function_name(code: str, position: TextPosition,
                          symbols: Optional[Sequence[DocumentSymbol]] = None) -> str:
    """Name of the function enclosing ``position``, or an empty string."""
    if symbols:
        symbol = find_function_symbol(symbols, position)
        if symbol is not None:
            return symbol.name.strip()
    lines = code.split('\n')
    if 0 <= position.line < len(lines):
        return function_name_from_line(lines[position.line])
    return ''


def extract_log_payload(entry: LogEntry) -> str:
    """Argument text after the first comma of the call, falling back to the preview."""
    match = LOG_PAYLOAD_RE.search(entry.full_text)
    return match.group(1).strip() if match else entry.preview


def is_commented_line(line_text: str, comment_token: str) -> bool:
    return line_text.strip().startswith(comment_token.strip())


@handle_core_errors(list)
def lookup_symbols(symbol_lookup: Optional[SymbolLookup], code: str, language_id: str) -> List[DocumentSymbol]:
    """Run the host symbol lookup; failures degrade to no symbols."""
    if symbol_lookup is None:
        return []
    supports = getattr(symbol_lookup, 'supports', None)
    if supports is not None and not supports(language_id):
        logger.debug(f'No symbol information for {language_id}, using the line regex only')
        return []
    return list(symbol_lookup(code, language_id) or [])


class EntryClassifier:
    """Derives indentation, comment state, enclosing function and payload for entries."""

    def __init__(self, config: Optional[LogConfig] = None, symbol_lookup: Optional[SymbolLookup] = None):
        self.config = config or LogConfig()
        self.symbol_lookup = symbol_lookup
        self.locator = StatementLocator(self.config)

    def classify(self, code: str, entries: Sequence[LogEntry], language_id: str) -> List[ClassifiedLogEntry]:
        """Enrich ``entries`` previously located in ``code``."""
        if not entries:
            return []
        comment_token = get_comment_token(language_id)
        symbols = lookup_symbols(self.symbol_lookup, code, language_id)
        classified = []
        for entry in entries:
            start = position_at(code, entry.start)
            line_text = line_text_at(code, entry.start)
            classified.append(ClassifiedLogEntry(
                **entry.model_dump(),
                indentation=line_text[:start.column],
                is_commented=is_commented_line(line_text, comment_token),
                function_name=extract_function_name(code, start, symbols),
                log=extract_log_payload(entry),
                range=range_between(code, entry.start, entry.end),
            ))
        return classified

    def find_and_classify(self, code: str, language_id: str) -> List[ClassifiedLogEntry]:
        return self.classify(code, self.locator.find_log_entries(code, language_id), language_id)
