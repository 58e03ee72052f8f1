"""
Document edits driven by located log entries.

Each function takes the full document text and returns the edited text. Edits
are applied from the end of the document backwards so that the offsets of
entries not yet processed stay valid. An entry nested inside another one (a log
call in the arguments of a log call) is skipped; the outer statement covers it.
"""
import logging
import re
from typing import Iterable, List, Optional, Sequence

from codelog.core.utils.text import line_bounds
from codelog.languages.registry import get_comment_token
from codelog.models.log_entry import LogEntry

logger = logging.getLogger(__name__)

_LEADING_CALL_RE = re.compile(r'^(\s*)([\w.:$]+)(\s*\()')


def _descending(entries: Iterable[LogEntry]) -> List[LogEntry]:
    return sorted(entries, key=lambda entry: entry.start, reverse=True)


def _outermost(entries: Iterable[LogEntry]) -> List[LogEntry]:
    """Drop entries nested inside another entry's ``[start, end)``, descending by start."""
    kept: List[LogEntry] = []
    for entry in sorted(entries, key=lambda entry: (entry.start, -entry.end)):
        if kept and entry.start < kept[-1].end:
            continue
        kept.append(entry)
    return kept[::-1]


def select_entries(entries: Sequence[LogEntry], lines: Optional[Iterable[int]] = None) -> List[LogEntry]:
    """Entries starting on one of ``lines`` (1-based); all entries when ``lines`` is None."""
    if lines is None:
        return list(entries)
    wanted = set(lines)
    return [entry for entry in entries if entry.line in wanted]


def insert_snippet(code: str, line_index: int, snippet: str) -> str:
    """
    Insert ``snippet`` at the beginning of the line after ``line_index`` (0-based).

    When the triggering line is the last one and has no newline, one is added
    so the snippet starts on its own line.
    """
    if not snippet:
        return code
    offset = 0
    for _ in range(line_index + 1):
        newline = code.find('\n', offset)
        if newline == -1:
            if code and not code.endswith('\n'):
                return code + '\n' + snippet
            return code + snippet
        offset = newline + 1
    return code[:offset] + snippet + code[offset:]


def comment_entries(code: str, entries: Sequence[LogEntry], language_id: str) -> str:
    """Insert the comment token at the start of every entry that is not commented yet."""
    token = get_comment_token(language_id)
    changed = 0
    for entry in _outermost(entries):
        line_start, _ = line_bounds(code, entry.start)
        if code[line_start:entry.start].strip().startswith(token.strip()):
            continue
        code = code[:entry.start] + token + code[entry.start:]
        changed += 1
    logger.debug(f'Commented {changed} log statements')
    return code


def uncomment_entries(code: str, entries: Sequence[LogEntry], language_id: str) -> str:
    """
    Remove the comment token in front of each entry's line.

    The token is only removed when it directly follows the line's leading
    whitespace; a token anywhere else on the line is left alone.
    """
    token = get_comment_token(language_id)
    seen_lines = set()
    changed = 0
    for entry in _descending(entries):
        line_start, line_end = line_bounds(code, entry.start)
        if line_start in seen_lines:
            continue
        seen_lines.add(line_start)
        line_text = code[line_start:line_end]
        indent = len(line_text) - len(line_text.lstrip())
        if line_text.startswith(token, indent):
            token_start = line_start + indent
            code = code[:token_start] + code[token_start + len(token):]
            changed += 1
    logger.debug(f'Uncommented {changed} log statements')
    return code


def remove_entries(code: str, entries: Sequence[LogEntry]) -> str:
    """
    Delete the statements of ``entries``.

    A statement that is alone on its lines is removed together with those
    lines (indentation, a trailing ``;`` and the newline). Otherwise only the
    statement text and a directly following ``;`` are removed.
    """
    for entry in _outermost(entries):
        start, end = entry.start, min(entry.end, len(code))
        if end < len(code) and code[end] == ';':
            end += 1
        line_start, _ = line_bounds(code, start)
        _, line_end = line_bounds(code, end)
        before = code[line_start:start]
        after = code[end:line_end]
        if not before.strip() and not after.strip():
            start = line_start
            end = line_end + 1 if line_end < len(code) else line_end
        code = code[:start] + code[end:]
    return code


def edit_entries(code: str, entries: Sequence[LogEntry], new_command: str) -> str:
    """Replace the call name of each entry with ``new_command``, keeping its arguments."""
    if not new_command:
        return code
    for entry in _outermost(entries):
        statement = code[entry.start:entry.end]
        updated = _LEADING_CALL_RE.sub(lambda m: f'{m.group(1)}{new_command}{m.group(3)}', statement, count=1)
        code = code[:entry.start] + updated + code[entry.end:]
    return code
