"""
Offset/line helpers for plain source strings.
"""
from typing import List, Tuple

from codelog.models.range import TextPosition, TextRange


def line_starts(code: str) -> List[int]:
    """Offsets at which each line of ``code`` begins."""
    starts = [0]
    index = code.find('\n')
    while index != -1:
        starts.append(index + 1)
        index = code.find('\n', index + 1)
    return starts


def position_at(code: str, offset: int) -> TextPosition:
    """Zero-based line/column of a character offset."""
    offset = max(0, min(offset, len(code)))
    line = code.count('\n', 0, offset)
    line_start = code.rfind('\n', 0, offset) + 1
    return TextPosition(line=line, column=offset - line_start)


def range_between(code: str, start: int, end: int) -> TextRange:
    start_pos = position_at(code, start)
    end_pos = position_at(code, end)
    return TextRange(start_line=start_pos.line, start_column=start_pos.column,
                     end_line=end_pos.line, end_column=end_pos.column)


def line_bounds(code: str, offset: int) -> Tuple[int, int]:
    """Start offset of the line holding ``offset`` and the offset of its newline (or end of text)."""
    start = code.rfind('\n', 0, offset) + 1
    end = code.find('\n', offset)
    return start, len(code) if end == -1 else end


def line_text_at(code: str, offset: int) -> str:
    start, end = line_bounds(code, offset)
    return code[start:end]
