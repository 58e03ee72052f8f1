"""
Models for located log statements.
Provides the raw entries produced by the statement locator and the enriched
variant the classifier builds for edit/remove/comment flows.
"""
from typing import Optional

from pydantic import BaseModel

from .range import TextRange


class LogEntry(BaseModel):
    """A log statement found in a source text.

    ``start``/``end`` are character offsets into the scanned text, ``end`` is
    exclusive and points just past the closing parenthesis.
    """
    start: int
    end: int
    line: int
    preview: str
    full_text: str

    @property
    def length(self) -> int:
        return self.end - self.start


class ClassifiedLogEntry(LogEntry):
    """Log entry with the attributes derived from its surrounding document"""
    indentation: str = ''
    function_name: str = ''
    is_commented: bool = False
    log: str = ''
    range: Optional[TextRange] = None

    @property
    def label(self) -> str:
        """Short picker-style label, ``Line N: preview``."""
        return f'Line {self.line}: {self.preview}'

    @property
    def description(self) -> str:
        return f'in {self.function_name}' if self.function_name else ''
