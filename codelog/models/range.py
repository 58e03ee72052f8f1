from pydantic import BaseModel


class TextPosition(BaseModel):
    """A zero-based line/column position inside a document"""
    line: int
    column: int

    def __lt__(self, other: 'TextPosition') -> bool:
        return (self.line, self.column) < (other.line, other.column)

    def __le__(self, other: 'TextPosition') -> bool:
        return (self.line, self.column) <= (other.line, other.column)


class TextRange(BaseModel):
    """Represents a range in a document (zero-based lines and columns, end exclusive)"""
    start_line: int
    start_column: int
    end_line: int
    end_column: int

    @property
    def start(self) -> TextPosition:
        return TextPosition(line=self.start_line, column=self.start_column)

    @property
    def end(self) -> TextPosition:
        return TextPosition(line=self.end_line, column=self.end_column)

    def contains(self, position: TextPosition) -> bool:
        """Inclusive on both ends, like an editor range."""
        return self.start <= position <= self.end

    def contains_range(self, other: 'TextRange') -> bool:
        return self.contains(other.start) and self.contains(other.end)
