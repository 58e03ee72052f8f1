from typing import List

from pydantic import BaseModel, Field

from .enums import SymbolKind
from .range import TextPosition, TextRange


class DocumentSymbol(BaseModel):
    """A named symbol reported by a symbol provider, with nested children"""
    name: str
    kind: SymbolKind
    range: TextRange
    children: List['DocumentSymbol'] = Field(default_factory=list)

    def contains(self, position: TextPosition) -> bool:
        return self.range.contains(position)


DocumentSymbol.model_rebuild()
