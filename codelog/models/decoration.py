from pydantic import BaseModel

from .range import TextRange


class Decoration(BaseModel):
    """A highlighted span of a document and the hover text shown for it"""
    start: int
    end: int
    range: TextRange
    hover_message: str = ''
