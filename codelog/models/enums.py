"""
Enumerations shared by the codelog data models.
"""
from enum import Enum

class SymbolKind(str, Enum):
    """Kinds of document symbols a symbol provider can report"""
    FILE = 'file'
    MODULE = 'module'
    NAMESPACE = 'namespace'
    CLASS = 'class'
    INTERFACE = 'interface'
    METHOD = 'method'
    FUNCTION = 'function'
    CONSTRUCTOR = 'constructor'
    PROPERTY = 'property'
    VARIABLE = 'variable'
    UNKNOWN = 'unknown'

    @property
    def is_callable(self) -> bool:
        return self in (SymbolKind.FUNCTION, SymbolKind.METHOD)


class HighlightStyle(str, Enum):
    """Underline styles accepted by the highlighter"""
    SOLID = 'solid'
    DOUBLE = 'double'
    DOTTED = 'dotted'
    DASHED = 'dashed'
    WAVY = 'wavy'
