from .enums import HighlightStyle, SymbolKind
from .range import TextPosition, TextRange
from .template import LogTemplate
from .log_entry import ClassifiedLogEntry, LogEntry
from .symbol import DocumentSymbol
from .decoration import Decoration
from .workspace import WorkspaceFile, WorkspaceLogLine

__all__ = [
    'ClassifiedLogEntry',
    'Decoration',
    'DocumentSymbol',
    'HighlightStyle',
    'LogEntry',
    'LogTemplate',
    'SymbolKind',
    'TextPosition',
    'TextRange',
    'WorkspaceFile',
    'WorkspaceLogLine',
]
