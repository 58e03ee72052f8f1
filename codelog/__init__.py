from .models.log_entry import ClassifiedLogEntry, LogEntry
from .models.template import LogTemplate
from .core.config import LogConfig
from .core.service import (
    classify_log_entries,
    find_log_entries,
    get_comment_token,
    get_resolved_log_command,
    render_log_snippet,
)
from .core.engine.symbols import TreeSitterSymbolProvider
from .core.workspace import Workspace
from .main import CodeLog

__version__ = "1.0.0"
__all__ = [
    "ClassifiedLogEntry",
    "CodeLog",
    "LogConfig",
    "LogEntry",
    "LogTemplate",
    "TreeSitterSymbolProvider",
    "Workspace",
    "classify_log_entries",
    "find_log_entries",
    "get_comment_token",
    "get_resolved_log_command",
    "render_log_snippet",
]
