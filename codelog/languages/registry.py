"""
Static per-language tables: supported language ids, default log commands,
comment tokens and file extensions.

Everything here is immutable; resolution helpers take the relevant
configuration values as arguments instead of reading shared state.
"""
import logging
import os
from types import MappingProxyType
from typing import Collection, Mapping, Optional

logger = logging.getLogger(__name__)

FALLBACK_LOG_COMMAND = 'console.log'
FALLBACK_COMMENT_TOKEN = '// '

SUPPORTED_LANGUAGES = (
    'javascript',
    'typescript',
    'java',
    'csharp',
    'php',
    'dart',
    'python',
    'cpp',
    'ruby',
    'go',
    'kotlin',
    'swift',
    'scala',
    'lua',
    'perl',
    'elixir',
    'haskell',
)

DEFAULT_LOG_COMMANDS: Mapping[str, str] = MappingProxyType({
    'javascript': 'console.log',
    'typescript': 'console.log',
    'java': 'System.out.println',
    'csharp': 'Console.WriteLine',
    'php': 'echo',
    'dart': 'print',
    'python': 'print',
    'cpp': 'std::cout',
    'ruby': 'puts',
    'go': 'fmt.Println',
    'kotlin': 'println',
    'swift': 'print',
    'scala': 'println',
    'lua': 'print',
    'perl': 'print',
    'elixir': 'IO.puts',
    'haskell': 'putStrLn',
})

_SLASH_COMMENT_LANGUAGES = (
    'javascript', 'typescript', 'java', 'csharp', 'cpp', 'go', 'php', 'dart',
    'kotlin', 'swift', 'scala',
)
_HASH_COMMENT_LANGUAGES = ('python', 'ruby', 'perl', 'r', 'elixir', 'shellscript')
_DASH_COMMENT_LANGUAGES = ('lua', 'haskell')

COMMENT_TOKENS: Mapping[str, str] = MappingProxyType({
    **{lang: '// ' for lang in _SLASH_COMMENT_LANGUAGES},
    **{lang: '# ' for lang in _HASH_COMMENT_LANGUAGES},
    **{lang: '-- ' for lang in _DASH_COMMENT_LANGUAGES},
})

FILE_EXTENSIONS: Mapping[str, str] = MappingProxyType({
    '.js': 'javascript',
    '.jsx': 'javascript',
    '.mjs': 'javascript',
    '.cjs': 'javascript',
    '.ts': 'typescript',
    '.tsx': 'typescript',
    '.mts': 'typescript',
    '.java': 'java',
    '.cs': 'csharp',
    '.php': 'php',
    '.dart': 'dart',
    '.py': 'python',
    '.cpp': 'cpp',
    '.cc': 'cpp',
    '.cxx': 'cpp',
    '.hpp': 'cpp',
    '.h': 'cpp',
    '.rb': 'ruby',
    '.go': 'go',
    '.kt': 'kotlin',
    '.kts': 'kotlin',
    '.swift': 'swift',
    '.scala': 'scala',
    '.lua': 'lua',
    '.pl': 'perl',
    '.pm': 'perl',
    '.ex': 'elixir',
    '.exs': 'elixir',
    '.hs': 'haskell',
    '.r': 'r',
    '.sh': 'shellscript',
    '.bash': 'shellscript',
})


def get_supported_languages() -> list:
    """Return the language ids that have a default command and template."""
    return list(SUPPORTED_LANGUAGES)


def resolve_language(requested: str, default_language: str,
                     supported: Collection[str] = SUPPORTED_LANGUAGES) -> str:
    """
    Pick the language used for command and template resolution.

    A supported ``requested`` id is used verbatim, anything else falls back to
    ``default_language`` without checking whether that one is supported.
    """
    if requested in supported:
        return requested
    logger.debug(f"Language '{requested}' is not supported, using default '{default_language}'")
    return default_language


def resolve_command(language: str, override: Optional[str] = None,
                    command_map: Mapping[str, str] = DEFAULT_LOG_COMMANDS) -> str:
    """
    Resolve the log command: explicit override, then the language default,
    then ``console.log``.
    """
    return override or command_map.get(language) or FALLBACK_LOG_COMMAND


def get_comment_token(language_id: str) -> str:
    """Line comment token (with its trailing space) for ``language_id``."""
    return COMMENT_TOKENS.get(language_id, FALLBACK_COMMENT_TOKEN)


def language_for_file(file_path: str) -> Optional[str]:
    """Guess a language id from a file extension, ``None`` when unknown."""
    ext = os.path.splitext(file_path)[1].lower()
    return FILE_EXTENSIONS.get(ext)
