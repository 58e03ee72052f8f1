from .registry import (
    COMMENT_TOKENS,
    DEFAULT_LOG_COMMANDS,
    FALLBACK_LOG_COMMAND,
    SUPPORTED_LANGUAGES,
    get_comment_token,
    get_supported_languages,
    language_for_file,
    resolve_command,
    resolve_language,
)
from .templates import DEFAULT_TEMPLATES, resolve_template

__all__ = [
    'COMMENT_TOKENS',
    'DEFAULT_LOG_COMMANDS',
    'DEFAULT_TEMPLATES',
    'FALLBACK_LOG_COMMAND',
    'SUPPORTED_LANGUAGES',
    'get_comment_token',
    'get_supported_languages',
    'language_for_file',
    'resolve_command',
    'resolve_language',
    'resolve_template',
]
