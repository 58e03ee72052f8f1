"""
Configuration snapshot for codelog.

``LogConfig`` is an immutable pydantic model: every setting has a default, the
engines only ever read it, and ``update`` produces a new snapshot. Settings are
accepted either in snake_case or in the camelCase spelling used by the editor
settings (``logMessagePrefix``, ``isSemicolonRequired``...).
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from codelog.core.error_handling import InvalidConfigurationError, MissingConfigurationError
from codelog.models.enums import HighlightStyle
from codelog.models.template import LogTemplate

logger = logging.getLogger(__name__)

SETTINGS_SECTION = 'codeLogPlus'

DEFAULT_INCLUDE_PATTERNS = [
    '**/*.js', '**/*.jsx', '**/*.ts', '**/*.tsx', '**/*.java', '**/*.cs',
    '**/*.php', '**/*.dart', '**/*.py', '**/*.cpp', '**/*.rb', '**/*.go',
    '**/*.kt', '**/*.swift', '**/*.scala', '**/*.lua', '**/*.pl', '**/*.ex',
    '**/*.hs',
]
DEFAULT_EXCLUDE_PATTERNS = [
    '**/node_modules/**', '**/dist/**', '**/out/**', '**/build/**',
    '**/vendor/**', '**/.git/**',
]


class LogConfig(BaseModel):
    """Settings consumed by the renderer, locator, highlighter and workspace scan."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra='ignore',
    )

    enable: bool = True
    default_language: str = 'javascript'
    log_command: str = ''
    is_log_message_wrapped: bool = False
    border_wrap_character: str = '-'
    border_wrap_length: int = Field(default=20, ge=0)
    log_message_prefix: str = '🔍'
    use_accessible_logs: bool = False
    message_log_delimiter: str = '~'
    message_log_suffix: str = ':'
    is_semicolon_required: bool = False
    add_empty_line_before_log_message: bool = False
    add_empty_line_after_log: bool = False
    use_single_quotes: bool = False
    literal_open: str = '{'
    literal_close: str = '}'
    highlight_color: str = '#FFD700'
    highlight_style: HighlightStyle = HighlightStyle.WAVY
    custom_log_templates: List[LogTemplate] = Field(default_factory=list)
    included_file_patterns: List[str] = Field(default_factory=lambda: list(DEFAULT_INCLUDE_PATTERNS))
    excluded_file_patterns: List[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE_PATTERNS))
    max_search_recursion_depth: int = Field(default=0, ge=0)
    supports_hidden_files: bool = True
    preserve_gitignore_settings: bool = False
    include_file_path: bool = True

    @field_validator('included_file_patterns', 'excluded_file_patterns', mode='before')
    @classmethod
    def _as_list(cls, value: Any) -> Any:
        # A single glob may be given as a plain string.
        if isinstance(value, str):
            return [value]
        return value

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'LogConfig':
        """
        Build a configuration from a settings mapping.

        Accepts flat keys, keys prefixed with ``codeLogPlus.`` (as found in an
        editor ``settings.json``), a nested ``codeLogPlus`` section, and file
        settings nested under ``files``.

        Raises:
            InvalidConfigurationError: If a value fails validation
        """
        settings = _flatten(data)
        try:
            config = cls.model_validate(settings)
        except ValidationError as e:
            first = e.errors()[0]
            setting = '.'.join(str(part) for part in first.get('loc', ())) or 'configuration'
            raise InvalidConfigurationError(setting, first.get('input'), first.get('msg', str(e))) from e
        logger.debug(f'Loaded configuration with {len(settings)} explicit settings')
        return config

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'LogConfig':
        """
        Load a configuration from a JSON file.

        Raises:
            MissingConfigurationError: If the file does not exist
            InvalidConfigurationError: If the file is not valid JSON or a value is invalid
        """
        path = Path(path)
        if not path.is_file():
            raise MissingConfigurationError(str(path))
        try:
            data = json.loads(path.read_text(encoding='utf8'))
        except json.JSONDecodeError as e:
            raise InvalidConfigurationError(str(path), None, f'invalid JSON: {e}') from e
        if not isinstance(data, dict):
            raise InvalidConfigurationError(str(path), type(data).__name__, 'expected a JSON object')
        return cls.from_dict(data)

    def update(self, **changes: Any) -> 'LogConfig':
        """Return a new snapshot with ``changes`` applied (snake_case or camelCase keys)."""
        fields = type(self).model_fields
        aliases = {field.alias: name for name, field in fields.items() if field.alias}
        merged = self.model_dump()
        for key, value in _flatten(changes).items():
            merged[aliases.get(key, key)] = value
        return type(self).from_dict(merged)

    def to_settings(self) -> Dict[str, Any]:
        """Dump using the camelCase setting names."""
        return self.model_dump(mode='json', by_alias=True)


def _flatten(data: Mapping[str, Any]) -> Dict[str, Any]:
    settings: Dict[str, Any] = {}
    section = data.get(SETTINGS_SECTION)
    if isinstance(section, Mapping):
        settings.update(_flatten(section))
    prefix = SETTINGS_SECTION + '.'
    for key, value in data.items():
        if key == SETTINGS_SECTION:
            continue
        if key.startswith(prefix):
            key = key[len(prefix):]
        if key == 'files' and isinstance(value, Mapping):
            settings.update(value)
        elif key.startswith('files.'):
            settings[key[len('files.'):]] = value
        else:
            settings[key] = value
    return settings
