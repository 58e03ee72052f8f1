"""
Log snippet rendering.

Turns a language template into the final text inserted below the line the
user triggered the command on. Rendering is a pure function of its arguments
and the configuration snapshot.
"""
import logging
import re
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from codelog.core.config import LogConfig
from codelog.languages.registry import SUPPORTED_LANGUAGES, resolve_command, resolve_language
from codelog.languages.templates import resolve_template

logger = logging.getLogger(__name__)

DEFAULT_VARIABLE_NAME = 'variable'

ACCESSIBLE_PREFIXES: Mapping[str, str] = MappingProxyType({
    '🔍': '[DEBUG]',
    '⚠️': '[WARNING]',
    '❌': '[ERROR]',
    '✅': '[SUCCESS]',
    '📝': '[INFO]',
    '🚀': '[LAUNCH]',
    '💡': '[TIP]',
    '🛑': '[STOP]',
    '⭐': '[IMPORTANT]',
    '🔄': '[UPDATE]',
    '🔒': '[SECURE]',
    '📊': '[DATA]',
})

# {{{name}}}, {{&name}} and {{name}} all interpolate without escaping.
_PLACEHOLDER_RE = re.compile(r'\{\{\{\s*([\w.]+)\s*\}\}\}|\{\{\s*&?\s*([\w.]+)\s*\}\}')
_TRAILING_SEMICOLON_RE = re.compile(r';$', re.MULTILINE)


def render_template(template: str, context: Mapping[str, Any]) -> str:
    """
    Substitute placeholders in a single pass.

    Values are inserted verbatim and never re-scanned; unknown placeholders
    render as an empty string.
    """
    def replace(match: re.Match) -> str:
        name = match.group(1) or match.group(2)
        value = context.get(name)
        return '' if value is None else str(value)

    return _PLACEHOLDER_RE.sub(replace, template)


def accessible_prefix(prefix: str) -> str:
    """Bracketed text for a known emoji prefix, the prefix itself otherwise."""
    return ACCESSIBLE_PREFIXES.get(prefix, prefix)


def strip_trailing_semicolons(text: str) -> str:
    """Remove a ``;`` that ends a line; semicolons elsewhere are kept."""
    return _TRAILING_SEMICOLON_RE.sub('', text)


def indent_of(line_text: str) -> str:
    """Leading whitespace of a line, converted to spaces the way the editor reports it."""
    return ' ' * (len(line_text) - len(line_text.lstrip()))


def resolve_variable_name(selected_text: Optional[str] = None, word_under_cursor: Optional[str] = None) -> str:
    """Selected text, else the word under the cursor, else ``variable``."""
    selected = (selected_text or '').strip()
    return selected or word_under_cursor or DEFAULT_VARIABLE_NAME


class SnippetRenderer:
    """Renders log snippets for one configuration snapshot."""

    def __init__(self, config: Optional[LogConfig] = None):
        self.config = config or LogConfig()

    def effective_language(self, language_id: str) -> str:
        return resolve_language(language_id, self.config.default_language, SUPPORTED_LANGUAGES)

    def template_for(self, language: str) -> Optional[str]:
        return resolve_template(language, self.config.custom_log_templates)

    def build_context(self, indent: str, file_name: str, function_name: str,
                      variable_name: str, line_number: int, language: str) -> Dict[str, Any]:
        """Placeholder values for ``language``; every key is always present."""
        config = self.config
        prefix = config.log_message_prefix
        if config.use_accessible_logs:
            prefix = accessible_prefix(prefix)
        delimiter = config.message_log_delimiter
        return {
            'indent': indent,
            'logCommand': resolve_command(language, config.log_command),
            'quote': "'" if config.use_single_quotes else '"',
            'logMessagePrefix': prefix,
            'messageLogDelimiter': f' {delimiter} ' if delimiter else '',
            'fileName': file_name,
            'lineNumber': line_number,
            'functionName': function_name,
            'variableName': variable_name,
            'messageLogSuffix': config.message_log_suffix,
            'literalOpen': config.literal_open,
            'literalClose': config.literal_close,
        }

    def wrap(self, content: str, context: Mapping[str, Any]) -> str:
        """Apply the border wrap and blank-line padding settings to ``content``."""
        config = self.config
        if config.is_log_message_wrapped:
            border = (
                f"{context['indent']}{context['logCommand']}({context['quote']}"
                f"{context['logMessagePrefix']}{context['messageLogDelimiter']}"
                f"{config.border_wrap_character * config.border_wrap_length}"
                f"{context['messageLogDelimiter']}{context['quote']});"
            )
            content = f'{border}\n{content}{border}\n'
        if config.add_empty_line_before_log_message:
            content = f'\n{content}'
        if config.add_empty_line_after_log:
            content = f'{content}\n'
        return content

    def render(self, indent: str, file_name: str, function_name: str,
               variable_name: str, line_number: int, language_id: str) -> str:
        """
        Render the log snippet for a cursor position.

        Args:
            indent: Whitespace prefix of the triggering line
            file_name: Path of the document relative to the project root
            function_name: Enclosing function name, may be empty
            variable_name: Expression being logged
            line_number: 1-based line number reported in the message
            language_id: Editor language id of the document

        Returns:
            The snippet text, or an empty string when no template exists for
            the effective language
        """
        language = self.effective_language(language_id)
        template = self.template_for(language)
        if template is None:
            return ''
        context = self.build_context(indent, file_name, function_name, variable_name, line_number, language)
        snippet = self.wrap(render_template(template, context), context)
        if not self.config.is_semicolon_required:
            snippet = strip_trailing_semicolons(snippet)
        logger.debug(f'Rendered {language} snippet for {variable_name!r} at {file_name}:{line_number}')
        return snippet
