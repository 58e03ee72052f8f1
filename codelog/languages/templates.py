"""
Built-in log statement templates.

Templates use triple-brace placeholders (``{{{name}}}``) which are substituted
verbatim. The message part is shared by every language; only the call syntax
around it differs.
"""
import logging
from typing import Optional, Sequence

from codelog.models.template import LogTemplate

logger = logging.getLogger(__name__)

PLACEHOLDERS = (
    'indent',
    'logCommand',
    'quote',
    'logMessagePrefix',
    'messageLogDelimiter',
    'functionName',
    'fileName',
    'lineNumber',
    'variableName',
    'messageLogSuffix',
    'literalOpen',
    'literalClose',
)

_HEAD = '{{{indent}}}{{{logCommand}}}'
_LOCATION = (
    '{{{logMessagePrefix}}}{{{messageLogDelimiter}}}{{{functionName}}}'
    '{{{messageLogDelimiter}}}{{{fileName}}}:{{{lineNumber}}}{{{messageLogDelimiter}}}'
)
_MESSAGE = '{{{quote}}}' + _LOCATION + '{{{variableName}}}{{{messageLogSuffix}}}{{{quote}}}'
_INTERPOLATED_MESSAGE = (
    '{{{quote}}}' + _LOCATION
    + '{{{literalOpen}}}{{{variableName}}}{{{literalClose}}}{{{messageLogSuffix}}}{{{quote}}}'
)
_VAR = '{{{variableName}}}'


def _template(language: str, body: str) -> LogTemplate:
    return LogTemplate(language=language, template=body + '\n')


DEFAULT_TEMPLATES: Sequence[LogTemplate] = (
    _template('javascript', f'{_HEAD}({_MESSAGE}, {_VAR});'),
    _template('typescript', f'{_HEAD}({_MESSAGE}, {_VAR});'),
    _template('java', f'{_HEAD}({_MESSAGE} + {_VAR});'),
    _template('csharp', f'{_HEAD}({_MESSAGE} + {_VAR});'),
    _template('php', f'{_HEAD}({_MESSAGE} . {_VAR});'),
    _template('dart', f'{_HEAD}({_MESSAGE} + {_VAR});'),
    _template('python', f'{_HEAD}(f{_INTERPOLATED_MESSAGE});'),
    _template('cpp', f'{_HEAD} << {_MESSAGE} << {_VAR} << std::endl;'),
    _template('ruby', f'{_HEAD} {_MESSAGE}, {_VAR};'),
    _template('go', f'{_HEAD}({_MESSAGE}, {_VAR});'),
    _template('kotlin', f'{_HEAD}({_MESSAGE} + {_VAR});'),
    _template('swift', f'{_HEAD}({_MESSAGE}, {_VAR});'),
    _template('scala', f'{_HEAD}(s{_MESSAGE} + {_VAR});'),
    _template('lua', f'{_HEAD}({_MESSAGE} .. {_VAR});'),
    _template('perl', f'{_HEAD} {_MESSAGE} . {_VAR};'),
    _template('elixir', f'{{{{{{indent}}}}}}IO.puts({_MESSAGE} <> to_string({_VAR}));'),
    _template('haskell', f'{_HEAD} (({_MESSAGE}) ++ show {_VAR});'),
)


def _find(language: str, templates: Optional[Sequence[LogTemplate]]) -> Optional[LogTemplate]:
    for template in templates or ():
        if template.language == language:
            return template
    return None


def resolve_template(language: str,
                     user_templates: Optional[Sequence[LogTemplate]] = None,
                     default_templates: Sequence[LogTemplate] = DEFAULT_TEMPLATES) -> Optional[str]:
    """
    Find the template text for ``language``.

    User templates are searched first, then the defaults; the first template
    whose ``language`` matches wins. A missing or empty template yields
    ``None``. The returned text always ends with a newline.
    """
    found = _find(language, user_templates) or _find(language, default_templates)
    if found is None or not found.template:
        logger.debug(f"No log template for language '{language}'")
        return None
    text = found.template
    return text if text.endswith('\n') else text + '\n'
