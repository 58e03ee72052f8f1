import json

import pytest
from pydantic import ValidationError

from codelog import LogConfig, LogTemplate
from codelog.core.config import DEFAULT_EXCLUDE_PATTERNS
from codelog.core.error_handling import InvalidConfigurationError, MissingConfigurationError
from codelog.models.enums import HighlightStyle


def test_defaults():
    config = LogConfig()
    assert config.enable
    assert config.default_language == 'javascript'
    assert config.log_command == ''
    assert config.log_message_prefix == '🔍'
    assert config.message_log_delimiter == '~'
    assert config.message_log_suffix == ':'
    assert config.border_wrap_character == '-'
    assert config.border_wrap_length == 20
    assert not config.is_semicolon_required
    assert config.literal_open == '{'
    assert config.literal_close == '}'
    assert config.highlight_color == '#FFD700'
    assert config.highlight_style == HighlightStyle.WAVY
    assert config.custom_log_templates == []
    assert config.excluded_file_patterns == DEFAULT_EXCLUDE_PATTERNS
    assert config.max_search_recursion_depth == 0
    assert config.supports_hidden_files
    assert not config.preserve_gitignore_settings


def test_camel_case_settings():
    config = LogConfig.from_dict({
        'logCommand': 'logger.info',
        'isSemicolonRequired': True,
        'customLogTemplates': [{'language': 'python', 'template': 'log({{{variableName}}})'}],
    })
    assert config.log_command == 'logger.info'
    assert config.is_semicolon_required
    assert config.custom_log_templates == [LogTemplate(language='python', template='log({{{variableName}}})')]


def test_prefixed_and_nested_settings():
    config = LogConfig.from_dict({
        'codeLogPlus.useSingleQuotes': True,
        'codeLogPlus': {'messageLogDelimiter': '|', 'files': {'maxSearchRecursionDepth': 2}},
        'codeLogPlus.files.supportsHiddenFiles': False,
        'editor.fontSize': 14,
    })
    assert config.use_single_quotes
    assert config.message_log_delimiter == '|'
    assert config.max_search_recursion_depth == 2
    assert not config.supports_hidden_files


def test_single_glob_string_becomes_list():
    config = LogConfig(included_file_patterns='**/*.py')
    assert config.included_file_patterns == ['**/*.py']


@pytest.mark.parametrize('settings, setting', [
    ({'borderWrapLength': -1}, 'borderWrapLength'),
    ({'highlightStyle': 'zigzag'}, 'highlightStyle'),
])
def test_invalid_values(settings, setting):
    with pytest.raises(InvalidConfigurationError) as exc_info:
        LogConfig.from_dict(settings)
    assert exc_info.value.setting == setting


def test_config_is_immutable():
    config = LogConfig()
    with pytest.raises(ValidationError):
        config.log_command = 'print'


def test_update_returns_new_snapshot():
    config = LogConfig()
    updated = config.update(logCommand='print', use_single_quotes=True)
    assert updated.log_command == 'print'
    assert updated.use_single_quotes
    assert config.log_command == ''
    assert not config.use_single_quotes


def test_to_settings_uses_camel_case():
    settings = LogConfig().to_settings()
    assert settings['logMessagePrefix'] == '🔍'
    assert settings['highlightStyle'] == 'wavy'


def test_from_file(tmp_path):
    path = tmp_path / 'settings.json'
    path.write_text(json.dumps({'codeLogPlus.logMessagePrefix': '❌'}), encoding='utf8')
    assert LogConfig.from_file(path).log_message_prefix == '❌'


def test_from_missing_file(tmp_path):
    with pytest.raises(MissingConfigurationError):
        LogConfig.from_file(tmp_path / 'missing.json')


@pytest.mark.parametrize('content', ['{not json', '[1, 2]'])
def test_from_bad_file(tmp_path, content):
    path = tmp_path / 'settings.json'
    path.write_text(content, encoding='utf8')
    with pytest.raises(InvalidConfigurationError):
        LogConfig.from_file(path)
