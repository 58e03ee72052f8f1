"""
End-to-end tests for the CodeLog facade.
"""
import pytest

from codelog import CodeLog, LogConfig
from codelog.main import word_at

PY_CODE = 'def compute(total):\n    result = total * 2\n    return result\n'


def test_insert_log_python_uses_tree_sitter_symbols():
    app = CodeLog()
    new_code, snippet = app.insert_log(PY_CODE, 1, 'python', 'pkg/calc.py', column=6)
    assert snippet == '    print(f"🔍 ~ compute ~ pkg/calc.py:2 ~ {result}:")\n'
    assert new_code == (
        'def compute(total):\n'
        '    result = total * 2\n'
        '    print(f"🔍 ~ compute ~ pkg/calc.py:2 ~ {result}:")\n'
        '    return result\n'
    )


def test_inserted_log_is_found_again():
    app = CodeLog()
    new_code, snippet = app.insert_log(PY_CODE, 1, 'python', 'pkg/calc.py', column=6)
    entries = app.classify(new_code, 'python')
    assert len(entries) == 1
    entry = entries[0]
    assert entry.line == 3
    assert entry.full_text == snippet.strip()
    assert entry.function_name == 'compute'
    assert app.remove(new_code, 'python') == PY_CODE


def test_insert_log_javascript_regex_fallback(app):
    code = 'const load = async (id) => {\n  const user = fetch(id);\n};\n'
    new_code, snippet = app.insert_log(code, 0, 'javascript', 'src/api.js', column=26, selected_text='id')
    assert snippet == 'console.log("🔍 ~ load ~ src/api.js:1 ~ id:", id)\n'
    assert new_code.splitlines()[1] == 'console.log("🔍 ~ load ~ src/api.js:1 ~ id:", id)'


def test_insert_log_defaults_to_variable(app):
    _, snippet = app.insert_log('  \n', 0, 'javascript', 'a.js')
    assert snippet == '  console.log("🔍 ~  ~ a.js:1 ~ variable:", variable)\n'


def test_insert_log_without_template_leaves_code():
    app = CodeLog(LogConfig(default_language='cobol'), symbol_lookup=lambda c, l: [])
    assert app.insert_log('x\n', 0, 'plaintext', 'a.txt') == ('x\n', '')


def test_comment_uncomment_cycle(app):
    code = 'function f() {\n  console.log("a", a);\n  console.log("b", b);\n}\n'
    commented = app.comment(code, 'javascript', lines=[2])
    assert commented.splitlines()[1] == '  // console.log("a", a);'
    assert app.comment(commented, 'javascript', lines=[2]) == commented
    assert app.uncomment(commented, 'javascript') == code
    assert app.uncomment(code, 'javascript') == code


def test_edit_and_remove_selection(app):
    code = 'console.log(1);\nconsole.log(2);\n'
    assert app.edit(code, 'javascript', 'console.warn', lines=[2]) == 'console.log(1);\nconsole.warn(2);\n'
    assert app.remove(code, 'javascript', lines=[1]) == 'console.log(2);\n'


def test_language_helpers(app):
    assert app.language_for_file('a/b.rb') == 'ruby'
    assert app.language_for_file('README') == 'javascript'
    assert app.log_command('kotlin') == 'println'
    assert app.comment_token('haskell') == '-- '
    assert 'python' in app.supported_languages()


def test_from_config_file(tmp_path):
    path = tmp_path / 'settings.json'
    path.write_text('{"logCommand": "logger.debug"}', encoding='utf8')
    app = CodeLog.from_config_file(str(path))
    assert app.log_command('python') == 'logger.debug'


@pytest.mark.parametrize('line, column, expected', [
    ('  const total = price * qty;', 9, 'total'),
    ('  const total = price * qty;', 13, 'total'),
    ('a + b', 2, ''),
    ('$scope.x', 0, '$scope'),
])
def test_word_at(line, column, expected):
    assert word_at(line, column) == expected
