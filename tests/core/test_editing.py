import pytest

from codelog import LogConfig, find_log_entries
from codelog.core.editing import (
    comment_entries,
    edit_entries,
    insert_snippet,
    remove_entries,
    select_entries,
    uncomment_entries,
)

JS = 'function f() {\n  console.log("a", a);\n  run();\n  console.log("b", b);\n}\n'


def entries_of(code, language_id='javascript'):
    return find_log_entries(LogConfig(), code, language_id)


@pytest.mark.parametrize('code, line_index, expected', [
    ('a\nb\nc', 0, 'a\nX\nb\nc'),
    ('a\nb\nc', 1, 'a\nb\nX\nc'),
    ('a\n', 0, 'a\nX\n'),
    ('a', 0, 'a\nX\n'),
    ('', 0, 'X\n'),
])
def test_insert_snippet(code, line_index, expected):
    assert insert_snippet(code, line_index, 'X\n') == expected


def test_insert_empty_snippet_is_noop():
    assert insert_snippet('a\nb', 0, '') == 'a\nb'


def test_select_entries_by_line():
    entries = entries_of(JS)
    assert [e.line for e in select_entries(entries, [4])] == [4]
    assert select_entries(entries, None) == entries
    assert select_entries(entries, []) == []


def test_comment_all_entries():
    commented = comment_entries(JS, entries_of(JS), 'javascript')
    assert commented == 'function f() {\n  // console.log("a", a);\n  run();\n  // console.log("b", b);\n}\n'


def test_comment_is_idempotent():
    once = comment_entries(JS, entries_of(JS), 'javascript')
    assert comment_entries(once, entries_of(once), 'javascript') == once


def test_uncomment_restores_source():
    commented = comment_entries(JS, entries_of(JS), 'javascript')
    assert uncomment_entries(commented, entries_of(commented), 'javascript') == JS


def test_uncomment_ignores_token_elsewhere_on_line():
    code = 'x = 1; // console.log("a", a);\n'
    assert uncomment_entries(code, entries_of(code), 'javascript') == code


def test_uncomment_line_with_two_statements_once():
    code = '# print(1); print(2)\n'
    assert uncomment_entries(code, entries_of(code, 'python'), 'python') == 'print(1); print(2)\n'


def test_python_comment_token():
    code = 'def f():\n    print(x)\n'
    assert comment_entries(code, entries_of(code, 'python'), 'python') == 'def f():\n    # print(x)\n'


def test_remove_whole_lines():
    assert remove_entries(JS, entries_of(JS)) == 'function f() {\n  run();\n}\n'


def test_remove_inline_statement_only():
    code = 'a(); console.log(x); b();'
    assert remove_entries(code, entries_of(code)) == 'a();  b();'


def test_remove_multiline_statement():
    code = 'a();\nconsole.log(\n  "x",\n  x\n);\nb();'
    assert remove_entries(code, entries_of(code)) == 'a();\nb();'


def test_remove_last_line_without_newline():
    code = 'a();\n  console.log(x);'
    assert remove_entries(code, entries_of(code)) == 'a();\n'


def test_remove_selected_lines_only():
    entries = select_entries(entries_of(JS), [2])
    assert remove_entries(JS, entries) == 'function f() {\n  run();\n  console.log("b", b);\n}\n'


def test_edit_command_keeps_arguments():
    code = 'console.log("a", a);\n  console.log("b", fn(b));'
    edited = edit_entries(code, entries_of(code), 'console.error')
    assert edited == 'console.error("a", a);\n  console.error("b", fn(b));'


def test_edit_python():
    code = 'print(x)\n'
    assert edit_entries(code, entries_of(code, 'python'), 'logger.debug') == 'logger.debug(x)\n'


def test_edit_with_empty_command_is_noop():
    assert edit_entries(JS, entries_of(JS), '') == JS


NESTED = 'console.log(console.log(x));\nkeep();\n'


def test_nested_entries_are_located_separately():
    assert len(entries_of(NESTED)) == 2


def test_remove_nested_statement_keeps_following_code():
    assert remove_entries(NESTED, entries_of(NESTED)) == 'keep();\n'


def test_edit_nested_statement_changes_outer_call_only():
    edited = edit_entries(NESTED, entries_of(NESTED), 'console.warn')
    assert edited == 'console.warn(console.log(x));\nkeep();\n'


def test_comment_nested_statement_once():
    commented = comment_entries(NESTED, entries_of(NESTED), 'javascript')
    assert commented == '// console.log(console.log(x));\nkeep();\n'
