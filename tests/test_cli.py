import json

import pytest

from codelog.cli import _parse_lines, main

JS = 'function run() {\n  const total = 1;\n  console.log("a", a);\n}\n'


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "app.js"
    path.write_text(JS, encoding="utf8")
    return path


def test_insert_prints_new_code(source, capsys):
    main(["insert", str(source), "--line", "2", "--column", "9"])
    out = capsys.readouterr().out
    assert 'console.log("🔍 ~ run ~ ' in out
    assert 'app.js:2 ~ total:", total)' in out
    assert source.read_text(encoding="utf8") == JS


def test_insert_snippet_only(source, capsys):
    main(["insert", str(source), "--line", "2", "--variable", "total", "--root", str(source.parent),
          "--snippet-only"])
    assert capsys.readouterr().out == '  console.log("🔍 ~ run ~ app.js:2 ~ total:", total)\n'


def test_insert_write(source):
    main(["insert", str(source), "--line", "2", "--variable", "total", "--root", str(source.parent), "--write"])
    lines = source.read_text(encoding="utf8").splitlines()
    assert lines[2] == '  console.log("🔍 ~ run ~ app.js:2 ~ total:", total)'


def test_find_raw_json(source, capsys):
    main(["find", str(source), "--raw-json"])
    entries = json.loads(capsys.readouterr().out)
    assert len(entries) == 1
    assert entries[0]["line"] == 3
    assert entries[0]["log"] == "a"
    assert entries[0]["is_commented"] is False


def test_find_table(source, capsys, monkeypatch):
    monkeypatch.setenv("COLUMNS", "200")
    main(["find", str(source)])
    out = capsys.readouterr().out
    assert "Line" in out
    assert "Commented" in out


def test_comment_write(source):
    main(["comment", str(source), "--write"])
    assert '  // console.log("a", a);' in source.read_text(encoding="utf8")
    main(["uncomment", str(source), "--write"])
    assert source.read_text(encoding="utf8") == JS


def test_remove_to_stdout(source, capsys):
    main(["remove", str(source)])
    assert capsys.readouterr().out == 'function run() {\n  const total = 1;\n}\n'


def test_edit_selected_lines(source, capsys):
    main(["edit", str(source), "--command", "console.error", "--lines", "3"])
    assert 'console.error("a", a);' in capsys.readouterr().out


def test_nothing_to_do(source, capsys):
    main(["uncomment", str(source)])
    assert "Nothing to do" in capsys.readouterr().out


def test_scan_raw_json(tmp_path, source, capsys):
    main(["scan", str(tmp_path), "--raw-json"])
    data = json.loads(capsys.readouterr().out)
    assert [node["relative_path"] for node in data["files"]] == ["app.js"]
    assert data["files"][0]["logs"] == [{"line": 3, "text": 'console.log("a", a);'}]


def test_language_override_and_config(tmp_path, capsys):
    path = tmp_path / "script.txt"
    path.write_text("print(x)\nconsole.log(x)\n", encoding="utf8")
    settings = tmp_path / "settings.json"
    settings.write_text('{"codeLogPlus.defaultLanguage": "python"}', encoding="utf8")
    main(["--config", str(settings), "find", str(path), "--raw-json"])
    assert [e["full_text"] for e in json.loads(capsys.readouterr().out)] == ["print(x)"]
    main(["--language", "javascript", "find", str(path), "--raw-json"])
    assert [e["full_text"] for e in json.loads(capsys.readouterr().out)] == ["console.log(x)"]


def test_missing_config_exits(tmp_path, source):
    with pytest.raises(SystemExit) as exc_info:
        main(["--config", str(tmp_path / "nope.json"), "find", str(source)])
    assert exc_info.value.code == 1


def test_missing_file_exits(tmp_path):
    with pytest.raises(SystemExit):
        main(["find", str(tmp_path / "missing.js")])


def test_parse_lines():
    assert _parse_lines("3, 7,") == {3, 7}
    assert _parse_lines(None) is None
