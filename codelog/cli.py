"""Command-line interface for codelog."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import List, Optional, Set

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from codelog import CodeLog
from codelog.core.config import LogConfig
from codelog.core.error_handling import CodeLogError


def _parse_lines(value: Optional[str]) -> Optional[Set[int]]:
    """``"3,7"`` -> ``{3, 7}``; ``None`` selects every statement."""
    if not value:
        return None
    lines: Set[int] = set()
    for part in value.split(","):
        part = part.strip()
        if not part:
            continue
        if not part.isdigit():
            raise argparse.ArgumentTypeError(f"invalid line number: {part}")
        lines.add(int(part))
    return lines


def _load_source(file_path: str, console: Console) -> str:
    if not os.path.exists(file_path):
        console.print(f"[bold red]File not found:[/bold red] {file_path}")
        sys.exit(1)
    return CodeLog.load_file(file_path)


def _emit(file_path: str, new_code: str, write: bool, message: str, console: Console) -> None:
    """Write ``new_code`` back to ``file_path`` or print it to stdout."""
    if write:
        with open(file_path, "w", encoding="utf8", newline="") as fh:
            fh.write(new_code)
        console.print(Panel(message, style="green"))
    else:
        sys.stdout.write(new_code)


def _insert(app: CodeLog, args: argparse.Namespace, language: str, console: Console) -> None:
    code = _load_source(args.file, console)
    file_name = os.path.relpath(args.file, args.root) if args.root else args.file
    new_code, snippet = app.insert_log(
        code,
        args.line - 1,
        language,
        file_name.replace(os.sep, "/"),
        column=args.column,
        selected_text=args.variable,
    )
    if not snippet:
        console.print(f"[yellow]No log template for language:[/yellow] {language}")
        return
    if args.snippet_only:
        sys.stdout.write(snippet)
        return
    _emit(args.file, new_code, args.write, "Log inserted", console)


def _find(app: CodeLog, args: argparse.Namespace, language: str, console: Console) -> None:
    code = _load_source(args.file, console)
    entries = app.classify(code, language)
    if args.raw_json:
        print(json.dumps([entry.model_dump(mode="json") for entry in entries], indent=2))
        return
    if not entries:
        console.print("No logs found")
        return
    table = Table(title=f"{len(entries)} log statements in {args.file}")
    table.add_column("Line", justify="right")
    table.add_column("Function")
    table.add_column("Commented")
    table.add_column("Preview")
    table.add_column("Log")
    for entry in entries:
        table.add_row(
            str(entry.line),
            Text(entry.function_name),
            "yes" if entry.is_commented else "",
            Text(entry.preview),
            Text(entry.log),
        )
    console.print(table)


def _highlight(app: CodeLog, args: argparse.Namespace, language: str, console: Console) -> None:
    code = _load_source(args.file, console)
    highlighter = app.highlighter()
    decorations = highlighter.highlight(args.file, code, language)
    console.print(highlighter.render(code, decorations))
    console.print(f"[dim]{len(decorations)} log statements ({highlighter.text_decoration})[/dim]")


def _modify(app: CodeLog, args: argparse.Namespace, language: str, console: Console) -> None:
    code = _load_source(args.file, console)
    lines = _parse_lines(args.lines)
    if not app.find(code, language):
        console.print("No logs found")
        return
    if args.command == "comment":
        new_code = app.comment(code, language, lines)
    elif args.command == "uncomment":
        new_code = app.uncomment(code, language, lines)
    elif args.command == "remove":
        new_code = app.remove(code, language, lines)
    else:
        new_code = app.edit(code, language, args.new_command, lines)
    if new_code == code:
        console.print("Nothing to do")
        return
    _emit(args.file, new_code, args.write, f"Logs updated ({args.command})", console)


def _scan(app: CodeLog, args: argparse.Namespace, console: Console) -> None:
    if not os.path.isdir(args.directory):
        console.print(f"[bold red]Directory not found:[/bold red] {args.directory}")
        sys.exit(1)
    workspace = app.open_workspace(args.directory)
    if args.raw_json:
        print(json.dumps({"files": [node.model_dump() for node in workspace.files]}, indent=2))
        return
    tree = Tree(Text(args.directory, style="bold"))
    for node in workspace.files:
        branch = tree.add(Text.assemble(node.label, " ", (node.description or "", "dim")))
        for log_line in node.logs:
            branch.add(Text.assemble((log_line.description, "cyan"), " ", log_line.text))
    console.print(tree)
    total = sum(node.count for node in workspace.files)
    console.print(f"{total} log statements in {len(workspace.files)} files")


def _add_selection_args(sub: argparse.ArgumentParser) -> None:
    sub.add_argument("file", help="Source file path")
    sub.add_argument("--lines", help="Only statements starting on these lines (comma-separated)")
    sub.add_argument("--write", action="store_true", help="Write changes back instead of printing")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="codelog command-line interface")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--quiet", action="store_true", help="Reduce logs to errors only")
    parser.add_argument("--config", help="JSON settings file")
    parser.add_argument("--language", help="Language id (detected from the file extension by default)")
    sub = parser.add_subparsers(dest="command")

    insert_p = sub.add_parser("insert", help="Insert a log statement below a line")
    insert_p.add_argument("file", help="Source file path")
    insert_p.add_argument("--line", type=int, required=True, help="1-based line to log after")
    insert_p.add_argument("--column", type=int, default=0, help="0-based cursor column on that line")
    insert_p.add_argument("--variable", help="Expression to log (defaults to the word at the cursor)")
    insert_p.add_argument("--root", help="Project root used to make the file name relative")
    insert_p.add_argument("--snippet-only", action="store_true", help="Print only the generated snippet")
    insert_p.add_argument("--write", action="store_true", help="Write changes back instead of printing")

    find_p = sub.add_parser("find", help="List log statements of a file")
    find_p.add_argument("file", help="Source file path")
    find_p.add_argument("--raw-json", action="store_true", help="Output raw JSON")

    highlight_p = sub.add_parser("highlight", help="Print a file with its log statements underlined")
    highlight_p.add_argument("file", help="Source file path")

    for name, help_text in (
        ("comment", "Comment out log statements"),
        ("uncomment", "Uncomment log statements"),
        ("remove", "Remove log statements"),
    ):
        _add_selection_args(sub.add_parser(name, help=help_text))

    edit_p = sub.add_parser("edit", help="Replace the log command of statements")
    _add_selection_args(edit_p)
    edit_p.add_argument("--command", dest="new_command", required=True, help="New log command, e.g. console.error")

    scan_p = sub.add_parser("scan", help="List log statements across a directory")
    scan_p.add_argument("directory", help="Workspace root")
    scan_p.add_argument("--raw-json", action="store_true", help="Output raw JSON")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``codelog`` command."""

    console = Console()
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.debug:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR
    elif args.verbose:
        log_level = logging.INFO
    else:
        log_level = logging.WARNING
    logging.basicConfig(level=log_level)

    if args.command is None:
        parser.print_help()
        return

    try:
        config = LogConfig.from_file(args.config) if args.config else LogConfig()
        app = CodeLog(config)
        if args.command == "scan":
            _scan(app, args, console)
            return
        language = args.language or app.language_for_file(args.file)
        if args.command == "insert":
            _insert(app, args, language, console)
        elif args.command == "find":
            _find(app, args, language, console)
        elif args.command == "highlight":
            _highlight(app, args, language, console)
        else:
            _modify(app, args, language, console)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))
    except CodeLogError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
