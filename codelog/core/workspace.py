"""
Workspace scanning and guarded file edits.
"""
import fnmatch
import logging
import os
import threading
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, List, Optional, Sequence

import pathspec

from codelog.core.config import LogConfig
from codelog.core.error_handling import FileAccessError, WriteConflictError
from codelog.core.locator import StatementLocator, build_log_pattern
from codelog.core.utils.hashing import content_hash
from codelog.languages.registry import language_for_file
from codelog.models.log_entry import LogEntry
from codelog.models.workspace import WorkspaceFile, WorkspaceLogLine

logger = logging.getLogger(__name__)

LOCK_SUFFIX = '.lock'


def match_glob(rel_posix: str, pattern: str) -> bool:
    """Glob match where a leading ``**/`` may also match zero directories."""
    if fnmatch.fnmatch(rel_posix, pattern):
        return True
    return pattern.startswith('**/') and fnmatch.fnmatch(rel_posix, pattern[3:])


class GitignoreRules:
    """``.gitignore`` matching for paths relative to the workspace root."""

    def __init__(self, lines: Sequence[str]):
        self.spec = pathspec.PathSpec.from_lines('gitwildmatch', lines)

    @classmethod
    def load(cls, root: Path) -> 'GitignoreRules':
        path = root / '.gitignore'
        if not path.is_file():
            return cls([])
        return cls(path.read_text(encoding='utf8', errors='replace').splitlines())

    def ignores(self, rel_posix: str, is_dir: bool = False) -> bool:
        # Directory-only rules ("build/") only match paths ending in a slash.
        return self.spec.match_file(rel_posix + '/' if is_dir else rel_posix)


class Workspace:
    """Log statement index over the files below a root directory."""

    def __init__(self, root: str, config: Optional[LogConfig] = None):
        self.root = Path(root)
        self.config = config or LogConfig()
        self.locator = StatementLocator(self.config)
        self.files: List[WorkspaceFile] = []
        self._index_lock = threading.Lock()

    @classmethod
    def open(cls, root: str, config: Optional[LogConfig] = None) -> 'Workspace':
        ws = cls(root, config)
        ws.refresh()
        return ws

    def refresh(self) -> List[WorkspaceFile]:
        """Rescan the workspace; only files containing log lines are kept."""
        files = [node for node in (self.scan_file(path) for path in self.get_files()) if node.logs]
        with self._index_lock:
            self.files = files
        return files

    def _is_excluded(self, rel_posix: str) -> bool:
        return any(match_glob(rel_posix, pattern) for pattern in self.config.excluded_file_patterns)

    def get_files(self) -> List[Path]:
        """Files matching the include patterns, honouring excludes, depth, hidden files and .gitignore."""
        config = self.config
        if not config.included_file_patterns or not self.root.is_dir():
            return []
        gitignore = GitignoreRules.load(self.root) if config.preserve_gitignore_settings else None
        max_depth = config.max_search_recursion_depth
        found = []
        for dirpath, dirnames, filenames in os.walk(self.root):
            rel_dir = Path(dirpath).relative_to(self.root).as_posix()
            rel_dir = '' if rel_dir == '.' else rel_dir
            depth = rel_dir.count('/') + 1 if rel_dir else 0
            kept_dirs = []
            for name in sorted(dirnames):
                rel = f'{rel_dir}/{name}' if rel_dir else name
                if not config.supports_hidden_files and name.startswith('.'):
                    continue
                if max_depth and depth + 1 >= max_depth:
                    continue
                if self._is_excluded(rel + '/') or (gitignore and gitignore.ignores(rel, is_dir=True)):
                    continue
                kept_dirs.append(name)
            dirnames[:] = kept_dirs
            for name in filenames:
                rel = f'{rel_dir}/{name}' if rel_dir else name
                if not config.supports_hidden_files and name.startswith('.'):
                    continue
                if not any(match_glob(rel, pattern) for pattern in config.included_file_patterns):
                    continue
                if self._is_excluded(rel) or (gitignore and gitignore.ignores(rel)):
                    continue
                found.append(Path(dirpath) / name)
        found.sort(key=lambda path: path.as_posix())
        logger.debug(f'Found {len(found)} candidate files under {self.root}')
        return found

    def _language_for(self, path: Path) -> str:
        return language_for_file(str(path)) or self.config.default_language

    def _label(self, rel_posix: str) -> str:
        folder, _, filename = rel_posix.rpartition('/')
        if not self.config.include_file_path:
            return filename
        return f"{filename} ({folder})" if folder else f"{filename} (root)"

    def scan_file(self, path: Path) -> WorkspaceFile:
        """Lines of ``path`` that contain a call of the file's log command."""
        rel = path.relative_to(self.root).as_posix()
        node = WorkspaceFile(path=str(path), relative_path=rel, label=self._label(rel))
        pattern = build_log_pattern(self.locator.resolve_command(self._language_for(path)))
        try:
            with open(path, "r", encoding="utf8", newline="") as fh:
                text = fh.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f'Error reading file {path}: {e}')
            node.error = str(e)
            return node
        # Lines end at "\n" only; other separators stay part of the line.
        for index, line in enumerate(text.split("\n")):
            if line.endswith("\r"):
                line = line[:-1]
            if pattern.search(line):
                node.logs.append(WorkspaceLogLine(line=index + 1, text=line.strip()))
        return node

    def find_entries(self, relative_path: str) -> List[LogEntry]:
        """Full statement entries of one workspace file."""
        path = self.root / relative_path
        return self.locator.find_log_entries(self.read(relative_path), self._language_for(path))

    def read(self, relative_path: str) -> str:
        path = self.root / relative_path
        try:
            with open(path, "r", encoding="utf8", newline="") as fh:
                return fh.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileAccessError(str(path), str(e)) from e

    @contextmanager
    def _file_lock(self, path: Path):
        lock_path = path.with_suffix(path.suffix + LOCK_SUFFIX)
        while True:
            try:
                fd = os.open(lock_path, os.O_CREAT | os.O_EXCL | os.O_WRONLY)
                os.close(fd)
                break
            except FileExistsError:
                time.sleep(0.05)
        try:
            yield
        finally:
            try:
                os.remove(lock_path)
            except OSError:
                pass

    def apply_edit(
        self,
        relative_path: str,
        transform: Callable[[str], str],
        *,
        expected_hash: Optional[str] = None,
        on_conflict=None,
    ) -> str:
        """
        Rewrite a file with ``transform(text)`` under an exclusive lock.

        Args:
            relative_path: File path relative to the workspace root
            transform: Pure function from the current text to the new text
            expected_hash: Hash of the text the caller based its edit on
            on_conflict: Called with the ``WriteConflictError`` instead of raising

        Returns:
            The text written to disk
        """
        path = self.root / relative_path
        with self._file_lock(path):
            text = self.read(relative_path)
            actual_hash = content_hash(text)
            if expected_hash is not None and expected_hash != actual_hash:
                error = WriteConflictError(expected_hash, actual_hash, path=relative_path)
                if on_conflict:
                    return on_conflict(error)
                raise error
            new_text = transform(text)
            if new_text != text:
                try:
                    with open(path, "w", encoding="utf8", newline="") as fh:
                        fh.write(new_text)
                except OSError as e:
                    raise FileAccessError(str(path), str(e)) from e
            rescanned = self.scan_file(path)
            with self._index_lock:
                files = [node for node in self.files if node.relative_path != relative_path]
                if rescanned.logs:
                    files.append(rescanned)
                    files.sort(key=lambda node: node.relative_path)
                self.files = files
        return new_text
