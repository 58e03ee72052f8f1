"""
Models describing the log statements found while scanning a workspace.
"""
from typing import List, Optional

from pydantic import BaseModel, Field


class WorkspaceLogLine(BaseModel):
    """One source line containing a log call"""
    line: int
    text: str

    @property
    def description(self) -> str:
        return f'Ln {self.line}'


class WorkspaceFile(BaseModel):
    """A file of the workspace together with the log lines it holds"""
    path: str
    relative_path: str
    label: str
    logs: List[WorkspaceLogLine] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def count(self) -> int:
        return len(self.logs)

    @property
    def description(self) -> Optional[str]:
        if not self.logs:
            return None
        return f"{self.count} log{'' if self.count == 1 else 's'}"

    def tooltip_for(self, log_line: WorkspaceLogLine) -> str:
        return f'{self.relative_path}:{log_line.line}\n{log_line.text}'
