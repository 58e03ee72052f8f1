"""
Highlighting of log statements.

A ``LogHighlighter`` is created by its host and passed to whoever needs it.
It keeps the decorations it produced per document so they can be cleared.
"""
import logging
from typing import Dict, List, Optional, Union

from rich.style import Style
from rich.text import Text

from codelog.core.locator import StatementLocator
from codelog.core.utils.text import range_between
from codelog.models.decoration import Decoration
from codelog.models.enums import HighlightStyle

logger = logging.getLogger(__name__)

DEFAULT_HOVER_MESSAGE = 'You can remove the log statements by using the command: "Remove Logs"'


class LogHighlighter:
    """Turns located log statements into decorations."""

    def __init__(self, locator: StatementLocator, color: Optional[str] = None,
                 style: Optional[Union[HighlightStyle, str]] = None):
        config = locator.config
        self.locator = locator
        self.color = color or config.highlight_color
        self.style = HighlightStyle(style or config.highlight_style)
        self._decorations: Dict[str, List[Decoration]] = {}

    @property
    def text_decoration(self) -> str:
        """CSS-like description, e.g. ``underline #FFD700 wavy``."""
        return f'underline {self.color} {self.style.value}'

    def update(self, color: str, style: Union[HighlightStyle, str]) -> None:
        self.color = color
        self.style = HighlightStyle(style)

    def highlight(self, document_id: str, code: str, language_id: str,
                  hover_message: str = DEFAULT_HOVER_MESSAGE) -> List[Decoration]:
        """Compute and remember the decorations for ``document_id``."""
        decorations = [
            Decoration(start=entry.start, end=entry.end,
                       range=range_between(code, entry.start, entry.end),
                       hover_message=hover_message)
            for entry in self.locator.find_log_entries(code, language_id)
        ]
        self._decorations[document_id] = decorations
        logger.debug(f'Highlighted {len(decorations)} log statements in {document_id}')
        return decorations

    def decorations(self, document_id: str) -> List[Decoration]:
        return list(self._decorations.get(document_id, []))

    def clear(self, document_id: Optional[str] = None) -> None:
        """Forget the decorations of one document, or of all documents."""
        if document_id is None:
            self._decorations.clear()
        else:
            self._decorations.pop(document_id, None)

    def rich_style(self) -> Style:
        # Terminals only know single/double underlines.
        if self.style == HighlightStyle.DOUBLE:
            return Style(underline2=True, color=self.color)
        return Style(underline=True, color=self.color)

    def render(self, code: str, decorations: List[Decoration]) -> Text:
        """The document as rich ``Text`` with the decorated spans styled."""
        text = Text(code)
        style = self.rich_style()
        for decoration in decorations:
            text.stylize(style, decoration.start, decoration.end)
        return text
