"""
tree-sitter grammars available to the symbol provider.
"""
import logging
from functools import lru_cache

import tree_sitter_python
import tree_sitter_typescript
from tree_sitter import Language, Parser

from codelog.core.error_handling import UnsupportedLanguageError

logger = logging.getLogger(__name__)

# JavaScript is parsed with the TSX grammar, which is a superset of JSX.
_GRAMMARS = {
    'python': tree_sitter_python.language,
    'typescript': tree_sitter_typescript.language_tsx,
    'typescriptreact': tree_sitter_typescript.language_tsx,
    'javascript': tree_sitter_typescript.language_tsx,
    'javascriptreact': tree_sitter_typescript.language_tsx,
}


def grammar_languages() -> list:
    return sorted(_GRAMMARS)


@lru_cache(maxsize=None)
def get_language(language_id: str) -> Language:
    """
    Load the tree-sitter ``Language`` for ``language_id``.

    Raises:
        UnsupportedLanguageError: If no grammar is bundled for the language
    """
    factory = _GRAMMARS.get(language_id)
    if factory is None:
        raise UnsupportedLanguageError(language_id, operation='symbol lookup')
    logger.debug(f'Loading tree-sitter grammar for {language_id}')
    return Language(factory())


def get_parser(language_id: str) -> Parser:
    """A new parser for ``language_id``; parsers are not shared between calls."""
    return Parser(get_language(language_id))
