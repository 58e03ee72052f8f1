"""
Document symbols from tree-sitter syntax trees.

``TreeSitterSymbolProvider`` plays the role of the editor's document symbol
provider: it reports classes, functions and methods with their ranges so the
classifier can find the function enclosing a log statement.
"""
import bisect
import logging
from typing import Dict, List, Optional

from tree_sitter import Node

from codelog.core.engine.languages import get_parser, grammar_languages
from codelog.models.enums import SymbolKind
from codelog.models.range import TextRange
from codelog.models.symbol import DocumentSymbol

logger = logging.getLogger(__name__)

_PYTHON_NODES: Dict[str, SymbolKind] = {
    'class_definition': SymbolKind.CLASS,
    'function_definition': SymbolKind.FUNCTION,
}

_TS_NODES: Dict[str, SymbolKind] = {
    'class_declaration': SymbolKind.CLASS,
    'abstract_class_declaration': SymbolKind.CLASS,
    'class': SymbolKind.CLASS,
    'interface_declaration': SymbolKind.INTERFACE,
    'function_declaration': SymbolKind.FUNCTION,
    'generator_function_declaration': SymbolKind.FUNCTION,
    'method_definition': SymbolKind.METHOD,
}

# const handler = () => {...} / const handler = function () {...}
_TS_FUNCTION_VALUES = ('arrow_function', 'function_expression', 'function', 'generator_function')
_TS_ASSIGNED_FUNCTIONS: Dict[str, SymbolKind] = {
    'variable_declarator': SymbolKind.FUNCTION,
    'public_field_definition': SymbolKind.METHOD,
    'field_definition': SymbolKind.METHOD,
}


class _PositionMapper:
    """Maps tree-sitter byte offsets to zero-based line/character positions."""

    def __init__(self, code: str):
        self.code_bytes = code.encode('utf8')
        self.line_starts = [0]
        for index, byte in enumerate(self.code_bytes):
            if byte == 0x0A:
                self.line_starts.append(index + 1)

    def position(self, byte_offset: int):
        line = bisect.bisect_right(self.line_starts, byte_offset) - 1
        prefix = self.code_bytes[self.line_starts[line]:byte_offset]
        return line, len(prefix.decode('utf8', errors='ignore'))

    def range(self, node: Node) -> TextRange:
        start_line, start_column = self.position(node.start_byte)
        end_line, end_column = self.position(node.end_byte)
        return TextRange(start_line=start_line, start_column=start_column,
                         end_line=end_line, end_column=end_column)

    def text(self, node: Node) -> str:
        return self.code_bytes[node.start_byte:node.end_byte].decode('utf8', errors='replace')


class TreeSitterSymbolProvider:
    """Symbol lookup backed by tree-sitter for Python, TypeScript and JavaScript."""

    def supports(self, language_id: str) -> bool:
        return language_id in grammar_languages()

    def __call__(self, code: str, language_id: str) -> List[DocumentSymbol]:
        return self.document_symbols(code, language_id)

    def document_symbols(self, code: str, language_id: str) -> List[DocumentSymbol]:
        """
        Parse ``code`` and return its top-level symbols with nested children.

        Raises:
            UnsupportedLanguageError: If no grammar is bundled for ``language_id``
        """
        parser = get_parser(language_id)
        mapper = _PositionMapper(code)
        tree = parser.parse(mapper.code_bytes)
        if language_id == 'python':
            symbols = self._collect_python(tree.root_node, mapper, in_class=False)
        else:
            symbols = self._collect_ts(tree.root_node, mapper)
        logger.debug(f'Collected {len(symbols)} top-level symbols for {language_id}')
        return symbols

    def _collect_python(self, node: Node, mapper: _PositionMapper, in_class: bool) -> List[DocumentSymbol]:
        symbols = []
        for child in node.children:
            kind = _PYTHON_NODES.get(child.type)
            if kind is None:
                symbols.extend(self._collect_python(child, mapper, in_class))
                continue
            if kind == SymbolKind.FUNCTION and in_class:
                kind = SymbolKind.METHOD
            symbol = self._make_symbol(child, kind, mapper)
            if symbol is None:
                continue
            symbol.children = self._collect_python(child, mapper, in_class=kind == SymbolKind.CLASS)
            symbols.append(symbol)
        return symbols

    def _collect_ts(self, node: Node, mapper: _PositionMapper) -> List[DocumentSymbol]:
        symbols = []
        for child in node.children:
            kind = _TS_NODES.get(child.type)
            if kind is None and child.type in _TS_ASSIGNED_FUNCTIONS:
                value = child.child_by_field_name('value')
                if value is not None and value.type in _TS_FUNCTION_VALUES:
                    kind = _TS_ASSIGNED_FUNCTIONS[child.type]
            if kind is None:
                symbols.extend(self._collect_ts(child, mapper))
                continue
            symbol = self._make_symbol(child, kind, mapper)
            if symbol is None:
                symbols.extend(self._collect_ts(child, mapper))
                continue
            symbol.children = self._collect_ts(child, mapper)
            symbols.append(symbol)
        return symbols

    @staticmethod
    def _make_symbol(node: Node, kind: SymbolKind, mapper: _PositionMapper) -> Optional[DocumentSymbol]:
        name_node = node.child_by_field_name('name')
        if name_node is None:
            return None
        return DocumentSymbol(name=mapper.text(name_node), kind=kind, range=mapper.range(node))
