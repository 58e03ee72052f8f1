import pytest

from codelog import CodeLog, LogConfig
from codelog.models import DocumentSymbol, SymbolKind, TextRange


@pytest.fixture
def config():
    return LogConfig()


@pytest.fixture
def no_symbols():
    """Symbol lookup that never finds anything, leaving only the line regex."""
    return lambda code, language_id: []


@pytest.fixture
def app(no_symbols):
    return CodeLog(LogConfig(), symbol_lookup=no_symbols)


def make_symbol(name, kind, start_line, end_line, children=None, end_column=1):
    return DocumentSymbol(
        name=name,
        kind=kind,
        range=TextRange(start_line=start_line, start_column=0, end_line=end_line, end_column=end_column),
        children=children or [],
    )


@pytest.fixture
def nested_js():
    code = (
        'function outer() {\n'
        '  const inner = () => {\n'
        '    console.log("v", value);\n'
        '  };\n'
        '  // console.log("old", old);\n'
        '}\n'
    )
    symbols = [
        make_symbol('outer', SymbolKind.FUNCTION, 0, 5, children=[
            make_symbol('inner', SymbolKind.FUNCTION, 1, 3, end_column=4),
        ]),
    ]
    return code, symbols
