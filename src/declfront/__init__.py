"""
declfront - Minimal Declaration Compiler Front End
==================================================

Converts source text into tokens and parses a single declaration

    int NAME = NUMBER;

into an abstract syntax tree, optionally recording the declared name in
a symbol table.

Pipeline
--------
    Source → Lexer → Parser → AST → SymbolTable

Usage
-----
>>> from declfront import parse_source
>>> result = parse_source("int x = 42;")
>>> print(result.declaration.render())
Declaration: int x
  Number: 42

Or from the terminal:
    $ declc -e "int x = 42;"
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Imports
# =============================================================================

from declfront.errors import (
    FrontendError,
    SourceLocation,
    Checkpoint,
    GrammarViolation,
    LiteralError,
)
from declfront.lexer import Lexer, Token, TokenKind, KEYWORDS
from declfront.ast import (
    ASTNode,
    ValueNode,
    NumberNode,
    IdentifierNode,
    DeclarationNode,
    render,
)
from declfront.symbols import SymbolTable
from declfront.parser import Parser, ParseResult, parse_source
from declfront.frontend import Frontend, FrontendOptions, FrontendResult, DEMO_SOURCE

__all__ = [
    "__version__",
    # Errors
    "FrontendError",
    "SourceLocation",
    "Checkpoint",
    "GrammarViolation",
    "LiteralError",
    # Lexer
    "Lexer",
    "Token",
    "TokenKind",
    "KEYWORDS",
    # AST
    "ASTNode",
    "ValueNode",
    "NumberNode",
    "IdentifierNode",
    "DeclarationNode",
    "render",
    # Symbols
    "SymbolTable",
    # Parser
    "Parser",
    "ParseResult",
    "parse_source",
    # Driver
    "Frontend",
    "FrontendOptions",
    "FrontendResult",
    "DEMO_SOURCE",
]
