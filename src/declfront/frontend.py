"""
Front End Driver
================

This module ties the pipeline together for callers that want more than
a bare parse:

    Source → Lexer → Parser → DeclarationNode → SymbolTable

Usage
-----
>>> from declfront.frontend import Frontend
>>> result = Frontend().compile_source("int x = 42;")
>>> print(result.ast_dump)
Declaration: int x
  Number: 42
>>> result.symbols.type_of("x")
'int'

Grammar violations are returned in the result rather than raised, so a
driver can report them and carry on with other input.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from declfront.ast import DeclarationNode
from declfront.errors import GrammarViolation
from declfront.lexer import Lexer, Token
from declfront.parser import Parser
from declfront.symbols import SymbolTable

logger = logging.getLogger(__name__)

# Source compiled when the driver is given no input
DEMO_SOURCE = "int x = 42;"


@dataclass
class FrontendOptions:
    """
    Front end configuration options.

    Attributes:
        register_symbols: Declare the parsed name in the symbol table
        render_indent: Base indentation of the AST dump
        collect_tokens: Record every token the parser pulled from the lexer
    """
    register_symbols: bool = True
    render_indent: int = 0
    collect_tokens: bool = False

    def __post_init__(self):
        if self.render_indent < 0:
            raise ValueError(f"render_indent must be >= 0, got {self.render_indent}")


@dataclass
class FrontendResult:
    """
    Result of running the front end over one source.

    Attributes:
        filename: Source filename
        declaration: Parsed declaration, None on failure
        error: Grammar violation that stopped the parse, None on success
        symbols: Symbol table after this run
        tokens: Tokens pulled by the parser (when collect_tokens is set)
        render_indent: Base indentation used by ast_dump
    """
    filename: str
    symbols: SymbolTable
    declaration: Optional[DeclarationNode] = None
    error: Optional[GrammarViolation] = None
    tokens: list[Token] = field(default_factory=list)
    render_indent: int = 0

    @property
    def success(self) -> bool:
        return self.declaration is not None

    @property
    def ast_dump(self) -> str:
        """Rendered AST, or an empty string when parsing failed."""
        if self.declaration is None:
            return ""
        return self.declaration.render(self.render_indent)


class _RecordingLexer(Lexer):
    """Lexer that keeps a copy of every token it hands out."""

    def __init__(self, source: str, filename: str = "<input>"):
        super().__init__(source, filename)
        self.produced: list[Token] = []

    def next_token(self) -> Token:
        token = super().next_token()
        self.produced.append(token)
        return token


class Frontend:
    """
    Runs the lexer, parser and symbol registration over source text.

    A single Frontend keeps one SymbolTable across calls, so several
    sources compiled in turn share their declared names.

    Example:
        frontend = Frontend()
        frontend.compile_source("int a = 1;")
        frontend.compile_source("int b = 2;")
        frontend.symbols.exists("a")   # True

    Attributes:
        options: Front end configuration
        symbols: Shared symbol table
    """

    def __init__(
        self,
        options: Optional[FrontendOptions] = None,
        symbols: Optional[SymbolTable] = None,
    ):
        self.options = options or FrontendOptions()
        self.symbols = symbols if symbols is not None else SymbolTable()

    def compile_source(self, source: str, filename: str = "<input>") -> FrontendResult:
        """
        Parse one declaration from source text.

        Args:
            source: Declaration source text
            filename: Source filename for error messages

        Returns:
            FrontendResult with either the declaration or the violation

        Raises:
            LiteralError: If a number lexeme cannot be converted
        """
        if self.options.collect_tokens:
            lexer = _RecordingLexer(source, filename)
        else:
            lexer = Lexer(source, filename)

        outcome = Parser(lexer).parse_declaration()
        result = FrontendResult(
            filename=filename,
            symbols=self.symbols,
            declaration=outcome.declaration,
            error=outcome.error,
            render_indent=self.options.render_indent,
        )

        if isinstance(lexer, _RecordingLexer):
            result.tokens = list(lexer.produced)

        if outcome.declaration is not None and self.options.register_symbols:
            self.symbols.declare_from(outcome.declaration)
            logger.debug(f"{filename}: declared '{outcome.declaration.name}'")
        elif outcome.error is not None:
            logger.debug(f"{filename}: failed at {outcome.error.checkpoint}")

        return result

    def compile_file(self, filepath: str) -> FrontendResult:
        """
        Parse one declaration from a source file.

        Raises:
            FileNotFoundError: If the source file does not exist
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Source file not found: {filepath}")

        return self.compile_source(path.read_text(encoding="utf-8"), str(path))
