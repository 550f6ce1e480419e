"""
Declaration Parser
==================

This module implements a single-production recursive descent parser.
It pulls tokens from a Lexer one at a time (one token of lookahead, no
backtracking) and matches exactly one declaration.

Grammar
-------
declaration ::= 'int' IDENTIFIER '=' NUMBER ';'

Checkpoints
-----------
Parsing moves through five checkpoints in order. Each one either
accepts the current token and advances, or stops the parse:

    Start        current token must be the keyword 'int'
    AfterType    current token must be an identifier
    AfterName    current token must be the symbol '='
    AfterEquals  current token must be a number
    AfterValue   current token must be the symbol ';'

A failed checkpoint is terminal for that parse: no tokens are skipped
and nothing is retried. The failure comes back as a GrammarViolation in
the ParseResult, and the caller decides whether to report it, abort,
or start a fresh parse.

Example Usage
-------------
>>> from declfront.parser import parse_source
>>> result = parse_source("int x = 42;")
>>> print(result.declaration.render())
Declaration: int x
  Number: 42
>>> parse_source("int x 42;").error.checkpoint.display_name
'AfterName'
"""

import logging
from dataclasses import dataclass
from typing import Optional

from declfront.ast import DeclarationNode, NumberNode
from declfront.errors import Checkpoint, GrammarViolation, LiteralError
from declfront.lexer import Lexer, Token, TokenKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of one parse_declaration() call.

    Exactly one of the fields is set.

    Attributes:
        declaration: The parsed declaration on success
        error: The violation that stopped the parse on failure
    """
    declaration: Optional[DeclarationNode] = None
    error: Optional[GrammarViolation] = None

    def __post_init__(self):
        if (self.declaration is None) == (self.error is None):
            raise ValueError("ParseResult needs exactly one of declaration or error")

    @property
    def ok(self) -> bool:
        return self.declaration is not None

    def __bool__(self) -> bool:
        return self.ok


class Parser:
    """
    Matches one declaration from a Lexer's token stream.

    The parser reads its first lookahead token on construction and owns
    the lexer while parsing. After a successful parse the lookahead sits
    on the token following the terminating ';'.

    Usage:
        parser = Parser(Lexer("int x = 42;"))
        result = parser.parse_declaration()
        if result:
            result.declaration.print()

    Attributes:
        lexer: The token source
        current: The lookahead token
    """

    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self.current: Token = lexer.next_token()

    def parse_declaration(self) -> ParseResult:
        """
        Parse one declaration, reporting failure as a value.

        Returns:
            ParseResult holding either the DeclarationNode or the
            GrammarViolation that stopped the parse

        Raises:
            LiteralError: If a NUMBER lexeme is not a valid integer
        """
        try:
            return ParseResult(declaration=self.expect_declaration())
        except GrammarViolation as e:
            logger.debug(f"parse stopped at {e.checkpoint}: {e.message}")
            return ParseResult(error=e)

    def expect_declaration(self) -> DeclarationNode:
        """
        Parse one declaration.

        Returns:
            The parsed DeclarationNode

        Raises:
            GrammarViolation: If the tokens do not form a declaration
            LiteralError: If a NUMBER lexeme is not a valid integer
        """
        type_token = self._expect(Checkpoint.START, self._is_int_keyword)
        name_token = self._expect(
            Checkpoint.AFTER_TYPE,
            lambda t: t.kind == TokenKind.IDENTIFIER,
        )
        self._expect(Checkpoint.AFTER_NAME, lambda t: t.is_symbol("="))

        number_token = self.current
        self._check(Checkpoint.AFTER_EQUALS, number_token.kind == TokenKind.NUMBER)
        value = self._convert_number(number_token)
        self._advance()

        self._expect(Checkpoint.AFTER_VALUE, lambda t: t.is_symbol(";"))

        logger.debug(f"parsed declaration {type_token.text} {name_token.text} = {value}")
        return DeclarationNode(type_token.text, name_token.text, NumberNode(value))

    # =========================================================================
    # Token Access
    # =========================================================================

    def _advance(self) -> Token:
        """Consume the lookahead token and pull the next one."""
        token = self.current
        self.current = self.lexer.next_token()
        return token

    def _check(self, checkpoint: Checkpoint, accepted: bool) -> None:
        if not accepted:
            token = self.current
            source_line = self.lexer.source_line(token.line)
            # EOF on a trailing blank line has no useful context to show
            if token.kind == TokenKind.EOF and not source_line.strip():
                source_line = None
            raise GrammarViolation(checkpoint, token, source_line=source_line)

    def _expect(self, checkpoint: Checkpoint, predicate) -> Token:
        """Consume the lookahead if predicate accepts it, else stop at checkpoint."""
        self._check(checkpoint, predicate(self.current))
        return self._advance()

    @staticmethod
    def _is_int_keyword(token: Token) -> bool:
        return token.is_keyword("int")

    @staticmethod
    def _convert_number(token: Token) -> int:
        try:
            return int(token.text)
        except ValueError as e:
            raise LiteralError(token.text, token.location) from e


def parse_source(source: str, filename: str = "<input>") -> ParseResult:
    """
    Convenience function to parse one declaration from source text.

    Args:
        source: Declaration source text
        filename: Filename for error messages

    Returns:
        ParseResult for the first declaration in source
    """
    return Parser(Lexer(source, filename)).parse_declaration()
