"""
Declaration Lexer (Tokenizer)
=============================

This module implements the lexer for the declaration front end.
It converts source text into classified tokens, one at a time, on
request from the parser.

Token Categories
----------------
- Keywords: int, return
- Identifiers: runs of ASCII letters and digits starting with a letter
- Numbers: runs of decimal digits (no sign, no fraction, no exponent)
- Symbols: any single ASCII punctuation character
- Unknown: any other character, kept for the parser to reject
- EOF: end of input, empty text

Position Tracking
-----------------
Token positions are the cursor position once the lexeme has been
consumed, not where the lexeme starts. Single-character symbols and
unknown characters do not move the column:

>>> from declfront.lexer import Lexer
>>> for token in Lexer("int x = 42;").tokenize():
...     print(token)
Token(KEYWORD, 'int', 1:4)
Token(IDENTIFIER, 'x', 1:6)
Token(SYMBOL, '=', 1:7)
Token(NUMBER, '42', 1:10)
Token(SYMBOL, ';', 1:10)
Token(EOF, '', 1:10)
"""

import logging
import string
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from declfront.errors import SourceLocation

logger = logging.getLogger(__name__)


# =============================================================================
# Token Types
# =============================================================================

class TokenKind(Enum):
    """Classification of a lexical token."""

    IDENTIFIER = auto()     # Names
    NUMBER = auto()         # Nonnegative decimal integers
    KEYWORD = auto()        # int, return
    SYMBOL = auto()         # Single punctuation character
    EOF = auto()            # End of input
    UNKNOWN = auto()        # Unclassifiable character


KEYWORDS = frozenset({"int", "return"})


@dataclass(frozen=True)
class Token:
    """
    A single token read from the source.

    Attributes:
        kind: The TokenKind classification
        text: The exact lexeme (empty for EOF)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        filename: Name of the source file
        start_column: True column of the first lexeme character, 0 if unknown
    """
    kind: TokenKind
    text: str
    line: int
    column: int
    filename: str = "<input>"
    start_column: int = 0

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    def is_keyword(self, text: str) -> bool:
        return self.kind == TokenKind.KEYWORD and self.text == text

    def is_symbol(self, text: str) -> bool:
        return self.kind == TokenKind.SYMBOL and self.text == text


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Produces tokens from declaration source text on demand.

    The lexer owns its scan cursor (position, line, column). Each call
    to next_token() skips whitespace and reads one token. Unrecognised
    characters become UNKNOWN tokens; the lexer itself never fails.

    Usage:
        lexer = Lexer("int x = 42;")
        token = lexer.next_token()

    Attributes:
        source: The text being tokenized
        filename: Name of the source file (for error reporting)
    """

    # ASCII classes matching the C isspace/isalpha/isdigit/ispunct family
    WHITESPACE = string.whitespace
    LETTERS = string.ascii_letters
    DIGITS = string.digits
    ALNUM = string.ascii_letters + string.digits
    PUNCTUATION = string.punctuation

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename

        self._pos = 0
        self._line = 1
        self._column = 1

        # Track line start and lexeme start for caret placement
        self._line_start_pos = 0
        self._token_start = 0

    @property
    def position(self) -> tuple[int, int, int]:
        """Current cursor as (offset, line, column)."""
        return self._pos, self._line, self._column

    def at_end(self) -> bool:
        """Check if the cursor has reached the end of source."""
        return self._pos >= len(self.source)

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens until end of input.

        Yields:
            Token objects, ending with a single EOF token
        """
        while True:
            token = self.next_token()
            yield token
            if token.kind == TokenKind.EOF:
                break

    def next_token(self) -> Token:
        """
        Skip whitespace and return the next token.

        At end of input an EOF token is returned without advancing, so
        repeated calls keep returning EOF.
        """
        while not self.at_end() and self._peek() in self.WHITESPACE:
            self._advance()

        self._token_start = self._pos
        if self.at_end():
            token = self._make_token(TokenKind.EOF, "")
        else:
            char = self._peek()
            if char in self.LETTERS:
                token = self._scan_word()
            elif char in self.DIGITS:
                token = self._scan_number()
            elif char in self.PUNCTUATION:
                token = self._make_token(TokenKind.SYMBOL, self._take_single())
            else:
                token = self._make_token(TokenKind.UNKNOWN, self._take_single())

        logger.debug(f"{self.filename}: {token!r}")
        return token

    # =========================================================================
    # Character Access
    # =========================================================================

    def _peek(self) -> str:
        return self.source[self._pos]

    def _advance(self) -> str:
        """
        Consume and return the current character.

        A newline moves to the next line and resets the column; any other
        character moves one column right.
        """
        char = self.source[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._column = 1
            self._line_start_pos = self._pos
        else:
            self._column += 1

        return char

    def _take_single(self) -> str:
        """
        Consume one symbol or unknown character.

        The column is not advanced.
        """
        char = self.source[self._pos]
        self._pos += 1
        return char

    def _consume_run(self, allowed: str) -> str:
        start = self._pos
        while not self.at_end() and self._peek() in allowed:
            self._advance()
        return self.source[start:self._pos]

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _make_token(self, kind: TokenKind, text: str) -> Token:
        # Position is taken after the lexeme has been consumed
        return Token(
            kind=kind,
            text=text,
            line=self._line,
            column=self._column,
            filename=self.filename,
            start_column=self._token_start - self._line_start_pos + 1,
        )

    def _scan_word(self) -> Token:
        """Scan an identifier or keyword. Only exact keyword matches count."""
        text = self._consume_run(self.ALNUM)
        kind = TokenKind.KEYWORD if text in KEYWORDS else TokenKind.IDENTIFIER
        return self._make_token(kind, text)

    def _scan_number(self) -> Token:
        return self._make_token(TokenKind.NUMBER, self._consume_run(self.DIGITS))

    def source_line(self, line: int) -> str:
        """Return the text of a 1-indexed source line, or "" if out of range."""
        lines = self.source.split("\n")
        if 1 <= line <= len(lines):
            return lines[line - 1]
        return ""
