"""
declfront Error Hierarchy
=========================

This module defines the exception hierarchy for the declaration front end.
All exceptions inherit from FrontendError, allowing callers to catch every
front-end failure with a single except clause if desired.

Exception Hierarchy
-------------------
FrontendError (base)
├── GrammarViolation - token did not satisfy a parser checkpoint
└── LiteralError - number lexeme could not be converted to an integer

The lexer never raises: characters it cannot classify become UNKNOWN
tokens and are rejected later by the parser as a GrammarViolation.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from declfront.lexer import Token


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source text for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Base Exception Class
# =============================================================================

class FrontendError(Exception):
    """
    Base exception for all declfront errors.

    Provides the common message layout with source location, source line
    context and an optional hint.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
        caret_column: Column the caret points at, if not location.column
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
        caret_column: Optional[int] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        self.caret_column = caret_column
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            decl.c:1:9: error: expected '=' after identifier, found '42'
                int x 42;
                      ^
            hint: checkpoint AfterName
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            column = self.caret_column or self.location.column
            if column > 0:
                padding = " " * (4 + column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Parser Checkpoints
# =============================================================================

class Checkpoint(Enum):
    """
    Sequential grammar-matching steps of the declaration parser.

    Each member carries its display name and the diagnostic reported when
    the current token does not satisfy it.
    """

    START = ("Start", "unexpected token")
    AFTER_TYPE = ("AfterType", "expected identifier after 'int'")
    AFTER_NAME = ("AfterName", "expected '=' after identifier")
    AFTER_EQUALS = ("AfterEquals", "expected number after '='")
    AFTER_VALUE = ("AfterValue", "expected ';' at end of declaration")

    def __init__(self, display_name: str, diagnostic: str):
        self.display_name = display_name
        self.diagnostic = diagnostic

    def __str__(self) -> str:
        return self.display_name


# =============================================================================
# Parse Errors
# =============================================================================

class GrammarViolation(FrontendError):
    """
    The current token did not match the grammar at a parser checkpoint.

    Every violation is terminal for the parse attempt that produced it;
    the parser does not skip tokens or retry.

    Attributes:
        checkpoint: The checkpoint at which parsing stopped
        token: The offending token (not consumed)
    """

    def __init__(
        self,
        checkpoint: Checkpoint,
        token: "Token",
        source_line: Optional[str] = None,
    ):
        self.checkpoint = checkpoint
        self.token = token

        found = f"'{token.text}'" if token.text else "end of input"
        if checkpoint is Checkpoint.START:
            message = f"{checkpoint.diagnostic} {found}"
        else:
            message = f"{checkpoint.diagnostic}, found {found}"

        super().__init__(
            message,
            location=token.location,
            hint=f"checkpoint {checkpoint.display_name}",
            source_line=source_line,
            caret_column=token.start_column or None,
        )


class LiteralError(FrontendError):
    """
    A NUMBER lexeme could not be converted to an integer value.
    """

    def __init__(self, text: str, location: Optional[SourceLocation] = None):
        self.text = text
        super().__init__(
            f"invalid integer literal '{text}'",
            location=location,
        )
