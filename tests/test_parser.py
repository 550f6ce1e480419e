"""
Declaration Parser Test Suite
=============================

Tests for the checkpoint parser: the accepted declaration, every failure
checkpoint, cursor placement and the result-style API.
"""

import pytest
from declfront.ast import DeclarationNode, NumberNode
from declfront.errors import Checkpoint, GrammarViolation, LiteralError
from declfront.lexer import Lexer, Token, TokenKind
from declfront.parser import Parser, ParseResult, parse_source


# =============================================================================
# Successful Parses
# =============================================================================

class TestAccept:
    """Tests for well-formed declarations."""

    def test_simple_declaration(self):
        result = parse_source("int x = 42;")
        assert result.ok
        assert result.error is None
        assert result.declaration == DeclarationNode("int", "x", NumberNode(42))

    def test_render_after_parse(self):
        """Parsing then rendering reproduces the documented dump."""
        result = parse_source("int x = 42;")
        assert result.declaration.render() == "Declaration: int x\n  Number: 42"

    def test_whitespace_and_newlines(self):
        result = parse_source("\n  int\n\tcount\n=\n 7 ;  ")
        assert result.declaration == DeclarationNode("int", "count", NumberNode(7))

    def test_no_spaces(self):
        result = parse_source("int y=0;")
        assert result.declaration.value == NumberNode(0)

    def test_leading_zeros_convert(self):
        assert parse_source("int z = 0010;").declaration.value.value == 10

    def test_large_number(self):
        """Values are Python ints with no fixed width."""
        result = parse_source("int big = 123456789012345678901234567890;")
        assert result.declaration.value.value == 123456789012345678901234567890

    def test_value_child_is_always_present(self):
        result = parse_source("int a = 1;")
        assert isinstance(result.declaration.value, NumberNode)

    def test_result_is_truthy(self):
        assert parse_source("int a = 1;")


# =============================================================================
# Checkpoint Failures
# =============================================================================

class TestCheckpoints:
    """Each malformed input stops at exactly one checkpoint."""

    @pytest.mark.parametrize(
        "source, checkpoint, offending",
        [
            ("", Checkpoint.START, ""),
            ("x = 42;", Checkpoint.START, "x"),
            ("return 1;", Checkpoint.START, "return"),
            ("integer x = 1;", Checkpoint.START, "integer"),
            ("int = 42;", Checkpoint.AFTER_TYPE, "="),
            ("int int = 42;", Checkpoint.AFTER_TYPE, "int"),
            ("int", Checkpoint.AFTER_TYPE, ""),
            ("int x 42;", Checkpoint.AFTER_NAME, "42"),
            ("int x == 42;", Checkpoint.AFTER_EQUALS, "="),
            ("int x = y;", Checkpoint.AFTER_EQUALS, "y"),
            ("int x = -1;", Checkpoint.AFTER_EQUALS, "-"),
            ("int x = 42", Checkpoint.AFTER_VALUE, ""),
            ("int x = 42,", Checkpoint.AFTER_VALUE, ","),
            ("int x = 4.2;", Checkpoint.AFTER_VALUE, "."),
        ],
    )
    def test_failure_checkpoint(self, source, checkpoint, offending):
        result = parse_source(source)
        assert not result
        assert result.declaration is None
        assert isinstance(result.error, GrammarViolation)
        assert result.error.checkpoint is checkpoint
        assert result.error.token.text == offending

    def test_empty_input_fails_on_eof(self):
        """Empty input fails at Start because the first token is EOF."""
        error = parse_source("").error
        assert error.checkpoint is Checkpoint.START
        assert error.token.kind == TokenKind.EOF

    def test_unknown_token_is_rejected(self):
        error = parse_source("\x01int x = 1;").error
        assert error.checkpoint is Checkpoint.START
        assert error.token.kind == TokenKind.UNKNOWN

    def test_missing_equals_message(self):
        error = parse_source("int x 42;").error
        assert error.message == "expected '=' after identifier, found '42'"
        assert error.hint == "checkpoint AfterName"

    def test_start_message(self):
        assert parse_source("foo").error.message == "unexpected token 'foo'"

    def test_eof_message(self):
        assert parse_source("int x = 42").error.message == (
            "expected ';' at end of declaration, found end of input"
        )

    def test_diagnostic_has_location_and_source_line(self):
        error = parse_source("int x 42;", "decl.txt").error
        lines = str(error).splitlines()
        assert lines[0] == "decl.txt:1:9: error: expected '=' after identifier, found '42'"
        assert lines[1] == "    int x 42;"
        assert lines[2] == " " * 10 + "^"
        assert lines[3] == "hint: checkpoint AfterName"

    def test_caret_marks_start_of_symbol_lexeme(self):
        """The caret sits under the offending lexeme, not the reported column."""
        error = parse_source("int x = = 1;").error
        lines = str(error).splitlines()
        assert error.token.column == 8
        assert lines[0].startswith("<input>:1:8: error:")
        assert lines[2] == " " * 12 + "^"

    def test_eof_on_blank_line_omits_source_context(self):
        """EOF after a trailing newline reports no empty source line."""
        error = parse_source("int x = 42\n", "d.txt").error
        assert str(error).splitlines() == [
            "d.txt:2:1: error: expected ';' at end of declaration, found end of input",
            "hint: checkpoint AfterValue",
        ]

    def test_eof_on_same_line_keeps_source_context(self):
        error = parse_source("int x = 42").error
        lines = str(error).splitlines()
        assert lines[1] == "    int x = 42"
        assert lines[2] == " " * 14 + "^"

    def test_checkpoint_display_names(self):
        assert [str(c) for c in Checkpoint] == [
            "Start", "AfterType", "AfterName", "AfterEquals", "AfterValue",
        ]


# =============================================================================
# Cursor Behaviour
# =============================================================================

class TestCursor:
    """Tests for lookahead handling around a parse."""

    def test_lookahead_primed_on_construction(self):
        parser = Parser(Lexer("int x = 1;"))
        assert parser.current.is_keyword("int")

    def test_cursor_after_success(self):
        """After success the lookahead is the token following ';'."""
        parser = Parser(Lexer("int x = 1; int y = 2;"))
        assert parser.parse_declaration().ok
        assert parser.current.is_keyword("int")

    def test_cursor_at_eof_after_single_declaration(self):
        parser = Parser(Lexer("int x = 1;"))
        parser.parse_declaration()
        assert parser.current.kind == TokenKind.EOF

    def test_consecutive_parses_on_one_stream(self):
        """A caller can parse again after a success."""
        parser = Parser(Lexer("int a = 1;\nint b = 2;"))
        first = parser.parse_declaration()
        second = parser.parse_declaration()
        assert first.declaration.name == "a"
        assert second.declaration.name == "b"

    def test_failure_does_not_consume_offending_token(self):
        """A failed checkpoint leaves the offending token as lookahead."""
        parser = Parser(Lexer("int x 42;"))
        result = parser.parse_declaration()
        assert result.error.checkpoint is Checkpoint.AFTER_NAME
        assert parser.current.text == "42"

    def test_no_resynchronisation(self):
        """Failure is terminal: a later valid declaration is not reached."""
        parser = Parser(Lexer("int = 1; int y = 2;"))
        result = parser.parse_declaration()
        assert not result
        assert result.error.checkpoint is Checkpoint.AFTER_TYPE


# =============================================================================
# Raising Variant and Conversion
# =============================================================================

class _FixedLexer(Lexer):
    """Lexer stand-in that replays a fixed token list."""

    def __init__(self, tokens):
        super().__init__("")
        self._tokens = list(tokens)

    def next_token(self) -> Token:
        return self._tokens.pop(0)


class TestRaisingApi:
    """Tests for expect_declaration() and literal conversion."""

    def test_expect_declaration_returns_node(self):
        node = Parser(Lexer("int q = 9;")).expect_declaration()
        assert node == DeclarationNode("int", "q", NumberNode(9))

    def test_expect_declaration_raises(self):
        with pytest.raises(GrammarViolation) as exc_info:
            Parser(Lexer("int q = ;")).expect_declaration()
        assert exc_info.value.checkpoint is Checkpoint.AFTER_EQUALS

    def test_invalid_number_lexeme_raises_literal_error(self):
        """A NUMBER token that is not an integer surfaces to the caller."""
        tokens = [
            Token(TokenKind.KEYWORD, "int", 1, 4),
            Token(TokenKind.IDENTIFIER, "x", 1, 6),
            Token(TokenKind.SYMBOL, "=", 1, 8),
            Token(TokenKind.NUMBER, "4x", 1, 11),
            Token(TokenKind.SYMBOL, ";", 1, 12),
            Token(TokenKind.EOF, "", 1, 12),
        ]
        with pytest.raises(LiteralError) as exc_info:
            Parser(_FixedLexer(tokens)).parse_declaration()
        assert exc_info.value.text == "4x"

    def test_parse_result_requires_one_field(self):
        """A result carries exactly one of declaration or error."""
        with pytest.raises(ValueError):
            ParseResult()

    def test_parse_result_rejects_both_fields(self):
        violation = GrammarViolation(Checkpoint.START, Token(TokenKind.EOF, "", 1, 1))
        node = DeclarationNode("int", "x", NumberNode(1))
        with pytest.raises(ValueError):
            ParseResult(declaration=node, error=violation)

    def test_parse_result_error_only(self):
        violation = GrammarViolation(Checkpoint.START, Token(TokenKind.EOF, "", 1, 1))
        result = ParseResult(error=violation)
        assert not result.ok
