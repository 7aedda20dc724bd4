"""Tokenizer tests."""
import pytest

from core.exceptions import LexError
from core.token_system import Token, TokenType
from core.tokenizer import tokenize


def _pairs(tokens):
    return [(t.type, t.text) for t in tokens]


class TestTokenize:

    def test_empty_and_whitespace_only(self):
        assert tokenize("") == []
        assert tokenize("  \t\n ") == []

    def test_simple_expression(self):
        assert _pairs(tokenize("2+3*4")) == [
            (TokenType.NUMBER, "2"),
            (TokenType.OPERATOR, "+"),
            (TokenType.NUMBER, "3"),
            (TokenType.OPERATOR, "*"),
            (TokenType.NUMBER, "4"),
        ]

    def test_whitespace_is_stripped_before_scanning(self):
        # "1 2" joins into a single number literal
        assert _pairs(tokenize("1 2 + 3")) == [
            (TokenType.NUMBER, "12"),
            (TokenType.OPERATOR, "+"),
            (TokenType.NUMBER, "3"),
        ]

    @pytest.mark.parametrize("literal", ["3.14", ".5", "5.", "007"])
    def test_number_literals(self, literal):
        assert _pairs(tokenize(literal)) == [(TokenType.NUMBER, literal)]

    def test_functions_constants_and_parens(self):
        assert _pairs(tokenize("sqrt(pi)*e")) == [
            (TokenType.FUNCTION, "sqrt"),
            (TokenType.PAREN, "("),
            (TokenType.CONSTANT, "pi"),
            (TokenType.PAREN, ")"),
            (TokenType.OPERATOR, "*"),
            (TokenType.CONSTANT, "e"),
        ]

    def test_identifier_run_includes_digits(self):
        with pytest.raises(LexError, match="unknown identifier: pi2"):
            tokenize("pi2")

    def test_unknown_identifier(self):
        with pytest.raises(LexError, match="unknown identifier: foo"):
            tokenize("foo(1)")

    def test_identifiers_are_case_sensitive(self):
        with pytest.raises(LexError):
            tokenize("SIN(1)")

    @pytest.mark.parametrize("text", ["1$2", "2%3", "1,5", "=1"])
    def test_invalid_character(self, text):
        with pytest.raises(LexError, match="invalid character"):
            tokenize(text)

    @pytest.mark.parametrize("text", ["1.2.3", "1..2", "..", "."])
    def test_malformed_number(self, text):
        with pytest.raises(LexError, match="invalid number format"):
            tokenize(text)

    def test_tokens_are_immutable(self):
        token = tokenize("7")[0]
        with pytest.raises(AttributeError):
            token.text = "8"


class TestTokenValidation:

    @pytest.mark.parametrize("kind, text", [
        (TokenType.NUMBER, "1.2.3"),
        (TokenType.NUMBER, "abc"),
        (TokenType.OPERATOR, "%"),
        (TokenType.FUNCTION, "exp"),
        (TokenType.CONSTANT, "tau"),
        (TokenType.PAREN, "["),
    ])
    def test_rejects_text_outside_vocabulary(self, kind, text):
        with pytest.raises(ValueError):
            Token(kind, text)

    def test_equal_tokens_compare_equal(self):
        assert Token(TokenType.OPERATOR, "+") == Token(TokenType.OPERATOR, "+")
