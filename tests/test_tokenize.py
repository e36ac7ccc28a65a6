import math

import pytest

from arith.token import Token, TokenType, new_token
from arith.tokenize import Tokenizer, is_digit, is_whitespace, tokenize


def kinds(expression: str) -> list[TokenType]:
    return [token.kind for token in tokenize(expression)]


def test_tokenize_basic_expression():
    tokens = list(tokenize("3 + 5 * (10 - 4) / 2"))
    assert tokens == [
        Token(TokenType.Number, 3.0),
        Token(TokenType.Plus),
        Token(TokenType.Number, 5.0),
        Token(TokenType.Multiply),
        Token(TokenType.LeftParen),
        Token(TokenType.Number, 10.0),
        Token(TokenType.Minus),
        Token(TokenType.Number, 4.0),
        Token(TokenType.RightParen),
        Token(TokenType.Divide),
        Token(TokenType.Number, 2.0),
        Token(TokenType.EndOfFile),
    ]


def test_multi_digit_number_is_single_token():
    tokens = list(tokenize("123 + 1"))
    assert tokens[0] == Token(TokenType.Number, 123.0)
    assert kinds("123 + 1") == [
        TokenType.Number,
        TokenType.Plus,
        TokenType.Number,
        TokenType.EndOfFile,
    ]


def test_locations_track_token_start():
    locations = [token.location for token in tokenize("  12+ (3)")]
    assert locations == [2, 4, 6, 7, 8, 9]


def test_empty_input_is_end_of_file():
    tokenizer = Tokenizer("")
    assert tokenizer.next_token().kind == TokenType.EndOfFile


def test_end_of_file_is_idempotent():
    tokenizer = Tokenizer(" 7 \n")
    assert tokenizer.next_token() == Token(TokenType.Number, 7.0)
    for _ in range(5):
        assert tokenizer.next_token().kind == TokenType.EndOfFile
    assert tokenizer.current == len(tokenizer.expression)


@pytest.mark.parametrize("expression", ["\t1\t", "\n1\n", "\r\n1 \r"])
def test_whitespace_is_skipped(expression):
    assert kinds(expression) == [TokenType.Number, TokenType.EndOfFile]


def test_invalid_character_consumes_one_char():
    tokenizer = Tokenizer("3 $4")
    assert tokenizer.next_token().kind == TokenType.Number
    invalid = tokenizer.next_token()
    assert invalid.kind == TokenType.Invalid
    assert invalid.text == "$"
    assert tokenizer.current == 3
    assert tokenizer.next_token() == Token(TokenType.Number, 4.0)


def test_decimal_point_is_invalid():
    assert kinds("1.5") == [
        TokenType.Number,
        TokenType.Invalid,
        TokenType.Number,
        TokenType.EndOfFile,
    ]


def test_minus_is_not_folded_into_number():
    assert kinds("-3") == [TokenType.Minus, TokenType.Number, TokenType.EndOfFile]


def test_bare_operator_tokenizes():
    assert kinds("+") == [TokenType.Plus, TokenType.EndOfFile]


def test_huge_literal_overflows_to_infinity():
    (token, _) = tokenize("9" * 400)
    assert math.isinf(token.value)


def test_character_classes_are_ascii_only():
    assert is_digit("7")
    assert not is_digit("٣")
    assert is_whitespace("\t")
    assert not is_whitespace("\v")


def test_token_display():
    assert str(new_token(TokenType.Number, value=2.0)) == "2.0"
    assert str(new_token(TokenType.Divide)) == "/"
    assert str(new_token(TokenType.EndOfFile)) == "EOF"
    assert str(new_token(TokenType.Invalid, text="?")) == "Invalid token"


def test_tokens_compare_by_value_not_location():
    assert new_token(TokenType.Plus, 0) == new_token(TokenType.Plus, 9)
    assert new_token(TokenType.Number, 0, 1.0) != new_token(TokenType.Number, 0, 2.0)
