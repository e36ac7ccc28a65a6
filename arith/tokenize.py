import logging
from typing import Iterator

from arith.token import PUNCTUATORS, Token, TokenType, new_token

logger = logging.getLogger(__name__)

WHITESPACE = frozenset(" \t\n\r")


def is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def is_whitespace(char: str) -> bool:
    return char in WHITESPACE


class Tokenizer:
    """Pull-based lexer: each ``next_token`` call reads exactly one token.

    Never raises. Unknown characters come back as ``Invalid`` tokens and
    lexing carries on after them. Once the input is exhausted every call
    returns ``EndOfFile``.
    """

    expression: str
    current: int

    def __init__(self, expression: str) -> None:
        self.expression = expression
        self.current = 0

    def skip_whitespace(self) -> None:
        while self.current < len(self.expression) and is_whitespace(
            self.expression[self.current]
        ):
            self.current += 1

    def read_number(self, start: int) -> Token:
        value = float(ord(self.expression[start]) - ord("0"))
        while self.current < len(self.expression) and is_digit(
            self.expression[self.current]
        ):
            value = value * 10 + (ord(self.expression[self.current]) - ord("0"))
            self.current += 1
        return new_token(TokenType.Number, start, value)

    def next_token(self) -> Token:
        self.skip_whitespace()
        if self.current >= len(self.expression):
            return new_token(TokenType.EndOfFile, self.current)

        start = self.current
        char = self.expression[start]
        self.current += 1

        if (kind := PUNCTUATORS.get(char)) is not None:
            token = new_token(kind, start)
        elif is_digit(char):
            token = self.read_number(start)
        else:
            token = new_token(TokenType.Invalid, start, text=char)
        logger.debug("token %s at %d", token, start)
        return token


def tokenize(expression: str) -> Iterator[Token]:
    tokenizer = Tokenizer(expression)
    while True:
        token = tokenizer.next_token()
        yield token
        if token.kind == TokenType.EndOfFile:
            return
