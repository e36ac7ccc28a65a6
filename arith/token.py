from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional


class TokenType(IntEnum):
    Number = 1
    Plus = 2
    Minus = 3
    Multiply = 4
    Divide = 5
    LeftParen = 6
    RightParen = 7
    EndOfFile = 8
    Invalid = 9


SYMBOLS = {
    TokenType.Plus: "+",
    TokenType.Minus: "-",
    TokenType.Multiply: "*",
    TokenType.Divide: "/",
    TokenType.LeftParen: "(",
    TokenType.RightParen: ")",
}

PUNCTUATORS = {symbol: kind for kind, symbol in SYMBOLS.items()}


@dataclass(frozen=True)
class Token:
    kind: TokenType
    value: Optional[float] = None  # only set for numbers
    location: int = field(default=0, compare=False)
    text: Optional[str] = field(default=None, compare=False)

    def __str__(self) -> str:
        match self.kind:
            case TokenType.Number:
                return f"{self.value}"
            case TokenType.EndOfFile:
                return "EOF"
            case TokenType.Invalid:
                return "Invalid token"
        return SYMBOLS[self.kind]


def new_token(
    kind: TokenType,
    location: int = 0,
    value: Optional[float] = None,
    text: Optional[str] = None,
) -> Token:
    return Token(kind, value, location, text)
