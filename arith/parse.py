import logging
import math
from typing import Optional

from arith.context import STRICT_MODE
from arith.error import ParseError, ParseErrorKind
from arith.helper import error_message
from arith.token import Token, TokenType
from arith.tokenize import Tokenizer

logger = logging.getLogger(__name__)

# Each nested group costs three Python frames of recursion.
MAX_NESTING_DEPTH = 200


def divide(left: float, right: float) -> float:
    """IEEE-754 division: a zero divisor yields ``inf`` or ``nan``, never raises."""
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


class Parse:
    """Recursive-descent evaluator over a single lookahead token.

    expression := term (('+' | '-') term)*
    term       := factor (('*' | '/') factor)*
    factor     := Number | '(' expression ')'

    Each rule returns the value it matched, so no tree is built.
    """

    tokenizer: Tokenizer
    current_token: Token
    strict: bool
    depth: int

    def __init__(self, tokenizer: Tokenizer, strict: bool = False) -> None:
        self.tokenizer = tokenizer
        self.strict = strict
        self.depth = 0
        self.current_token = tokenizer.next_token()

    def advance(self) -> None:
        self.current_token = self.tokenizer.next_token()

    def skip_group(self) -> None:
        """Drop tokens up to the close paren matching an already consumed open one."""
        balance = 1
        while balance and self.current_token.kind != TokenType.EndOfFile:
            if self.current_token.kind == TokenType.LeftParen:
                balance += 1
            elif self.current_token.kind == TokenType.RightParen:
                balance -= 1
            self.advance()

    def report(self, kind: ParseErrorKind, token: Token, message: str) -> None:
        expression = self.tokenizer.expression
        if self.strict:
            raise ParseError(kind, expression, token.location, message)
        logger.warning(error_message(expression, token.location, message))

    def report_unexpected(self, token: Token) -> None:
        if token.kind == TokenType.Invalid:
            self.report(
                ParseErrorKind.InvalidCharacter,
                token,
                f"invalid character {token.text!r}",
            )
            return
        self.report(ParseErrorKind.UnexpectedToken, token, f"unexpected token: {token}")

    def parse(self) -> float:
        result = self.parse_expression()
        # Lenient mode ignores anything left after a complete expression.
        if self.strict and self.current_token.kind != TokenType.EndOfFile:
            self.report_unexpected(self.current_token)
        return result

    def parse_expression(self) -> float:
        result = self.parse_term()
        while self.current_token.kind in (TokenType.Plus, TokenType.Minus):
            token = self.current_token
            self.advance()
            if token.kind == TokenType.Plus:
                result += self.parse_term()
            else:
                result -= self.parse_term()
        return result

    def parse_term(self) -> float:
        result = self.parse_factor()
        while self.current_token.kind in (TokenType.Multiply, TokenType.Divide):
            token = self.current_token
            self.advance()
            if token.kind == TokenType.Multiply:
                result *= self.parse_factor()
            else:
                result = divide(result, self.parse_factor())
        return result

    def parse_factor(self) -> float:
        token = self.current_token
        self.advance()

        match token.kind:
            case TokenType.Number:
                return token.value
            case TokenType.LeftParen:
                if self.depth >= MAX_NESTING_DEPTH:
                    self.report(ParseErrorKind.NestingTooDeep, token, "nesting too deep")
                    self.skip_group()
                    return 0.0
                self.depth += 1
                result = self.parse_expression()
                self.depth -= 1
                if self.current_token.kind != TokenType.RightParen:
                    self.report(
                        ParseErrorKind.UnterminatedGroup,
                        self.current_token,
                        "expected ')'",
                    )
                self.advance()
                return result
        self.report_unexpected(token)
        return 0.0


def evaluate(expression: str, strict: Optional[bool] = None) -> float:
    if strict is None:
        strict = STRICT_MODE.get()
    return Parse(Tokenizer(expression), strict=strict).parse()
