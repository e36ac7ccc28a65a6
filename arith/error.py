from enum import IntEnum

from arith.helper import error_message


class ParseErrorKind(IntEnum):
    UnexpectedToken = 1
    UnterminatedGroup = 2
    InvalidCharacter = 3
    NestingTooDeep = 4


class ParseError(ValueError):
    """Malformed input found while evaluating in strict mode.

    ``str()`` gives the expression with a caret under ``location``.
    """

    def __init__(
        self, kind: ParseErrorKind, expression: str, location: int, message: str
    ) -> None:
        super().__init__(error_message(expression, location, message))
        self.kind = kind
        self.expression = expression
        self.location = location
        self.message = message
