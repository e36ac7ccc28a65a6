from contextvars import ContextVar

# Raise ParseError instead of recovering from malformed input.
STRICT_MODE: ContextVar[bool] = ContextVar("STRICT_MODE", default=False)
