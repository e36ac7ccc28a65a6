def error_message(expression: str, location: int, message: str) -> str:
    """Render the source line holding ``location`` with a caret under it."""
    start = expression.rfind("\n", 0, location) + 1
    end = expression.find("\n", location)
    line = expression[start:] if end == -1 else expression[start:end]
    return f"{line}\n{' ' * (location - start)}^ {message}\n"
