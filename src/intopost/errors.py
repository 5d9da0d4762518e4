"""Exceptions raised for bad input and bad configuration.

Empty-container access on Stack/Queue is not part of this taxonomy; it
raises ``AssertionError`` and means the caller has a bug.
"""
from typing import Optional, Sequence


class ExpressionError(Exception):
    """A single expression could not be converted."""

    def __init__(self, message: str, expression: Sequence[str], line_no: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.expression = list(expression)
        self.line_no = line_no

    def __str__(self) -> str:
        where = f"line {self.line_no}: " if self.line_no is not None else ""
        return f"{where}{self.message} in [{', '.join(self.expression)}]"


class MismatchedParenthesesError(ExpressionError):
    pass


class UnknownTokenError(ExpressionError):
    def __init__(self, token: str, expression: Sequence[str], line_no: Optional[int] = None):
        super().__init__(f"Unknown token '{token}'", expression, line_no)
        self.token = token


class ConfigError(Exception):
    pass
