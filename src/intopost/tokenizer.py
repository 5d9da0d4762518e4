# tokenizer.py
"""Whitespace tokenizer and token classification."""
from typing import Iterable, List, Sequence

from intopost.constants import ConstantStuff as CS
from intopost.errors import UnknownTokenError


def tokenize(line: str) -> List[str]:
    """Split a line on runs of whitespace. Blank lines give ``[]``."""
    return line.split()


def render(tokens: Iterable[str], separator: str = CS.SEPARATOR_DEFAULT) -> str:
    return separator.join(tokens)


def format_tokens(tokens: Iterable[str]) -> str:
    """Bracketed diagnostic form, e.g. ``[A, +, B]``."""
    return "[" + ", ".join(tokens) + "]"


class TokenGrammar:
    """Decides which of the four token kinds a string belongs to.

    Operands are runs of ASCII letters; numeric literals are accepted as
    operands only when ``allow_numbers`` is set. ``-`` is always the binary
    subtraction operator. Any other token is rejected.
    """

    def __init__(self, allow_numbers: bool = CS.ALLOW_NUMBERS_DEFAULT):
        self.allow_numbers = allow_numbers

    def is_operand(self, token: str) -> bool:
        if CS.OPERAND_RE.fullmatch(token):
            return True
        return self.allow_numbers and CS.NUMBER_RE.fullmatch(token) is not None

    @staticmethod
    def is_operator(token: str) -> bool:
        return token in CS.OPERATORS

    @staticmethod
    def is_parenthesis(token: str) -> bool:
        return token in CS.PARENTHESES

    def classify(self, token: str, expression: Sequence[str] = ()) -> CS.TokenKind:
        if self.is_operand(token):
            return CS.TokenKind.OPERAND
        if self.is_operator(token):
            return CS.TokenKind.OPERATOR
        if token == CS.OPEN_PAREN:
            return CS.TokenKind.OPEN_PAREN
        if token == CS.CLOSE_PAREN:
            return CS.TokenKind.CLOSE_PAREN
        raise UnknownTokenError(token, expression or [token])

    def __repr__(self) -> str:
        return f"TokenGrammar(allow_numbers={self.allow_numbers})"


DEFAULT_GRAMMAR = TokenGrammar()
