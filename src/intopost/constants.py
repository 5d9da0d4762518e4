"""Symbols, precedence table and defaults shared across intopost."""
from enum import IntEnum
import re


class ConstantStuff:
    # ---------------------------
    # Operators / parentheses
    # ---------------------------
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    OPEN_PAREN = "("
    CLOSE_PAREN = ")"

    OPERATORS = (ADD, SUBTRACT, MULTIPLY, DIVIDE)
    PARENTHESES = (OPEN_PAREN, CLOSE_PAREN)

    # Higher binds tighter. Parentheses are never compared directly; the
    # open paren sits at the sentinel 0 so the pop rule never passes it.
    PRECEDENCE = {
        ADD: 1,
        SUBTRACT: 1,
        MULTIPLY: 2,
        DIVIDE: 2,
    }
    LOWEST_PRECEDENCE = 0

    # ---------------------------
    # Token classes
    # ---------------------------
    class TokenKind(IntEnum):
        OPERAND = 1
        OPERATOR = 2
        OPEN_PAREN = 3
        CLOSE_PAREN = 4

    OPERAND_RE = re.compile(r"[A-Za-z]+")
    NUMBER_RE = re.compile(r"[0-9]+(?:\.[0-9]+)?")

    # ---------------------------
    # Driver defaults
    # ---------------------------
    SEPARATOR_DEFAULT = " "
    ECHO_TOKENS_DEFAULT = True
    FAIL_FAST_DEFAULT = False
    ALLOW_NUMBERS_DEFAULT = False
    SKIP_BLANK_LINES_DEFAULT = False

    BANNER_CONVERTING = "InToPost: converting expressions from infix to postfix..."
    BANNER_EMITTING = "InToPost: emitting postfix expressions..."
    ERROR_LINE_PREFIX = "error: "

    REPORT_SUFFIXES = (".json", ".yaml", ".yml")

    # ---------------------------
    # CLI exit codes
    # ---------------------------
    class ExitCode(IntEnum):
        OK = 0
        MALFORMED_EXPRESSION = 1
        USAGE = 2
        INPUT_NOT_FOUND = 3
        BAD_CONFIG = 4
        OUTPUT_ERROR = 5


def precedence(token: str) -> int:
    return ConstantStuff.PRECEDENCE.get(token, ConstantStuff.LOWEST_PRECEDENCE)
