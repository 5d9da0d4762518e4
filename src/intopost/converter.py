# converter.py
"""Infix to postfix conversion (shunting-yard)."""
import logging
from typing import List, Optional, Sequence

from intopost.constants import ConstantStuff as CS, precedence
from intopost.errors import MismatchedParenthesesError
from intopost.structures import Queue, Stack
from intopost.tokenizer import DEFAULT_GRAMMAR, TokenGrammar

logger = logging.getLogger(__name__)


def _pops_before(top: str, current: str) -> bool:
    # >= keeps all four operators left-associative
    return precedence(top) >= precedence(current)


def convert_to_postfix(tokens: Sequence[str], grammar: Optional[TokenGrammar] = None) -> List[str]:
    """Convert an infix token sequence to postfix.

    Uses a fresh operator Stack and output Queue per call and keeps no
    state between calls.

    Raises:
        MismatchedParenthesesError: a ``)`` with no open ``(`` before it, or
            a ``(`` never closed.
        UnknownTokenError: a token outside ``grammar``.
    """
    grammar = grammar or DEFAULT_GRAMMAR
    postfix: Queue[str] = Queue()
    operators: Stack[str] = Stack()

    for token in tokens:
        kind = grammar.classify(token, tokens)

        if kind == CS.TokenKind.OPERAND:
            postfix.enqueue(token)

        elif kind == CS.TokenKind.OPERATOR:
            while (not operators.empty()
                   and operators.top() != CS.OPEN_PAREN
                   and _pops_before(operators.top(), token)):
                postfix.enqueue(operators.pop())
            operators.push(token)

        elif kind == CS.TokenKind.OPEN_PAREN:
            operators.push(token)

        else:  # CLOSE_PAREN
            while not operators.empty() and operators.top() != CS.OPEN_PAREN:
                postfix.enqueue(operators.pop())
            if operators.empty():
                raise MismatchedParenthesesError("Unmatched ')'", tokens)
            operators.pop()

    while not operators.empty():
        if grammar.is_parenthesis(operators.top()):
            raise MismatchedParenthesesError("Unmatched '('", tokens)
        postfix.enqueue(operators.pop())

    result = []
    while not postfix.empty():
        result.append(postfix.dequeue())
    logger.debug("Converted %s → %s", list(tokens), result)
    return result
