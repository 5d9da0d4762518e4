"""intopost — infix to postfix conversion over linked Stack/Queue."""
from intopost.converter import convert_to_postfix
from intopost.errors import ConfigError, ExpressionError, MismatchedParenthesesError, UnknownTokenError
from intopost.structures import Node, Queue, Stack
from intopost.tokenizer import TokenGrammar, format_tokens, render, tokenize

__version__ = "0.1.0"

__all__ = [
    "convert_to_postfix", "tokenize", "render", "format_tokens", "TokenGrammar",
    "Node", "Stack", "Queue",
    "ExpressionError", "MismatchedParenthesesError", "UnknownTokenError", "ConfigError",
]
