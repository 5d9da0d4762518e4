# driver.py
"""Read a file of infix expressions and emit their postfix forms."""
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from intopost.constants import ConstantStuff as CS
from intopost.converter import convert_to_postfix
from intopost.errors import ExpressionError
from intopost.models import ConversionResult, Expression
from intopost.schema import ConfigSchema
from intopost.tokenizer import TokenGrammar, format_tokens, render, tokenize

logger = logging.getLogger(__name__)


class InToPost:
    """Two-phase driver: ``load()`` tokenizes every line, ``emit()`` converts.

    Output (echoed token lists, postfix lines, per-line errors) goes to
    ``out``; progress goes to the logger. That includes the two
    ``InToPost: ...`` banners written by ``run()``: they are log records on
    stderr, not lines in ``out``, so ``out`` holds only the token lists
    followed by the postfix lines.
    """

    def __init__(self, src_file, config: Optional[ConfigSchema] = None, out: Optional[TextIO] = None):
        self.src_file = Path(src_file)
        self.config = config or ConfigSchema()
        self.out = out or sys.stdout
        self.grammar = TokenGrammar(allow_numbers=self.config.allow_numbers)
        self.expressions: List[Expression] = []

    def load(self) -> List[Expression]:
        self.expressions = []
        with open(self.src_file, "r", encoding="utf-8") as f:
            for line_no, raw_line in enumerate(f, start=1):
                text = raw_line.strip()
                tokens = tokenize(text)
                if not tokens and self.config.skip_blank_lines:
                    logger.debug("Skipping blank line %d", line_no)
                    continue
                self.expressions.append(Expression(line_no, text, tuple(tokens)))
                if self.config.echo_tokens:
                    print(format_tokens(tokens), file=self.out)

        logger.info("Read %d expression(s) from %s", len(self.expressions), self.src_file.name)
        return self.expressions

    def convert_one(self, expression: Expression) -> List[str]:
        try:
            return convert_to_postfix(expression.tokens, self.grammar)
        except ExpressionError as e:
            e.line_no = expression.line_no
            raise

    def emit(self) -> List[ConversionResult]:
        results = []
        for expression in self.expressions:
            try:
                postfix = self.convert_one(expression)
            except ExpressionError as e:
                if self.config.fail_fast:
                    raise
                logger.error("%s", e)
                print(f"{CS.ERROR_LINE_PREFIX}{e}", file=self.out)
                results.append(ConversionResult(expression, error=str(e)))
                continue

            print(render(postfix, self.config.separator), file=self.out)
            results.append(ConversionResult(expression, postfix))

        failed = sum(1 for r in results if not r.ok)
        if failed:
            logger.warning("%d of %d expression(s) could not be converted", failed, len(results))
        return results

    def run(self) -> List[ConversionResult]:
        logger.info(CS.BANNER_CONVERTING)
        self.load()
        logger.info(CS.BANNER_EMITTING)
        return self.emit()
