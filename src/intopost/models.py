# models.py
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Expression:
    """One input line and its tokens. Immutable once tokenized."""
    line_no: int
    text: str
    tokens: Tuple[str, ...] = field(default_factory=tuple)


@dataclass
class ConversionResult:
    expression: Expression
    postfix: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
