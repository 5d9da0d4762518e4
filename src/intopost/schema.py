# schema.py
from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field, field_validator

from intopost.constants import ConstantStuff as CS


class ConfigSchema(BaseModel):
    """Options for a conversion run, as read from the YAML config."""

    model_config = ConfigDict(extra="forbid")

    allow_numbers: bool = CS.ALLOW_NUMBERS_DEFAULT
    echo_tokens: bool = CS.ECHO_TOKENS_DEFAULT
    fail_fast: bool = CS.FAIL_FAST_DEFAULT
    skip_blank_lines: bool = CS.SKIP_BLANK_LINES_DEFAULT
    separator: str = Field(default=CS.SEPARATOR_DEFAULT, min_length=1)

    @field_validator("separator")
    @classmethod
    def _separator_is_whitespace(cls, value: str) -> str:
        # Rendered output must re-tokenize to the same sequence
        if not value.isspace():
            raise ValueError("separator must consist of whitespace only")
        return value
