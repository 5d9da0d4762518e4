# tests/conftest.py
from pathlib import Path

import pytest

TEST_DIR = Path(__file__).parent

PROG1_POSTFIX = [
    "A B +",
    "A B C * +",
    "A B C * + D +",
    "A B + C *",
    "A B + C D - /",
    "A B + C * D E - -",
]


@pytest.fixture
def prog1():
    """The six-line worked example shipped next to the tests."""
    return TEST_DIR / "prog1.txt"


@pytest.fixture
def write_file(tmp_path):
    def _write(name, content):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write
