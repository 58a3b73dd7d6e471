"""Shared test fixtures for AAC board tests."""

import sys
from pathlib import Path

import pytest

# Ensure the repo root is importable
sys.path.insert(0, str(Path(__file__).parent.parent))

SAMPLE_BOARD = """\
img/food/plate.png food
>img/food/icons8-french-fries-96.png french fries
>img/food/icons8-watermelon-96.png watermelon
img/clothing/hanger.png clothing
>img/clothing/collaredshirt.png collared shirt
"""


@pytest.fixture
def board_file(tmp_path):
    """Write SAMPLE_BOARD to a temp file and return its path."""
    path = tmp_path / "board.txt"
    path.write_text(SAMPLE_BOARD, encoding="utf-8")
    return str(path)


@pytest.fixture
def write_board(tmp_path):
    """Factory: write arbitrary board text and return its path."""
    def _write(text: str, name: str = "custom.txt") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write
