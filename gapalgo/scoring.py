"""Scores, score matrix and traceback steps for sequence alignment."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ResultType(Enum):
    """How one cell of an alignment path was reached."""

    UNKNOWN = 0
    LEFT_TOP_MATCH = 1
    LEFT_TOP_MISMATCH = 2
    LEFT = 3  # deletion
    TOP = 4  # insertion


@dataclass(frozen=True)
class AlignStep:
    """One step of an alignment path, at a 1-based matrix cell."""

    row: int
    column: int
    type: ResultType


@dataclass(frozen=True)
class ScoreScheme:
    """Scores for a match, a mismatch, an insertion and a deletion."""

    match_score: int
    mismatch_score: int
    insert_score: int
    delete_score: int


class ScoreMatrix:
    """A zero-filled integer matrix of ``(rows + 1) x (columns + 1)`` cells.

    Row and column 0 stand for the empty prefix of each sequence.
    """

    def __init__(self, rows: int, columns: int) -> None:
        if rows < 0 or columns < 0:
            raise ValueError("matrix dimensions must not be negative")
        self.height = rows + 1
        self.width = columns + 1
        self._cells = [[0] * self.width for _ in range(self.height)]

    def _check(self, row: int, column: int) -> None:
        if not (0 <= row < self.height and 0 <= column < self.width):
            raise IndexError(f"cell ({row}, {column}) outside {self.height}x{self.width} matrix")

    def get(self, row: int, column: int) -> int:
        self._check(row, column)
        return self._cells[row][column]

    def set(self, row: int, column: int, value: int) -> None:
        self._check(row, column)
        self._cells[row][column] = value