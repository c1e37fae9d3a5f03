"""Smith-Waterman local alignment of two sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from gapalgo.scoring import AlignStep, ResultType, ScoreMatrix, ScoreScheme


class SmithWaterman:
    """Local alignment of ``query`` (matrix rows) against ``ref`` (matrix columns).

    Build the aligner, call ``fill`` to score every cell, then ``traceback``
    to get the path through the best-scoring cell.
    """

    def __init__(self, ref: Sequence[Any], query: Sequence[Any], scheme: ScoreScheme) -> None:
        self.ref = ref
        self.query = query
        self.scheme = scheme
        self.matrix = ScoreMatrix(len(query), len(ref))
        self.max_row = 0
        self.max_column = 0
        self.max_value = 0

    def validate(self) -> None:
        """Check that the scores and sequences suit a local alignment."""
        if self.scheme.match_score <= 0:
            raise ValueError("match score must be positive")
        if self.scheme.insert_score > 0:
            raise ValueError("insert score must not be positive")
        if self.scheme.delete_score > 0:
            raise ValueError("delete score must not be positive")
        if self.scheme.mismatch_score > 0:
            raise ValueError("mismatch score must not be positive")
        if not self.ref:
            raise ValueError("reference sequence is empty")
        if not self.query:
            raise ValueError("query sequence is empty")

    def fill(self) -> None:
        """Score every cell and remember the first cell with the highest score."""
        scheme = self.scheme
        matrix = self.matrix
        for row, query_item in enumerate(self.query, start=1):
            for column, ref_item in enumerate(self.ref, start=1):
                diagonal = matrix.get(row - 1, column - 1)
                if ref_item == query_item:
                    from_diagonal = diagonal + scheme.match_score
                else:
                    from_diagonal = diagonal + scheme.mismatch_score
                from_left = matrix.get(row, column - 1) + scheme.delete_score
                from_top = matrix.get(row - 1, column) + scheme.insert_score
                score = max(from_left, from_top, from_diagonal, 0)
                matrix.set(row, column, score)
                if score > self.max_value:
                    self.max_row = row
                    self.max_column = column
                    self.max_value = score

    def is_match(self, threshold: int = 1) -> bool:
        """Whether the best local score reaches ``threshold``."""
        return self.max_value >= threshold

    def traceback(self) -> list[AlignStep]:
        """The alignment path ending at the best cell, first step first."""
        scheme = self.scheme
        matrix = self.matrix
        steps: list[AlignStep] = []
        current = self.max_value
        i = self.max_row
        j = self.max_column
        while current > 0 and i >= 0 and j >= 0:
            diagonal = matrix.get(i - 1, j - 1)
            left = matrix.get(i, j - 1)
            top = matrix.get(i - 1, j)
            if left + scheme.delete_score == current:
                steps.append(AlignStep(i, j, ResultType.LEFT))
                j -= 1
            elif top + scheme.insert_score == current:
                steps.append(AlignStep(i, j, ResultType.TOP))
                i -= 1
            else:
                if diagonal + scheme.match_score == current:
                    steps.append(AlignStep(i, j, ResultType.LEFT_TOP_MATCH))
                elif diagonal + scheme.mismatch_score == current:
                    steps.append(AlignStep(i, j, ResultType.LEFT_TOP_MISMATCH))
                else:
                    raise RuntimeError(f"no way into cell ({i}, {j}) matches its score")
                i -= 1
                j -= 1
            current = matrix.get(i, j)
        steps.reverse()
        return steps

    @staticmethod
    def _collect(source: Sequence[Any], picked: list[Any]) -> Any:
        if isinstance(source, str):
            return "".join(picked)
        return picked

    def aligned_ref(self, path: Iterable[AlignStep]) -> Any:
        """The reference elements matched along ``path``; a string for string input."""
        picked = [
            self.ref[step.column - 1]
            for step in path
            if step.type is ResultType.LEFT_TOP_MATCH
        ]
        return self._collect(self.ref, picked)

    def aligned_query(self, path: Iterable[AlignStep]) -> Any:
        """The query elements matched along ``path``; a string for string input."""
        picked = [
            self.query[step.row - 1]
            for step in path
            if step.type is ResultType.LEFT_TOP_MATCH
        ]
        return self._collect(self.query, picked)