"""Normalized probability values and fitness-proportionate weighting."""

from __future__ import annotations

import math
from typing import Iterator, Sequence, overload


class InvalidProbabilityError(ValueError):
    """Raised when a value cannot be represented as a probability in [0, 1]."""


class NormalizedProbability(float):
    """Float constrained to the closed interval [0, 1].

    Construction fails for negative, greater-than-one, NaN or infinite input
    so that a broken fitness function surfaces immediately instead of being
    silently clamped.
    """

    def __new__(cls, value: float) -> "NormalizedProbability":
        number = float(value)
        if not 0.0 <= number <= 1.0:
            raise InvalidProbabilityError(f"Probability must be in [0.0, 1.0], got {number!r}.")
        return super().__new__(cls, number)

    def __repr__(self) -> str:
        return f"NormalizedProbability({float(self)!r})"


class Probabilities(Sequence[NormalizedProbability]):
    """Lazy view of ``scores`` normalized by their sum.

    The view keeps a reference to the input scores and builds each weight on
    access, so it can be iterated any number of times without allocating an
    intermediate list.
    """

    def __init__(self, scores: Sequence[float]) -> None:
        if len(scores) == 0:
            raise InvalidProbabilityError("Cannot normalize an empty score sequence.")
        try:
            total = math.fsum(scores)
        except OverflowError as exc:
            raise InvalidProbabilityError("Scores overflow when summed.") from exc
        if not math.isfinite(total) or total <= 0.0:
            raise InvalidProbabilityError(f"Scores must sum to a positive finite value, got {total!r}.")
        self._scores = scores
        self._total = total

    def __len__(self) -> int:
        return len(self._scores)

    @overload
    def __getitem__(self, index: int) -> NormalizedProbability: ...

    @overload
    def __getitem__(self, index: slice) -> list[NormalizedProbability]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [NormalizedProbability(score / self._total) for score in self._scores[index]]
        return NormalizedProbability(self._scores[index] / self._total)

    def __iter__(self) -> Iterator[NormalizedProbability]:
        for score in self._scores:
            yield NormalizedProbability(score / self._total)


def probabilities(scores: Sequence[float]) -> Probabilities:
    """Return selection weights proportional to ``scores``.

    Args:
        scores: Non-negative fitness scores with a strictly positive sum.

    Returns:
        Probabilities: One weight per score, each in [0, 1], summing to 1
        within floating-point tolerance.

    Raises:
        InvalidProbabilityError: If ``scores`` is empty or sums to a
            non-positive or non-finite value (eagerly), or if a negative score
            produces an out-of-range weight (when that weight is read).
    """
    return Probabilities(scores)
