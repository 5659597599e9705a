from __future__ import annotations

"""Levenshtein edit distance over a single rolling column."""

import logging
from typing import Any, List, NamedTuple, Optional, Sequence, Tuple, Union

from .config import EngineSettings

LOGGER = logging.getLogger(__name__)


class InvalidThresholdError(ValueError):
    """Raised when a distance threshold is negative or not an integer."""


class SweepResult(NamedTuple):
    """Outcome of filling one column: bottom cell and smallest row value."""

    value: int
    smallest: int


def _check_threshold(max_dist: Any) -> int:
    if isinstance(max_dist, bool) or not isinstance(max_dist, int):
        raise InvalidThresholdError(f"Threshold must be an integer, got {max_dist!r}")
    if max_dist < 0:
        raise InvalidThresholdError(f"Threshold must be non-negative, got {max_dist}")
    return max_dist


def _orient(a: Sequence[Any], b: Sequence[Any]) -> Tuple[Sequence[Any], Sequence[Any]]:
    # The row sequence sizes the column, so keep it the shorter one.
    if len(a) > len(b):
        return b, a
    return a, b


def _initial_column(a: Sequence[Any], first: Any) -> List[int]:
    """Distances from every prefix of *a* to the one-element prefix of *b*.

    ``column[0]`` is the virtual border row. The left neighbour of each cell
    is ``i + 1`` and never beats the diagonal, so it is skipped.
    """

    column = [0] * (len(a) + 1)
    column[0] = 1
    for i in range(1, len(a) + 1):
        cost = 0 if a[i - 1] == first else 1
        column[i] = min(column[i - 1] + 1, (i - 1) + cost)
    return column


def _sweep(a: Sequence[Any], char_b: Any, j: int, column: List[int]) -> SweepResult:
    """Advance *column* in place to column ``j`` of the distance matrix."""

    above = j + 1  # border row
    smallest = len(a) + j + 1
    for i in range(1, len(a) + 1):
        cost = 0 if a[i - 1] == char_b else 1
        value = min(column[i - 1] + cost, above + 1, column[i] + 1)
        column[i - 1] = above
        above = value
        if value < smallest:
            smallest = value
    column[len(a)] = above
    return SweepResult(above, smallest)


def _prepare(
    a: Optional[Sequence[Any]], b: Optional[Sequence[Any]]
) -> Union[int, Tuple[Sequence[Any], Sequence[Any], List[int]]]:
    """Return the length to short circuit with, or the oriented pair and column."""

    a = () if a is None else a
    b = () if b is None else b
    if len(a) == 0:
        return len(b)
    if len(b) == 0:
        return len(a)
    a, b = _orient(a, b)
    return a, b, _initial_column(a, b[0])


def distance(a: Optional[Sequence[Any]], b: Optional[Sequence[Any]]) -> int:
    """Return the Levenshtein distance between *a* and *b*.

    ``None`` counts as an empty sequence. Elements are compared with ``==``,
    so strings are measured per code point.
    """

    prepared = _prepare(a, b)
    if isinstance(prepared, int):
        return prepared
    a, b, column = prepared
    for j in range(1, len(b)):
        _sweep(a, b[j], j, column)
    return column[len(a)]


def distance_bounded(
    a: Optional[Sequence[Any]], b: Optional[Sequence[Any]], max_dist: int
) -> int:
    """Return the distance, or ``max_dist + 1`` once it exceeds *max_dist*.

    Empty inputs short circuit to the other sequence's length even when that
    length is above the threshold.
    """

    max_dist = _check_threshold(max_dist)
    prepared = _prepare(a, b)
    if isinstance(prepared, int):
        return prepared
    a, b, column = prepared
    for j in range(1, len(b)):
        result = _sweep(a, b[j], j, column)
        # Row minima never shrink from one column to the next.
        if result.smallest > max_dist:
            LOGGER.debug(
                "Stopped at column %d of %d: distance exceeds %d", j, len(b), max_dist
            )
            return max_dist + 1
    final = column[len(a)]
    return final if final <= max_dist else max_dist + 1


def within_distance(
    a: Optional[Sequence[Any]], b: Optional[Sequence[Any]], max_dist: int
) -> bool:
    """True when *a* and *b* are at most *max_dist* edits apart."""

    return distance_bounded(a, b, max_dist) <= max_dist


def compute(
    a: Optional[Sequence[Any]],
    b: Optional[Sequence[Any]],
    settings: Optional[EngineSettings] = None,
) -> int:
    """Measure *a* against *b* using the threshold carried by *settings*."""

    settings = settings or EngineSettings()
    if settings.max_distance is None:
        return distance(a, b)
    return distance_bounded(a, b, settings.max_distance)
