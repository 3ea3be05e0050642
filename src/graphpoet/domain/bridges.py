"""Bridge scoring — metrics and deterministic ranking of two-hop paths.

A bridge between ``left`` and ``right`` is a word ``b`` with edges
``left -> b`` and ``b -> right``. Candidates are ranked by score
descending, then by label ascending; the first candidate wins.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import StrEnum


class BridgeMetric(StrEnum):
    """How the two edge weights of a path combine into one score."""

    SUM = "sum"
    PRODUCT = "product"
    MIN = "min"


_COMBINE: dict[BridgeMetric, Callable[[int, int], int]] = {
    BridgeMetric.SUM: lambda a, b: a + b,
    BridgeMetric.PRODUCT: lambda a, b: a * b,
    BridgeMetric.MIN: min,
}


@dataclass(frozen=True)
class Bridge:
    """A ranked bridge candidate."""

    word: str
    in_weight: int
    out_weight: int
    score: int


def rank_bridges(
    targets: Mapping[str, int],
    sources: Mapping[str, int],
    metric: BridgeMetric = BridgeMetric.SUM,
) -> list[Bridge]:
    """Rank every word that is both a target of the left word and a source of the right.

    Args:
        targets: Outgoing weights of the left word.
        sources: Incoming weights of the right word.
        metric: Score combination for the two edge weights.
    """
    combine = _COMBINE[BridgeMetric(metric)]
    candidates = [
        Bridge(
            word=word,
            in_weight=targets[word],
            out_weight=sources[word],
            score=combine(targets[word], sources[word]),
        )
        for word in targets.keys() & sources.keys()
    ]
    candidates.sort(key=lambda b: (-b.score, b.word))
    return candidates
