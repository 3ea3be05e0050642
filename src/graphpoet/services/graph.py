"""GraphService — read-only inspection of the word affinity graph.

Uses ``self._engine.poet.graph`` (triggers the lazy corpus build).
Neighbor listings are ordered by weight descending, then word ascending.
"""

from __future__ import annotations

from typing import Any

from graphpoet.services.base import BaseService
from graphpoet.services.result import ServiceResult
from graphpoet.services.telemetry import traced


def _ranked_neighbors(weights: dict[str, int]) -> list[dict[str, Any]]:
    ranked = sorted(weights.items(), key=lambda item: (-item[1], item[0]))
    return [{"word": word, "weight": weight} for word, weight in ranked]


class GraphService(BaseService):
    """Handles graph statistics and neighbor queries."""

    @traced
    def stats(self) -> ServiceResult:
        """Vertex, edge, and total weight counts of the affinity graph."""
        poet = self._load_poet("graph_stats")
        if isinstance(poet, ServiceResult):
            return poet

        g = poet.graph
        return ServiceResult(
            ok=True,
            op="graph_stats",
            data={
                "corpus": str(self._engine.corpus_path),
                "words": self._engine.corpus_words,
                "vertices": len(g),
                "edges": g.number_of_edges(),
                "total_weight": g.total_weight(),
                "metric": str(poet.metric),
            },
            warnings=self._corpus_warnings(),
        )

    @traced
    def targets(self, word: str) -> ServiceResult:
        """Words that follow *word* in the corpus, with adjacency counts."""
        return self._neighbors("graph_targets", word, outgoing=True)

    @traced
    def sources(self, word: str) -> ServiceResult:
        """Words that precede *word* in the corpus, with adjacency counts."""
        return self._neighbors("graph_sources", word, outgoing=False)

    def _neighbors(self, op: str, word: str, *, outgoing: bool) -> ServiceResult:
        poet = self._load_poet(op)
        if isinstance(poet, ServiceResult):
            return poet

        key = self._engine.normalize(word)
        g = poet.graph
        items = _ranked_neighbors(g.targets(key) if outgoing else g.sources(key))
        warnings: list[str] = []
        if key not in g:
            warnings.append(f"'{word}' does not occur in the corpus")
        return ServiceResult(
            ok=True,
            op=op,
            data={"word": key, "count": len(items), "items": items},
            warnings=warnings,
        )

    @traced
    def bridges(self, left: str, right: str, *, top: int = 10) -> ServiceResult:
        """Rank every bridge candidate between *left* and *right*.

        The first item is the bridge ``compose`` would insert.
        """
        poet = self._load_poet("graph_bridges")
        if isinstance(poet, ServiceResult):
            return poet

        ranked = poet.candidates(left, right)
        items = [
            {
                "word": b.word,
                "in_weight": b.in_weight,
                "out_weight": b.out_weight,
                "score": b.score,
            }
            for b in ranked[: max(top, 0)]
        ]
        return ServiceResult(
            ok=True,
            op="graph_bridges",
            data={
                "left": self._engine.normalize(left),
                "right": self._engine.normalize(right),
                "metric": str(poet.metric),
                "total": len(ranked),
                "count": len(items),
                "items": items,
            },
        )
