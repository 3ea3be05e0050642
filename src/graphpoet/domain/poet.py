"""AffinityPoet — insert bridge words using a word affinity graph.

Build phase: every adjacent corpus pair ``(w1, w2)`` adds one unit of
weight to the edge ``w1 -> w2``. The finished graph is frozen and owned
by the poet.

Generation phase: for each adjacent input pair, the best two-hop path
``w1 -> b -> w2`` (see :mod:`graphpoet.domain.bridges`) contributes the
bridge ``b``. Input words keep their casing; bridges are emitted as graph
keys (lower case). At most one bridge per pair.

For example, with the corpus::

    This is a test of the Mugar Omni Theater sound system.

the input ``Test the system.`` becomes ``Test of the system.``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from graphpoet.domain.bridges import Bridge, BridgeMetric, rank_bridges
from graphpoet.domain.graph import WeightedDirectedGraph
from graphpoet.domain.tokens import normalize_word


def build_affinity_graph(words: Iterable[str]) -> WeightedDirectedGraph[str]:
    """Count adjacencies: edge ``a -> b`` weighs the number of times b follows a."""
    graph: WeightedDirectedGraph[str] = WeightedDirectedGraph()
    previous: str | None = None
    for word in words:
        if previous is not None:
            weight = graph.targets(previous).get(word, 0)
            graph.set(previous, word, weight + 1)
        previous = word
    return graph


@dataclass(frozen=True)
class Insertion:
    """A bridge spliced in after input position *position*."""

    position: int
    left: str
    right: str
    bridge: Bridge


class AffinityPoet:
    """Poetry generator over a frozen word affinity graph.

    Construct with :meth:`build`, or pass a prebuilt graph (which is
    frozen in place). The graph is read-only once the poet exists, so
    concurrent ``generate`` calls are safe.
    """

    def __init__(
        self,
        graph: WeightedDirectedGraph[str],
        *,
        metric: BridgeMetric = BridgeMetric.SUM,
        normalize: Callable[[str], str] = normalize_word,
    ) -> None:
        graph.freeze()
        self._graph = graph
        self._metric = BridgeMetric(metric)
        self._normalize = normalize

    @classmethod
    def build(
        cls,
        words: Iterable[str],
        *,
        metric: BridgeMetric = BridgeMetric.SUM,
        normalize: Callable[[str], str] = normalize_word,
    ) -> AffinityPoet:
        """Build and freeze the affinity graph of corpus *words*.

        Words are passed through *normalize*; words that normalize to an
        empty string are skipped.
        """
        keys = (key for key in map(normalize, words) if key)
        return cls(build_affinity_graph(keys), metric=metric, normalize=normalize)

    @property
    def graph(self) -> WeightedDirectedGraph[str]:
        return self._graph

    @property
    def metric(self) -> BridgeMetric:
        return self._metric

    def candidates(self, left: str, right: str) -> list[Bridge]:
        """All bridges from *left* to *right*, best first."""
        return rank_bridges(
            self._graph.targets(self._normalize(left)),
            self._graph.sources(self._normalize(right)),
            self._metric,
        )

    def bridge(self, left: str, right: str) -> Bridge | None:
        ranked = self.candidates(left, right)
        return ranked[0] if ranked else None

    def insertions(self, words: Sequence[str]) -> list[Insertion]:
        """Winning bridge for every adjacent pair of *words* that has one."""
        found: list[Insertion] = []
        for i in range(len(words) - 1):
            best = self.bridge(words[i], words[i + 1])
            if best is not None:
                found.append(Insertion(position=i, left=words[i], right=words[i + 1], bridge=best))
        return found

    def generate(
        self,
        words: Sequence[str],
        insertions: Iterable[Insertion] | None = None,
    ) -> list[str]:
        """Return *words* with a bridge spliced between each bridgeable pair.

        Pass *insertions* already computed for *words* to skip ranking again.
        """
        if insertions is None:
            insertions = self.insertions(words)
        after = {ins.position: ins.bridge.word for ins in insertions}
        output: list[str] = []
        for i, word in enumerate(words):
            output.append(word)
            if i in after:
                output.append(after[i])
        return output
