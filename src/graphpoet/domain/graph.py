"""WeightedDirectedGraph — mutable labeled digraph with positive integer weights.

Backed by a NetworkX DiGraph. Each stored edge carries a ``weight``
attribute >= 1; weight 0 is never stored. Successor and predecessor views
come from the same DiGraph, so ``targets`` and ``sources`` always agree.

Lifecycle: mutate during the build phase, then :meth:`freeze`. A frozen
graph rejects every mutation and is safe to share between readers.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator

import networkx as nx


class InvalidWeightError(ValueError):
    """Raised when an edge weight is negative or not an integer."""


class GraphFrozenError(RuntimeError):
    """Raised when a frozen graph is mutated."""


class WeightedDirectedGraph[V: Hashable]:
    """Directed graph with at most one weighted edge per ordered vertex pair.

    Self-loops are allowed and behave like any other edge. Querying a
    vertex that does not exist is not an error: ``targets`` and ``sources``
    return an empty mapping.
    """

    def __init__(self) -> None:
        self._g: nx.DiGraph = nx.DiGraph()
        self._frozen = False

    # ------------------------------------------------------------------
    # Phase
    # ------------------------------------------------------------------

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """End the build phase. Later mutations raise GraphFrozenError."""
        self._frozen = True

    def _check_mutable(self) -> None:
        if self._frozen:
            raise GraphFrozenError("Graph is frozen; build phase has ended")

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, vertex: V) -> bool:
        """Add *vertex* if absent. Returns True iff the vertex set changed."""
        self._check_mutable()
        if vertex in self._g:
            return False
        self._g.add_node(vertex)
        return True

    def remove(self, vertex: V) -> bool:
        """Remove *vertex* and every edge touching it.

        Returns True iff the vertex was present.
        """
        self._check_mutable()
        if vertex not in self._g:
            return False
        self._g.remove_node(vertex)
        return True

    def set(self, source: V, target: V, weight: int) -> int:
        """Set the weight of the edge ``source -> target``.

        Weight 0 deletes the edge if it exists and leaves both endpoints in
        the vertex set. A positive weight creates the edge (adding missing
        endpoints) or overwrites its weight.

        Returns:
            The previous weight, or 0 if the edge did not exist.

        Raises:
            InvalidWeightError: *weight* is negative or not an int.
            GraphFrozenError: the graph has been frozen.
        """
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise InvalidWeightError(f"Edge weight must be an int, got {weight!r}")
        if weight < 0:
            raise InvalidWeightError(f"Edge weight must be >= 0, got {weight}")
        self._check_mutable()

        previous = self._weight(source, target)
        if weight == 0:
            if previous:
                self._g.remove_edge(source, target)
            return previous

        self._g.add_edge(source, target, weight=weight)
        return previous

    # ------------------------------------------------------------------
    # Queries (all return snapshots)
    # ------------------------------------------------------------------

    def vertices(self) -> set[V]:
        return set(self._g.nodes)

    def targets(self, vertex: V) -> dict[V, int]:
        """Outgoing ``{target: weight}`` for *vertex*; empty if unknown."""
        if vertex not in self._g:
            return {}
        return {t: attrs["weight"] for t, attrs in self._g.succ[vertex].items()}

    def sources(self, vertex: V) -> dict[V, int]:
        """Incoming ``{source: weight}`` for *vertex*; empty if unknown."""
        if vertex not in self._g:
            return {}
        return {s: attrs["weight"] for s, attrs in self._g.pred[vertex].items()}

    def number_of_edges(self) -> int:
        return self._g.number_of_edges()

    def total_weight(self) -> int:
        return int(self._g.size(weight="weight"))

    def _weight(self, source: V, target: V) -> int:
        attrs = self._g.get_edge_data(source, target)
        return attrs["weight"] if attrs else 0

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._g

    def __len__(self) -> int:
        return self._g.number_of_nodes()

    def __iter__(self) -> Iterator[V]:
        return iter(list(self._g.nodes))

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "mutable"
        return (
            f"<WeightedDirectedGraph vertices={len(self)} "
            f"edges={self.number_of_edges()} {state}>"
        )
