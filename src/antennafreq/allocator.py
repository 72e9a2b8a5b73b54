"""
Frequency allocation for antenna networks.

The allocator turns an antenna list and a list of pairwise interference
constraints into a RustworkX graph, colors it greedily, and reports the
resulting frequency indices (1-based) per antenna.

Example:
    >>> allocator = FrequencyAllocator(["A", "B", "C"], [("A", "B"), ("B", "C")])
    >>> dict(allocator.compute_coloring())
    {'B': 1, 'A': 2, 'C': 2}
    >>> allocator.minimum_frequencies_used()
    2
"""

import enum
import logging
import warnings
from types import MappingProxyType
from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional, Tuple, Union

import numpy as np
import rustworkx as rx

from .coloring import Strategy, get_strategy
from .errors import ConstraintDroppedWarning, ValidationError
from .schema import Constraint

logger = logging.getLogger(__name__)


class AllocatorState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    COLORED = "colored"


def _endpoints(pair: Any) -> Tuple[Hashable, Hashable]:
    """
    Unpack a constraint given as ``Constraint``, as a ``{"source", "target"}``
    mapping (the ``serialize()`` form) or as a two-item sequence.
    """
    if isinstance(pair, Constraint):
        return _checked(pair.source, pair.target)
    if isinstance(pair, Mapping):
        try:
            return _checked(pair["source"], pair["target"])
        except KeyError:
            raise ValidationError(
                f"Constraint mapping needs 'source' and 'target' keys, got {pair!r}"
            ) from None
    if isinstance(pair, (str, bytes)):
        raise ValidationError(f"Constraint must be a pair of antennas, got {pair!r}")
    try:
        u, v = pair
    except (TypeError, ValueError):
        raise ValidationError(f"Constraint must be a pair of antennas, got {pair!r}") from None
    return _checked(u, v)


def _require_hashable(antenna: Any) -> None:
    try:
        hash(antenna)
    except TypeError:
        raise ValidationError(f"Antenna identifier must be hashable, got {antenna!r}") from None


def _checked(u: Any, v: Any) -> Tuple[Hashable, Hashable]:
    _require_hashable(u)
    _require_hashable(v)
    return u, v


class FrequencyAllocator:
    """
    Greedy frequency allocator over an interference graph.

    The allocator holds a snapshot of its inputs. Changing the antenna or
    constraint set requires building a new allocator.
    """

    def __init__(
        self,
        nodes: Iterable[Hashable],
        constraints: Iterable[Any] = (),
        strict: bool = True,
        strategy: Union[str, Strategy, None] = None,
    ):
        """
        Build the interference graph.

        Args:
            nodes: Antenna identifiers. Order decides tie-breaks between
                antennas of equal degree.
            constraints: Pairs of antennas that must not share a frequency,
                as ``(u, v)`` tuples, ``Constraint`` objects or
                ``{"source": u, "target": v}`` mappings. Direction and
                repetition are irrelevant.
            strict: If True, a constraint naming an unknown antenna or the
                same antenna twice raises ``ValidationError``. If False it is
                dropped with a ``ConstraintDroppedWarning``.
            strategy: Coloring strategy name or callable, see
                ``antennafreq.coloring.get_strategy``.

        Raises:
            ValidationError: On duplicate antennas, malformed constraints,
                or (when strict) constraints that cannot form an edge.
        """
        self.strict = strict
        self._strategy = get_strategy(strategy)
        self._nodes: Tuple[Hashable, ...] = tuple(nodes)
        self._index: Dict[Hashable, int] = {}
        self._graph = rx.PyGraph(multigraph=False)
        self._dropped: List[Tuple[Hashable, Hashable]] = []

        for node in self._nodes:
            _require_hashable(node)
            if node in self._index:
                raise ValidationError(f"Duplicate antenna identifier {node!r}")
            self._index[node] = self._graph.add_node(node)

        for pair in constraints:
            u, v = _endpoints(pair)
            problem = self._edge_problem(u, v)
            if problem:
                if self.strict:
                    raise ValidationError(problem)
                warnings.warn(f"{problem}; constraint ignored", ConstraintDroppedWarning, stacklevel=2)
                self._dropped.append((u, v))
                continue

            iu, iv = self._index[u], self._index[v]
            if not self._graph.has_edge(iu, iv):
                self._graph.add_edge(iu, iv, None)

        self._colors: Mapping[Hashable, int] = MappingProxyType({})
        self._order: Tuple[Hashable, ...] = ()
        self.state = AllocatorState.UNINITIALIZED

        logger.debug(
            "Built interference graph with %d antennas and %d constraints (%d dropped)",
            self._graph.num_nodes(), self._graph.num_edges(), len(self._dropped),
        )

    def _edge_problem(self, u: Hashable, v: Hashable) -> Optional[str]:
        for endpoint in (u, v):
            if endpoint not in self._index:
                return f"Constraint ({u!r}, {v!r}) references unknown antenna {endpoint!r}"
        if u == v:
            return f"Constraint ({u!r}, {v!r}) pairs an antenna with itself"
        return None

    @property
    def nodes(self) -> Tuple[Hashable, ...]:
        return self._nodes

    @property
    def constraints(self) -> List[Tuple[Hashable, Hashable]]:
        """Distinct constraints that made it into the graph, in insertion order."""
        return [(self._graph[u], self._graph[v]) for u, v in self._graph.edge_list()]

    @property
    def dropped_constraints(self) -> List[Tuple[Hashable, Hashable]]:
        return list(self._dropped)

    @property
    def graph(self) -> rx.PyGraph:
        """A copy of the interference graph; node payloads are antenna identifiers."""
        return self._graph.copy()

    @property
    def assignment(self) -> Mapping[Hashable, int]:
        return self._colors

    @property
    def processing_order(self) -> Tuple[Hashable, ...]:
        """Order in which the last coloring run visited the antennas."""
        return self._order

    def _lookup(self, node: Hashable) -> int:
        try:
            return self._index[node]
        except (KeyError, TypeError):
            raise ValidationError(f"Unknown antenna {node!r}") from None

    def degree(self, node: Hashable) -> int:
        return self._graph.degree(self._lookup(node))

    def neighbors(self, node: Hashable) -> Tuple[Hashable, ...]:
        return tuple(self._graph[i] for i in sorted(self._graph.neighbors(self._lookup(node))))

    def adjacency_matrix(self) -> np.ndarray:
        """0/1 adjacency matrix with rows and columns in antenna order."""
        return rx.adjacency_matrix(self._graph, default_weight=1.0).astype(int)

    def compute_coloring(self) -> Mapping[Hashable, int]:
        """
        Assign a frequency index (starting at 1) to every antenna.

        Each call recomputes the assignment from the graph and replaces the
        previous one.

        Returns:
            Read-only mapping antenna -> frequency index, ordered as the
            antennas were processed.
        """
        color_map = self._strategy(self._graph)

        assignment: Dict[Hashable, int] = {}
        for node_idx, color_idx in color_map.items():
            assignment[self._graph[node_idx]] = color_idx + 1

        missing = [n for n in self._nodes if n not in assignment]
        if missing:
            raise ValidationError(f"Coloring strategy left antennas without a frequency: {missing!r}")

        self._order = tuple(assignment)
        self._colors = MappingProxyType(assignment)
        self.state = AllocatorState.COLORED

        logger.debug(
            "Colored %d antennas with %d frequencies",
            len(assignment), self.minimum_frequencies_used(),
        )
        return self._colors

    def minimum_frequencies_used(self) -> int:
        """
        Number of frequencies the last coloring run consumed.

        This is the highest index assigned, an upper bound on the chromatic
        number of the interference graph rather than a proven minimum.
        Returns 0 before the first run or for an empty network.
        """
        if not self._colors:
            return 0
        return max(self._colors.values())
