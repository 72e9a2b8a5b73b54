import logging
import rustworkx as rx
from typing import Callable, Dict, List, Set, Union

from .errors import ValidationError

logger = logging.getLogger(__name__)


def first_fit(used: Set[int]) -> int:
    """Smallest non-negative color not in ``used``."""
    color = 0
    while color in used:
        color += 1
    return color


class LargestFirstColoring:
    """
    Greedy largest-degree-first coloring for RustworkX graphs.

    Nodes are visited once, in order of descending degree. Nodes of equal
    degree keep their index order, so a graph built from an ordered antenna
    list is always colored the same way. Each node takes the lowest color
    not already held by one of its colored neighbors.

    Returns a dict of node index -> 0-based color whose insertion order is
    the order the nodes were colored in.
    """

    name = "largest_first"

    def order(self, graph: rx.PyGraph) -> List[int]:
        # sorted() is stable, so equal degrees stay in index order
        return sorted(graph.node_indices(), key=lambda n: -graph.degree(n))

    def __call__(self, graph: rx.PyGraph) -> Dict[int, int]:
        colors: Dict[int, int] = {}

        for node in self.order(graph):
            used = {colors[nbr] for nbr in graph.neighbors(node) if nbr in colors}
            colors[node] = first_fit(used)

        return colors


class SaturationColoring:
    """
    DSATUR coloring: always color the node whose colored neighbors already
    use the most distinct colors, breaking ties by degree and then by index.
    """

    name = "saturation"

    def __call__(self, graph: rx.PyGraph) -> Dict[int, int]:
        colors: Dict[int, int] = {}
        saturation: Dict[int, Set[int]] = {n: set() for n in graph.node_indices()}
        uncolored = list(graph.node_indices())

        while uncolored:
            node = max(uncolored, key=lambda n: (len(saturation[n]), graph.degree(n), -n))
            color = first_fit(saturation[node])
            colors[node] = color
            uncolored.remove(node)

            for nbr in graph.neighbors(node):
                if nbr not in colors:
                    saturation[nbr].add(color)

        return colors


Strategy = Callable[[rx.PyGraph], Dict[int, int]]

STRATEGIES: Dict[str, type] = {
    LargestFirstColoring.name: LargestFirstColoring,
    SaturationColoring.name: SaturationColoring,
}


def get_strategy(strategy: Union[str, Strategy, None] = None) -> Strategy:
    """
    Resolve a coloring strategy.

    Args:
        strategy: A registered name (see ``STRATEGIES``), any callable taking a
            ``rx.PyGraph`` and returning node index -> color, or None for the
            default largest-first strategy.
    """
    if strategy is None:
        return LargestFirstColoring()
    if isinstance(strategy, str):
        try:
            return STRATEGIES[strategy]()
        except KeyError:
            raise ValidationError(
                f"Unknown coloring strategy {strategy!r}; expected one of {sorted(STRATEGIES)}"
            ) from None
    if not callable(strategy):
        raise ValidationError(f"Coloring strategy must be callable, got {type(strategy).__name__}")
    logger.debug("Using custom coloring strategy %s", type(strategy).__name__)
    return strategy
