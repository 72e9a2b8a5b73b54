"""
Interference topology analysis for antennafreq.

Helpers that work on the RustworkX interference graph built by
``FrequencyAllocator``: structural properties and chromatic bounds,
independent verification of an assignment, and translation of frequency
indices into a concrete channel plan.
"""

import logging
import numpy as np
import rustworkx as rx
from typing import Any, Dict, Hashable, Mapping, Sequence

from .errors import ValidationError

logger = logging.getLogger(__name__)


def _has_triangle(graph: rx.PyGraph) -> bool:
    for u, v in graph.edge_list():
        if set(graph.neighbors(u)) & set(graph.neighbors(v)):
            return True
    return False


def analyze_graph_properties(graph: rx.PyGraph) -> Dict[str, Any]:
    """
    Analyze key properties of the interference graph.

    Returns:
        dict: ``node_degrees`` keyed by antenna, plus ``max_degree``,
        ``min_degree``, ``mean_degree``, ``density``,
        ``chromatic_lower_bound`` and ``chromatic_upper_bound`` when the
        graph has nodes.
    """
    properties: Dict[str, Any] = {}

    node_degrees = {graph[i]: graph.degree(i) for i in graph.node_indices()}
    properties['node_degrees'] = node_degrees
    properties['num_nodes'] = graph.num_nodes()
    properties['num_edges'] = graph.num_edges()

    if not node_degrees:
        properties['chromatic_lower_bound'] = 0
        properties['chromatic_upper_bound'] = 0
        return properties

    degrees = np.fromiter(node_degrees.values(), dtype=int)
    n = len(degrees)
    properties['max_degree'] = int(degrees.max())
    properties['min_degree'] = int(degrees.min())
    properties['mean_degree'] = float(degrees.mean())
    properties['density'] = 2.0 * graph.num_edges() / (n * (n - 1)) if n > 1 else 0.0

    # Clique bound from below, greedy bound (max degree + 1) from above
    if graph.num_edges() == 0:
        lower = 1
    elif _has_triangle(graph):
        lower = 3
    else:
        lower = 2
    properties['chromatic_lower_bound'] = lower
    properties['chromatic_upper_bound'] = properties['max_degree'] + 1

    return properties


def verify_coloring(graph: rx.PyGraph, coloring: Mapping[Hashable, int]) -> bool:
    """
    Verify that the graph coloring is valid (every antenna has a frequency
    and no constrained pair shares one).

    Args:
        graph: RustworkX graph whose node payloads are antenna identifiers
        coloring: Mapping from antenna identifiers to frequency indices

    Returns:
        bool: True if coloring is valid
    """
    for node in graph.nodes():
        if coloring.get(node) is None:
            return False
    for u, v in graph.edge_list():
        if coloring[graph[u]] == coloring[graph[v]]:
            logger.debug("Conflict: %r and %r share frequency %d", graph[u], graph[v], coloring[graph[u]])
            return False
    return True


def assign_channels(assignment: Mapping[Hashable, int], channels: Sequence[Any]) -> Dict[Hashable, Any]:
    """
    Map frequency indices onto a channel plan.

    Args:
        assignment: Antenna -> frequency index (1-based), as returned by
            ``FrequencyAllocator.compute_coloring``.
        channels: Concrete channel values (e.g. carrier frequencies in MHz);
            index 1 maps to ``channels[0]``.

    Returns:
        dict: Antenna -> channel value.

    Raises:
        ValidationError: If an index is below 1 or the plan holds fewer
            channels than the assignment needs.
    """
    for antenna, index in assignment.items():
        if index < 1:
            raise ValidationError(f"Frequency index for {antenna!r} must be at least 1, got {index}")

    needed = max(assignment.values(), default=0)
    if needed > len(channels):
        raise ValidationError(
            f"Channel plan has {len(channels)} channels but the assignment needs {needed}"
        )
    return {antenna: channels[index - 1] for antenna, index in assignment.items()}
