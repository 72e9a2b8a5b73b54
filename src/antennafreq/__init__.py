"""
antennafreq: greedy frequency allocation for interfering antennas.

Public API:
- allocator: FrequencyAllocator, AllocatorState
- coloring: LargestFirstColoring, SaturationColoring, get_strategy
- schema: AntennaNetwork, Constraint
- topology: analyze_graph_properties, verify_coloring, assign_channels
- errors: ValidationError, ConstraintDroppedWarning

Versioning follows PEP 440; see __version__.
"""

from importlib.metadata import version, PackageNotFoundError
from .allocator import AllocatorState, FrequencyAllocator
from .coloring import LargestFirstColoring, SaturationColoring, get_strategy
from .errors import ConstraintDroppedWarning, ValidationError
from .schema import AntennaNetwork, Constraint
from .topology import analyze_graph_properties, assign_channels, verify_coloring

try:
    __version__ = version("antennafreq")
except PackageNotFoundError:
    # Fallback for editable or source usage without installed metadata
    __version__ = "0.1.0"

__all__ = [
    "AllocatorState",
    "FrequencyAllocator",
    "LargestFirstColoring",
    "SaturationColoring",
    "get_strategy",
    "ConstraintDroppedWarning",
    "ValidationError",
    "AntennaNetwork",
    "Constraint",
    "analyze_graph_properties",
    "assign_channels",
    "verify_coloring",
    "__version__",
]
