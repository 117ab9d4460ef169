from importlib.metadata import version
__version__ = version("ringsearch")

# Errors
from .exceptions import InvalidGraph, IndexOutOfRange, InternalInvariantViolation, RingSearchError

# Configuration
from .config import DEFAULT_PARAMS, RingSearchConfig

# Pipeline stages
from .adjacency import AdjacencyList, build_adjacency
from .cyclic import CyclicResult, find_cyclic
from .partition import RingSystem, RingSystemClass, classify, partition_ring_systems

# Main interface
from .ring_search import RingSearch

# Utilities
from .utils import configure_debug_logging, ring_report, ring_search_to_dict

__all__ = [
    # Main interface
    'RingSearch',

    # Pipeline stages
    'AdjacencyList',
    'build_adjacency',
    'CyclicResult',
    'find_cyclic',
    'RingSystem',
    'RingSystemClass',
    'classify',
    'partition_ring_systems',

    # Utilities
    'configure_debug_logging',
    'ring_report',
    'ring_search_to_dict',

    # Configuration
    'DEFAULT_PARAMS',
    'RingSearchConfig',

    # Errors
    'RingSearchError',
    'InvalidGraph',
    'IndexOutOfRange',
    'InternalInvariantViolation',
]
