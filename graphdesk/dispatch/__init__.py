"""Algorithm dispatcher: validation, engine selection and structured results."""

from .config import DispatchConfig
from .dispatcher import AlgorithmDispatcher, run_algorithm
from .formatting import format_result
from .history import ResultHistory
from .results import (
    AlgorithmKind,
    AlgorithmRequest,
    AlgorithmResult,
    ErrorKind,
    ErrorResult,
    GraphRequest,
    GraphSnapshot,
    ResultStatus,
    ShortestPathResult,
    SpanningTreeResult,
    TopologicalSortResult,
    TraversalResult,
)

__all__ = [
    "DispatchConfig",
    "AlgorithmDispatcher",
    "run_algorithm",
    "format_result",
    "ResultHistory",
    "AlgorithmKind",
    "AlgorithmRequest",
    "AlgorithmResult",
    "ErrorKind",
    "ErrorResult",
    "GraphRequest",
    "GraphSnapshot",
    "ResultStatus",
    "ShortestPathResult",
    "SpanningTreeResult",
    "TopologicalSortResult",
    "TraversalResult",
]
