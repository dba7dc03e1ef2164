"""
Topological sorting of directed acyclic graphs given as adjacency lists.

Nodes are the integers 0..N-1; ``graph[u]`` lists the nodes ``u`` must
precede. ``sort_dag`` raises a classified ``GraphError`` subclass on bad input,
``try_sort_dag`` returns one of four outcome variants instead.
"""

from .errors import AbsentInputError, CycleDetectedError, GraphError, InvalidNodeReferenceError
from .graph import Graph, NodeState, from_edges, is_acyclic, is_topological_order, sort_dag, validate_graph
from .result import (
    AbsentInput,
    CycleDetected,
    InvalidNodeReference,
    Sorted,
    SortOutcome,
    outcome_from_error,
    try_sort_dag,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "GraphError",
    "AbsentInputError",
    "InvalidNodeReferenceError",
    "CycleDetectedError",
    # Sorter
    "Graph",
    "NodeState",
    "sort_dag",
    "validate_graph",
    "is_acyclic",
    "from_edges",
    "is_topological_order",
    # Outcomes
    "SortOutcome",
    "Sorted",
    "AbsentInput",
    "InvalidNodeReference",
    "CycleDetected",
    "outcome_from_error",
    "try_sort_dag",
]
