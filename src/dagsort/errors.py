from __future__ import annotations

from typing import Any


class GraphError(Exception):
    """Raised when a graph cannot be topologically sorted."""

    kind = "graph_error"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "message": str(self)}


class AbsentInputError(GraphError):
    """Raised when no graph (or no adjacency list for a node) was supplied."""

    kind = "absent_input"

    def __init__(self, node: int | None = None):
        self.node = node
        if node is None:
            msg = "No graph supplied"
        else:
            msg = f"No adjacency list supplied for node {node}"
        super().__init__(msg)

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "node": self.node}


class InvalidNodeReferenceError(GraphError):
    """Raised when an adjacency entry does not name a node in [0, N)."""

    kind = "invalid_node_reference"

    def __init__(self, node: int, position: int, reference: Any, node_count: int):
        self.node = node
        self.position = position
        self.reference = reference
        self.node_count = node_count
        super().__init__(
            f"Node {node} references invalid node {reference!r} "
            f"at position {position} (graph has {node_count} nodes)"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "node": self.node,
            "position": self.position,
            "reference": self.reference,
            "node_count": self.node_count,
        }


class CycleDetectedError(GraphError):
    """Raised when the graph contains a directed cycle (self-loops included)."""

    kind = "cycle_detected"

    def __init__(self, node: int, cycle: list[int]):
        self.node = node
        self.cycle = cycle
        path = " -> ".join(str(n) for n in cycle)
        super().__init__(f"Cyclic dependency detected in DAG: {path}")

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "node": self.node, "cycle": list(self.cycle)}
