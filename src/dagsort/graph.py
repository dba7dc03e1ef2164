from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Iterator, Sequence

from .errors import AbsentInputError, CycleDetectedError, GraphError, InvalidNodeReferenceError

logger = logging.getLogger(__name__)

Graph = Sequence[Sequence[int]]


class NodeState(Enum):
    UNVISITED = 0
    IN_PROGRESS = 1
    DONE = 2


def _is_node_index(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_graph(graph: Graph | None) -> int:
    """Check structural integrity of *graph* and return its node count.

    Every entry of every adjacency list is checked, reachable or not, in node
    order and then list order. The first defect found is raised.
    """
    if graph is None:
        raise AbsentInputError()
    node_count = len(graph)
    for node, targets in enumerate(graph):
        if targets is None:
            raise AbsentInputError(node)
        for position, target in enumerate(targets):
            if not _is_node_index(target) or not 0 <= target < node_count:
                raise InvalidNodeReferenceError(node, position, target, node_count)
    return node_count


def sort_dag(graph: Graph | None) -> list[int]:
    """Return a topological ordering of *graph*.

    *graph* is a sequence of adjacency lists indexed by node; an entry ``v`` in
    ``graph[u]`` means ``u`` must precede ``v``. The graph is validated in full
    before traversal, so a malformed graph is never reported as cyclic.

    Raises AbsentInputError, InvalidNodeReferenceError or CycleDetectedError.
    """
    node_count = validate_graph(graph)
    logger.debug(
        "Sorting graph with %d nodes and %d edges",
        node_count,
        sum(len(targets) for targets in graph),
    )

    state = [NodeState.UNVISITED] * node_count
    emitted: list[int] = []

    for root in range(node_count):
        if state[root] is NodeState.DONE:
            continue
        state[root] = NodeState.IN_PROGRESS
        # Each frame is a node and the iterator over its remaining children.
        stack: list[tuple[int, Iterator[int]]] = [(root, iter(graph[root]))]
        while stack:
            node, children = stack[-1]
            for child in children:
                child_state = state[child]
                if child_state is NodeState.IN_PROGRESS:
                    path = [frame[0] for frame in stack]
                    cycle = path[path.index(child):] + [child]
                    raise CycleDetectedError(node, cycle)
                if child_state is NodeState.UNVISITED:
                    state[child] = NodeState.IN_PROGRESS
                    stack.append((child, iter(graph[child])))
                    break
            else:
                stack.pop()
                state[node] = NodeState.DONE
                emitted.append(node)

    emitted.reverse()
    logger.debug("Sorted %d nodes", len(emitted))
    return emitted


def is_acyclic(graph: Graph | None) -> bool:
    """Return False if *graph* has a cycle; structural errors still raise."""
    try:
        sort_dag(graph)
    except CycleDetectedError:
        return False
    return True


def from_edges(node_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Build adjacency lists for *node_count* nodes from ``(u, v)`` pairs.

    Targets are kept as given, so an out-of-range target is reported later by
    :func:`sort_dag`. A source outside the graph has no list to live in and
    raises GraphError here.
    """
    if not _is_node_index(node_count) or node_count < 0:
        raise ValueError(f"node_count must be a non-negative integer, got {node_count!r}")
    graph: list[list[int]] = [[] for _ in range(node_count)]
    for index, (parent, child) in enumerate(edges):
        if not _is_node_index(parent) or not 0 <= parent < node_count:
            raise GraphError(f"Edge {index} references unknown parent node: {parent!r}")
        graph[parent].append(child)
    return graph


def is_topological_order(graph: Graph, order: Sequence[int]) -> bool:
    """Check that *order* is a permutation of the nodes honouring every edge."""
    node_count = len(graph)
    if len(order) != node_count or set(order) != set(range(node_count)):
        return False
    position = {node: index for index, node in enumerate(order)}
    for parent, targets in enumerate(graph):
        for child in targets:
            if child not in position or position[parent] >= position[child]:
                return False
    return True
