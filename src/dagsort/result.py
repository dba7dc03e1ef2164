"""Discriminated outcomes for a sort call.

``try_sort_dag`` folds the three classified errors and the success case into
one of four frozen dataclasses so callers can branch on the variant instead of
catching exceptions.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Union

from .errors import AbsentInputError, CycleDetectedError, GraphError, InvalidNodeReferenceError
from .graph import Graph, sort_dag


@dataclass(frozen=True)
class Sorted:
    order: list[int]

    ok = True
    kind = "sorted"

    def to_dict(self) -> dict[str, Any]:
        return {"ok": self.ok, "kind": self.kind, **asdict(self)}


@dataclass(frozen=True)
class AbsentInput:
    node: int | None = None
    message: str = "No graph supplied"

    ok = False
    kind = AbsentInputError.kind

    def to_dict(self) -> dict[str, Any]:
        return {"ok": self.ok, "kind": self.kind, **asdict(self)}


@dataclass(frozen=True)
class InvalidNodeReference:
    node: int
    position: int
    reference: Any
    node_count: int
    message: str = ""

    ok = False
    kind = InvalidNodeReferenceError.kind

    def to_dict(self) -> dict[str, Any]:
        return {"ok": self.ok, "kind": self.kind, **asdict(self)}


@dataclass(frozen=True)
class CycleDetected:
    node: int
    cycle: list[int] = field(default_factory=list)
    message: str = ""

    ok = False
    kind = CycleDetectedError.kind

    def to_dict(self) -> dict[str, Any]:
        return {"ok": self.ok, "kind": self.kind, **asdict(self)}


SortOutcome = Union[Sorted, AbsentInput, InvalidNodeReference, CycleDetected]


def outcome_from_error(error: GraphError) -> SortOutcome:
    """Map a classified sorter error onto its outcome variant."""
    if isinstance(error, AbsentInputError):
        return AbsentInput(node=error.node, message=str(error))
    if isinstance(error, InvalidNodeReferenceError):
        return InvalidNodeReference(
            node=error.node,
            position=error.position,
            reference=error.reference,
            node_count=error.node_count,
            message=str(error),
        )
    if isinstance(error, CycleDetectedError):
        return CycleDetected(node=error.node, cycle=list(error.cycle), message=str(error))
    raise TypeError(f"Unclassified graph error: {error!r}")


def try_sort_dag(graph: Graph | None) -> SortOutcome:
    """Sort *graph*, returning exactly one outcome variant instead of raising."""
    try:
        return Sorted(order=sort_dag(graph))
    except (AbsentInputError, InvalidNodeReferenceError, CycleDetectedError) as e:
        return outcome_from_error(e)
