"""Tests for the discriminated sort outcomes."""

from __future__ import annotations

import pytest

from dagsort.errors import CycleDetectedError, GraphError, InvalidNodeReferenceError
from dagsort.result import (
    AbsentInput,
    CycleDetected,
    InvalidNodeReference,
    Sorted,
    outcome_from_error,
    try_sort_dag,
)


class TestTrySortDag:
    def test_sorted(self):
        outcome = try_sort_dag([[1], []])
        assert isinstance(outcome, Sorted)
        assert outcome.ok is True
        assert outcome.order == [0, 1]

    def test_empty(self):
        outcome = try_sort_dag([])
        assert outcome == Sorted(order=[])

    def test_absent(self):
        outcome = try_sort_dag(None)
        assert isinstance(outcome, AbsentInput)
        assert outcome.ok is False
        assert outcome.node is None
        assert outcome.kind == "absent_input"

    def test_invalid_reference(self):
        outcome = try_sort_dag([[0], [-1]])
        assert isinstance(outcome, InvalidNodeReference)
        assert (outcome.node, outcome.position, outcome.reference) == (1, 0, -1)
        assert outcome.node_count == 2
        assert "-1" in outcome.message

    def test_cycle(self):
        outcome = try_sort_dag([[1], [2], [0]])
        assert isinstance(outcome, CycleDetected)
        assert outcome.cycle == [0, 1, 2, 0]
        assert outcome.kind == "cycle_detected"

    def test_same_outcome_on_repeat(self):
        graph = [[1], [2], [0]]
        assert try_sort_dag(graph) == try_sort_dag(graph)


class TestOutcomeSerialization:
    def test_sorted_to_dict(self):
        assert Sorted(order=[1, 0]).to_dict() == {"ok": True, "kind": "sorted", "order": [1, 0]}

    def test_cycle_to_dict(self):
        data = try_sort_dag([[0]]).to_dict()
        assert data["ok"] is False
        assert data["kind"] == "cycle_detected"
        assert data["cycle"] == [0, 0]
        assert data["node"] == 0

    def test_invalid_reference_to_dict(self):
        data = try_sort_dag([[4]]).to_dict()
        assert data["kind"] == "invalid_node_reference"
        assert data["reference"] == 4
        assert data["node_count"] == 1


class TestOutcomeFromError:
    def test_maps_each_error(self):
        assert isinstance(outcome_from_error(CycleDetectedError(0, [0, 0])), CycleDetected)
        err = InvalidNodeReferenceError(2, 1, 9, 3)
        assert outcome_from_error(err) == InvalidNodeReference(
            node=2, position=1, reference=9, node_count=3, message=str(err)
        )

    def test_unclassified_error_rejected(self):
        with pytest.raises(TypeError):
            outcome_from_error(GraphError("something else"))
