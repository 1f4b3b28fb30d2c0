"""
Tests for the pure step list operations.

Steps are identified by instance id only; positions are what the operations
change.
"""
import pytest

from labprotocol.core.protocol.step_list import (
    index_of, insert_step, move_step, remove_step, update_step_value,
)
from labprotocol.core.steps.step_instance import StepInstance


def make_step(instance_id: str) -> StepInstance:
    return StepInstance(
        instance_id=instance_id,
        operation_id=1,
        operation_name="SEED_CELLS",
        category="CELL_CULTURE_OPERATIONS",
    )


def ids(steps):
    return [step.instance_id for step in steps]


@pytest.fixture
def abcd():
    return [make_step(name) for name in "ABCD"]


class TestMoveStep:

    def test_forward_move_compensates_for_removal(self, abcd):
        assert ids(move_step(abcd, "A", 3)) == ["B", "C", "A", "D"]

    def test_backward_move(self, abcd):
        assert ids(move_step(abcd, "D", 1)) == ["A", "D", "B", "C"]

    def test_move_to_end_of_list(self, abcd):
        assert ids(move_step(abcd, "A", len(abcd))) == ["B", "C", "D", "A"]

    def test_move_to_front(self, abcd):
        assert ids(move_step(abcd, "C", 0)) == ["C", "A", "B", "D"]

    @pytest.mark.parametrize("instance_id", ["A", "B", "C", "D"])
    def test_move_to_current_index_is_noop(self, abcd, instance_id):
        result = move_step(abcd, instance_id, index_of(abcd, instance_id))
        assert result is abcd
        assert ids(result) == ["A", "B", "C", "D"]

    def test_unknown_id_is_noop(self, abcd):
        result = move_step(abcd, "missing", 0)
        assert result is abcd

    def test_out_of_range_target_moves_to_end(self, abcd):
        assert ids(move_step(abcd, "B", 99)) == ["A", "C", "D", "B"]
        assert ids(move_step(abcd, "B", -1)) == ["A", "C", "D", "B"]

    def test_input_list_is_not_mutated(self, abcd):
        move_step(abcd, "A", 3)
        assert ids(abcd) == ["A", "B", "C", "D"]

    def test_identity_preserved_across_moves(self, abcd):
        originals = {step.instance_id: step for step in abcd}
        steps = abcd
        for instance_id, target in [("A", 4), ("D", 0), ("B", 2), ("C", 1)]:
            steps = move_step(steps, instance_id, target)
        assert sorted(ids(steps)) == ["A", "B", "C", "D"]
        for step in steps:
            assert step is originals[step.instance_id]


class TestInsertStep:

    @pytest.mark.parametrize("index", [0, 1, 2, 3, 4])
    def test_insert_at_every_position(self, abcd, index):
        new = make_step("X")
        result = insert_step(abcd, new, index)
        assert len(result) == 5
        assert result[index] is new
        assert [i for i in ids(result) if i != "X"] == ["A", "B", "C", "D"]

    def test_out_of_range_index_appends(self, abcd):
        assert ids(insert_step(abcd, make_step("X"), 10)) == ["A", "B", "C", "D", "X"]
        assert ids(insert_step(abcd, make_step("Y"), -2)) == ["A", "B", "C", "D", "Y"]

    def test_insert_into_empty_list(self):
        assert ids(insert_step([], make_step("X"), 0)) == ["X"]


class TestRemoveAndUpdate:

    def test_remove_existing(self, abcd):
        assert ids(remove_step(abcd, "B")) == ["A", "C", "D"]

    def test_remove_missing_is_noop(self, abcd):
        assert remove_step(abcd, "missing") is abcd

    def test_update_value_keeps_identity_and_position(self, abcd):
        result = update_step_value(abcd, "C", "cell_line", "HeLa")
        assert ids(result) == ["A", "B", "C", "D"]
        assert result[2].values == {"cell_line": "HeLa"}
        assert result[2].instance_id == "C"
        assert abcd[2].values == {}

    def test_update_value_accepts_unknown_parameter_names(self, abcd):
        result = update_step_value(abcd, "A", "not_a_parameter", 3)
        assert result[0].values == {"not_a_parameter": 3}

    def test_update_value_missing_step_is_noop(self, abcd):
        assert update_step_value(abcd, "missing", "x", 1) is abcd
