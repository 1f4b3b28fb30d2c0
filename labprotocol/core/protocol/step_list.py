"""
Pure operations over an ordered step list.

Each function takes a sequence of steps and returns a new list with the
operation applied. When the operation does not apply (unknown id, move onto
the current position) the input list object itself is returned, so callers
can detect a no-op with an identity check.
"""

import logging
from typing import Any, List, Optional

from labprotocol.core.steps.step_instance import StepInstance

logger = logging.getLogger(__name__)


def index_of(steps: List[StepInstance], instance_id: str) -> Optional[int]:
    for index, step in enumerate(steps):
        if step.instance_id == instance_id:
            return index
    return None


def _clamp_to_end(steps: List[StepInstance], index: int) -> int:
    """Indices outside ``[0, len]`` mean the end of the list."""
    if 0 <= index <= len(steps):
        return index
    return len(steps)


def insert_step(steps: List[StepInstance], step: StepInstance, index: int) -> List[StepInstance]:
    """Insert ``step`` at ``index``, shifting later steps one position down."""
    updated = list(steps)
    updated.insert(_clamp_to_end(steps, index), step)
    return updated


def move_step(steps: List[StepInstance], instance_id: str, target_index: int) -> List[StepInstance]:
    """
    Move a step so it lands at ``target_index`` of the original sequence.

    ``target_index`` names the slot the step is dropped before. Removing the
    step first shifts every later slot up by one, so a forward move inserts
    at ``target_index - 1``.

    Example:
        [A, B, C, D], move A to 3 -> [B, C, A, D]
        [A, B, C, D], move D to 1 -> [A, D, B, C]
    """
    current_index = index_of(steps, instance_id)
    if current_index is None:
        logger.debug(f"Move ignored: step {instance_id} not in list")
        return steps

    target_index = _clamp_to_end(steps, target_index)
    if current_index == target_index:
        return steps

    updated = list(steps)
    moved = updated.pop(current_index)

    new_index = target_index
    if current_index < target_index:
        new_index = target_index - 1

    updated.insert(new_index, moved)
    return updated


def remove_step(steps: List[StepInstance], instance_id: str) -> List[StepInstance]:
    if index_of(steps, instance_id) is None:
        logger.debug(f"Remove ignored: step {instance_id} not in list")
        return steps
    return [step for step in steps if step.instance_id != instance_id]


def update_step_value(steps: List[StepInstance], instance_id: str,
                      param_name: str, new_value: Any) -> List[StepInstance]:
    """Replace one parameter value. ``param_name`` is not checked against the step's parameters."""
    index = index_of(steps, instance_id)
    if index is None:
        logger.debug(f"Value update ignored: step {instance_id} not in list")
        return steps

    updated = list(steps)
    updated[index] = steps[index].with_value(param_name, new_value)
    return updated
