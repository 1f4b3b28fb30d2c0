"""
Ordered Step List Manager.

Owns the ordered list of step instances of one protocol and applies the
insert, move, remove and value-update operations triggered by drag gestures.
Every entry point is total: a stale or unknown reference leaves the list
unchanged instead of raising, because drag sources can race with list edits.
"""

import logging
from typing import Any, List, Optional

from labprotocol.core.catalog import OperationCatalog
from labprotocol.core.protocol import step_list
from labprotocol.core.protocol.drag_payload import (
    DragPayload, OperationDragPayload, StepDragPayload, parse_drag_payload,
)
from labprotocol.core.protocol.state import ProtocolSnapshot, ProtocolState
from labprotocol.core.steps.step_instance import StepInstance

logger = logging.getLogger(__name__)


class StepListManager:
    """
    Single writer of a ProtocolState's step list.

    Each mutation computes a new list and swaps it into the state once the
    operation has fully applied, so readers never see a partial update and
    earlier snapshots are unaffected.
    """

    def __init__(self, catalog: OperationCatalog, state: Optional[ProtocolState] = None):
        self.catalog = catalog
        self.state = state if state is not None else ProtocolState()

    @property
    def steps(self) -> List[StepInstance]:
        return self.state.steps

    @property
    def header(self) -> str:
        return self.state.header

    def set_header(self, header: str) -> None:
        self.state.header = header

    def _commit(self, updated: List[StepInstance]) -> bool:
        if updated is self.state.steps:
            return False
        self.state.steps = updated
        return True

    def add_at_index(self, operation_id: int, index: int) -> Optional[StepInstance]:
        """
        Insert a fresh instance of a catalog operation at ``index``.

        Returns:
            The new step, or None if the operation is not in the catalog
        """
        operation = self.catalog.get(operation_id)
        if operation is None:
            logger.debug(f"Add ignored: operation {operation_id} not in catalog")
            return None

        step = StepInstance.from_operation(operation)
        self._commit(step_list.insert_step(self.state.steps, step, index))
        logger.debug(f"Added step {step.instance_id} ({operation.name}) at index {index}")
        return step

    def move_to_index(self, instance_id: str, target_index: int) -> bool:
        moved = self._commit(step_list.move_step(self.state.steps, instance_id, target_index))
        if moved:
            logger.debug(f"Moved step {instance_id} to index {target_index}")
        return moved

    def remove_by_id(self, instance_id: str) -> bool:
        removed = self._commit(step_list.remove_step(self.state.steps, instance_id))
        if removed:
            logger.debug(f"Removed step {instance_id}")
        return removed

    def update_value(self, instance_id: str, param_name: str, new_value: Any) -> bool:
        return self._commit(step_list.update_step_value(self.state.steps, instance_id, param_name, new_value))

    def get_step(self, instance_id: str) -> Optional[StepInstance]:
        index = step_list.index_of(self.state.steps, instance_id)
        return None if index is None else self.state.steps[index]

    def apply_drop(self, payload: DragPayload, target_index: Optional[int] = None) -> None:
        """
        Apply a decoded drag payload to a drop target.

        Args:
            payload: What is being dragged
            target_index: Position of the step dropped onto, or None for the
                end of the list
        """
        if target_index is None:
            target_index = len(self.state.steps)

        if isinstance(payload, OperationDragPayload):
            self.add_at_index(payload.operation_id, target_index)
        elif isinstance(payload, StepDragPayload):
            self.move_to_index(payload.instance_id, target_index)

    def handle_drop(self, raw_payload: Optional[str], target_index: Optional[int] = None) -> None:
        """Decode a serialized payload and apply it; malformed payloads are ignored."""
        payload = parse_drag_payload(raw_payload)
        if payload is None:
            return
        self.apply_drop(payload, target_index)

    def snapshot(self) -> ProtocolSnapshot:
        return ProtocolSnapshot.of(self.state)
