"""
Drag-payload protocol between a drag source and the step list drop target.

A payload is a small JSON document tagged with its source:

    {"source": "left", "operationId": 12}      catalog entry -> insert a new step
    {"source": "right", "instanceId": "..."}   existing step -> reorder it

Anything that does not decode into one of these two shapes is treated as no
payload at all, and the drop is ignored.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from labprotocol.constants.constants import (
    DRAG_INSTANCE_ID_KEY, DRAG_OPERATION_ID_KEY, DRAG_SOURCE_KEY, DragSource,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OperationDragPayload:
    """A catalog operation being dragged into the step list."""
    operation_id: int

    source = DragSource.CATALOG

    def to_dict(self) -> dict:
        return {DRAG_SOURCE_KEY: self.source.value, DRAG_OPERATION_ID_KEY: self.operation_id}


@dataclass(frozen=True)
class StepDragPayload:
    """An existing step being dragged to a new position."""
    instance_id: str

    source = DragSource.STEP_LIST

    def to_dict(self) -> dict:
        return {DRAG_SOURCE_KEY: self.source.value, DRAG_INSTANCE_ID_KEY: self.instance_id}


DragPayload = Union[OperationDragPayload, StepDragPayload]


def encode_drag_payload(payload: DragPayload) -> str:
    """Serialize a payload at drag start."""
    return json.dumps(payload.to_dict())


def payload_from_dict(data: Any) -> Optional[DragPayload]:
    if not isinstance(data, dict):
        return None

    source = data.get(DRAG_SOURCE_KEY)
    if source == DragSource.CATALOG.value:
        operation_id = data.get(DRAG_OPERATION_ID_KEY)
        # bool is an int subclass but never an operation id
        if isinstance(operation_id, int) and not isinstance(operation_id, bool):
            return OperationDragPayload(operation_id)
    elif source == DragSource.STEP_LIST.value:
        instance_id = data.get(DRAG_INSTANCE_ID_KEY)
        if isinstance(instance_id, str):
            return StepDragPayload(instance_id)
    return None


def parse_drag_payload(raw: Optional[str]) -> Optional[DragPayload]:
    """
    Decode the payload carried by a drop event.

    Returns:
        The payload, or None when ``raw`` is empty or malformed
    """
    if not raw:
        return None
    try:
        data = json.loads(raw)
    except (TypeError, ValueError):
        logger.debug(f"Ignoring unparseable drag payload: {raw!r}")
        return None

    payload = payload_from_dict(data)
    if payload is None:
        logger.debug(f"Ignoring drag payload with unexpected shape: {raw!r}")
    return payload
