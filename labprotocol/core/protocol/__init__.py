"""
Protocol editing core: owned state, step list operations and drag payloads.
"""

from labprotocol.core.protocol.drag_payload import (
    OperationDragPayload, StepDragPayload, encode_drag_payload, parse_drag_payload,
)
from labprotocol.core.protocol.state import ProtocolSnapshot, ProtocolState
from labprotocol.core.protocol.step_list_manager import StepListManager

__all__ = [
    'OperationDragPayload',
    'StepDragPayload',
    'encode_drag_payload',
    'parse_drag_payload',
    'ProtocolSnapshot',
    'ProtocolState',
    'StepListManager',
]
