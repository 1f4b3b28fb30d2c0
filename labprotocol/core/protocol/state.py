"""
Per-session protocol state and the immutable snapshot handed to export.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from labprotocol.core.steps.step_instance import StepInstance


@dataclass
class ProtocolState:
    """
    Mutable editing state of one protocol.

    Owned by a single StepListManager, which replaces ``steps`` with a new
    list on every mutation. No other component writes to it.
    """
    header: str = ""
    steps: List[StepInstance] = field(default_factory=list)


@dataclass(frozen=True)
class ProtocolSnapshot:
    """Header and ordered steps at the moment export was invoked."""
    header: str
    steps: Tuple[StepInstance, ...]

    @classmethod
    def of(cls, state: ProtocolState) -> "ProtocolSnapshot":
        return cls(
            header=state.header,
            steps=tuple(step.detached_copy() for step in state.steps),
        )
