"""
Step instances: concrete, ordered occurrences of catalog operations.

A step carries its own identity (``instance_id``) which is the only key used
to find it during drag operations, independent of its position in the list.
"""

import copy
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from labprotocol.core.catalog import OperationDefinition, ParameterDefinition


def create_instance_id() -> str:
    """Generate a fresh opaque step identifier."""
    return str(uuid.uuid4())


@dataclass
class StepInstance:
    """
    One step of a protocol.

    The operation fields and parameter list are copied from the catalog when
    the step is created, so later catalog edits do not affect existing steps.
    ``values`` maps parameter name to a value whose shape depends on the
    parameter kind.
    """
    instance_id: str
    operation_id: int
    operation_name: str
    category: str
    parameters: Tuple[ParameterDefinition, ...] = ()
    values: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_operation(cls, operation: OperationDefinition) -> "StepInstance":
        return cls(
            instance_id=create_instance_id(),
            operation_id=operation.id,
            operation_name=operation.name,
            category=operation.category,
            parameters=tuple(operation.parameters),
            values={},
        )

    def with_value(self, param_name: str, new_value: Any) -> "StepInstance":
        """Copy of this step with one value replaced; identity is preserved."""
        return StepInstance(
            instance_id=self.instance_id,
            operation_id=self.operation_id,
            operation_name=self.operation_name,
            category=self.category,
            parameters=self.parameters,
            values={**self.values, param_name: new_value},
        )

    def detached_copy(self) -> "StepInstance":
        return StepInstance(
            instance_id=self.instance_id,
            operation_id=self.operation_id,
            operation_name=self.operation_name,
            category=self.category,
            parameters=self.parameters,
            values=copy.deepcopy(self.values),
        )
