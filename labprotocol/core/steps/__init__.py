from labprotocol.core.steps.step_instance import StepInstance, create_instance_id

__all__ = ["StepInstance", "create_instance_id"]
