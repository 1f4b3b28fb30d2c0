from labprotocol.constants.constants import DragSource, ParameterKind

__all__ = ["DragSource", "ParameterKind"]
