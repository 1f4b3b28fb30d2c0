"""
Custom exceptions for labprotocol.

The step list core never raises: stale references degrade to no-ops. These
exceptions belong to the loaders and the command line around it.
"""

class LabProtocolError(Exception):
    """Base class for all labprotocol custom exceptions."""
    pass

class CatalogError(LabProtocolError, ValueError):
    """Raised when an operation catalog cannot be read or has the wrong structure."""
    pass

class ProtocolFileError(LabProtocolError, ValueError):
    """Raised when a protocol description file cannot be read or has the wrong structure."""
    pass

class ExportError(LabProtocolError, OSError):
    """Raised when the rendered document cannot be written."""
    pass
