"""
labprotocol: build lab protocols from catalog operations and export them as PDF.

This module provides the public API for labprotocol.
"""

import logging

__version__ = "0.1.0"

# Set up basic logging configuration if none exists
# This ensures INFO level logging works when used as a library
def _ensure_basic_logging():
    """Ensure basic logging is configured if no configuration exists."""
    root_logger = logging.getLogger()

    # Only configure if no handlers exist and level is too high
    if not root_logger.handlers and root_logger.level > logging.INFO:
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

# Configure basic logging on import
_ensure_basic_logging()

from labprotocol.core.catalog import OperationCatalog, OperationDefinition, ParameterDefinition
from labprotocol.core.protocol import ProtocolSnapshot, ProtocolState, StepListManager
from labprotocol.core.steps import StepInstance
from labprotocol.rendering import PaginatedDocumentRenderer, protocol_filename
from labprotocol.services import ProtocolExporter, build_protocol_payload

__all__ = [
    # Catalog
    "OperationCatalog",
    "OperationDefinition",
    "ParameterDefinition",

    # Editing
    "StepInstance",
    "StepListManager",
    "ProtocolState",
    "ProtocolSnapshot",

    # Export
    "PaginatedDocumentRenderer",
    "ProtocolExporter",
    "build_protocol_payload",
    "protocol_filename",
]
