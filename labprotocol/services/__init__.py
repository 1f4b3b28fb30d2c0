"""
Service layer for labprotocol.

Business logic that sits between the protocol editing core and the outer
surfaces (command line, files).
"""

from labprotocol.services.export_service import ExportResult, ProtocolExporter, build_protocol_payload
from labprotocol.services.protocol_file_service import load_protocol_file

__all__ = [
    'ExportResult',
    'ProtocolExporter',
    'build_protocol_payload',
    'load_protocol_file',
]
