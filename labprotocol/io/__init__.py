"""
File output backends for labprotocol.
"""

from labprotocol.io.atomic import atomic_write_bytes, atomic_write_json
from labprotocol.io.pdf_writer import PdfDocumentWriter

__all__ = [
    'PdfDocumentWriter',
    'atomic_write_bytes',
    'atomic_write_json',
]
