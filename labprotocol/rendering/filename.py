"""
File naming for exported protocols.
"""

import re
from typing import Optional

from labprotocol.constants.constants import DEFAULT_FILE_BASE_NAME, PDF_EXTENSION

_WHITESPACE_RUN = re.compile(r"\s+")
_NOT_FILENAME_CHAR = re.compile(r"[^\w\-]", re.ASCII)


def protocol_base_name(header: Optional[str]) -> str:
    """
    Derive the artifact base name from the protocol header.

    Case is kept. Whitespace runs become underscores, then everything outside
    ASCII letters, digits, underscore and hyphen is dropped. An empty header
    falls back to "protocol".

    Example:
        >>> protocol_base_name("Cell Prep #1!")
        'Cell_Prep_1'
    """
    base = header or DEFAULT_FILE_BASE_NAME
    base = _WHITESPACE_RUN.sub("_", base)
    return _NOT_FILENAME_CHAR.sub("", base)


def protocol_filename(header: Optional[str], extension: str = PDF_EXTENSION) -> str:
    return protocol_base_name(header) + extension
