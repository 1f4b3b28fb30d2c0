"""
Atomic file writes for exported artifacts.

Data goes to a temporary file in the target directory which is then renamed
over the target, so a reader never sees a half-written PDF or payload.
"""

import json
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

from labprotocol.core.exceptions import ExportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AtomicWriteConfig:
    """Configuration constants for atomic writes."""
    TEMP_PREFIX: str = '.tmp'
    JSON_INDENT: int = 2


ATOMIC_CONFIG = AtomicWriteConfig()


def atomic_write_bytes(file_path: Union[str, Path], data: bytes, ensure_directory: bool = True) -> None:
    """Atomically write bytes to file using temporary file + rename."""
    file_path = Path(file_path)

    try:
        if ensure_directory:
            file_path.parent.mkdir(parents=True, exist_ok=True)

        with tempfile.NamedTemporaryFile(
            mode='wb',
            dir=file_path.parent,
            prefix=f"{ATOMIC_CONFIG.TEMP_PREFIX}{file_path.name}",
            delete=False
        ) as tmp_file:
            tmp_file.write(data)
            tmp_file.flush()
            os.fsync(tmp_file.fileno())
        os.replace(tmp_file.name, str(file_path))
        logger.debug(f"Atomically wrote {len(data)} bytes to {file_path}")
    except OSError as e:
        raise ExportError(f"Atomic write failed for {file_path}: {e}") from e


def atomic_write_json(
    file_path: Union[str, Path],
    data: Dict[str, Any],
    indent: int = ATOMIC_CONFIG.JSON_INDENT,
    ensure_directory: bool = True
) -> None:
    """Atomically write JSON data to file. Non-ASCII text is kept as-is."""
    encoded = json.dumps(data, indent=indent, ensure_ascii=False).encode('utf-8')
    atomic_write_bytes(file_path, encoded, ensure_directory=ensure_directory)
