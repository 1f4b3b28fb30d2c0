"""
Protocol File Service - builds a protocol from a YAML description.

The description replays the edits a user would make in the editor:

    header: "Cell Prep #1"
    steps:
      - operation_id: 3
        values:
          temperature: {numericValue: "37", unit: "°C"}
      - operation_id: 7

Each step is appended through the StepListManager, so unknown operation ids
are skipped exactly as a stale drag would be.
"""
import logging
from pathlib import Path
from typing import Any, Union

import yaml

from labprotocol.core.catalog import OperationCatalog
from labprotocol.core.exceptions import ProtocolFileError
from labprotocol.core.protocol.step_list_manager import StepListManager

logger = logging.getLogger(__name__)


def build_protocol(catalog: OperationCatalog, data: Any) -> StepListManager:
    """
    Replay a parsed protocol description into a new StepListManager.

    Raises:
        ProtocolFileError: If ``data`` is not a protocol description
    """
    if not isinstance(data, dict):
        raise ProtocolFileError(f"Protocol must be a mapping, got {type(data).__name__}")

    steps = data.get('steps') or []
    if not isinstance(steps, list):
        raise ProtocolFileError("Protocol 'steps' must be a list")

    manager = StepListManager(catalog)
    manager.set_header(str(data.get('header') or ''))

    for position, entry in enumerate(steps, start=1):
        if not isinstance(entry, dict) or 'operation_id' not in entry:
            raise ProtocolFileError(f"Step {position} must be a mapping with an 'operation_id'")

        operation_id = entry['operation_id']
        if not isinstance(operation_id, int) or isinstance(operation_id, bool):
            raise ProtocolFileError(f"Step {position} 'operation_id' must be an integer, got {operation_id!r}")

        values = entry.get('values') or {}
        if not isinstance(values, dict):
            raise ProtocolFileError(f"Step {position} 'values' must be a mapping")

        step = manager.add_at_index(operation_id, len(manager.steps))
        if step is None:
            logger.warning(f"Skipping step {position}: operation {operation_id} is not in the catalog")
            continue

        for name, value in values.items():
            manager.update_value(step.instance_id, str(name), value)

    logger.info(f"Built protocol '{manager.header}' with {len(manager.steps)} steps")
    return manager


def load_protocol_file(catalog: OperationCatalog, path: Union[str, Path]) -> StepListManager:
    """
    Read a YAML protocol description and build it against ``catalog``.

    Raises:
        ProtocolFileError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ProtocolFileError(f"Cannot read protocol {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ProtocolFileError(f"Cannot parse protocol {path}: {e}") from e

    return build_protocol(catalog, data)
