"""
Operation catalog for labprotocol.

The catalog is a static list of operation definitions with typed parameter
schemas, grouped by category. It is read once and never mutated; the step
list manager only looks definitions up by id.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import yaml

from labprotocol.constants.constants import (
    CATALOG_CATEGORIES_KEY, CATALOG_METADATA_KEY, CATALOG_OPERATIONS_KEY,
    FIXED_UNIT_RAW_TYPES, ParameterKind,
)
from labprotocol.core.exceptions import CatalogError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParameterDefinition:
    """Typed parameter of a catalog operation."""
    name: str
    type: str
    required: bool = False
    units: Tuple[str, ...] = ()
    options: Tuple[str, ...] = ()

    @property
    def kind(self) -> ParameterKind:
        return ParameterKind.classify(self.type, self.options)

    @property
    def fixed_unit(self) -> Optional[str]:
        """Unit baked into the type, e.g. "°C" for "number + °C"."""
        if self.kind is not ParameterKind.NUMBER_FIXED_UNIT:
            return None
        return FIXED_UNIT_RAW_TYPES[self.type]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ParameterDefinition":
        return cls(
            name=str(data["name"]),
            type=str(data["type"]),
            required=bool(data.get("required", False)),
            units=tuple(data.get("units") or ()),
            options=tuple(data.get("options") or ()),
        )


@dataclass(frozen=True)
class OperationDefinition:
    """Catalog entry describing a reusable lab action and its parameters."""
    id: int
    name: str
    category: str
    parameters: Tuple[ParameterDefinition, ...] = ()
    example: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OperationDefinition":
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            category=str(data["category"]),
            parameters=tuple(ParameterDefinition.from_dict(p) for p in data.get("parameters") or ()),
            example=data.get("example"),
        )


@dataclass
class OperationCatalog:
    """
    Read-only collection of operation definitions.

    Categories listed in the catalog metadata keep their declared order;
    categories that only appear on operations follow in first-seen order.
    """
    operations: List[OperationDefinition]
    categories: List[str] = field(default_factory=list)

    def __post_init__(self):
        self._by_id: Dict[int, OperationDefinition] = {}
        for op in self.operations:
            if op.id in self._by_id:
                logger.warning(f"Duplicate operation id {op.id} in catalog; keeping '{op.name}'")
            self._by_id[op.id] = op

    @classmethod
    def from_data(cls, data: Any) -> "OperationCatalog":
        """
        Build a catalog from its parsed file structure.

        Raises:
            CatalogError: If the structure is not a catalog
        """
        if not isinstance(data, dict):
            raise CatalogError(f"Catalog must be a mapping, got {type(data).__name__}")

        raw_operations = data.get(CATALOG_OPERATIONS_KEY)
        if not isinstance(raw_operations, list):
            raise CatalogError(f"Catalog is missing the '{CATALOG_OPERATIONS_KEY}' list")

        metadata = data.get(CATALOG_METADATA_KEY) or {}
        if not isinstance(metadata, dict):
            raise CatalogError(f"Catalog '{CATALOG_METADATA_KEY}' must be a mapping")
        categories = metadata.get(CATALOG_CATEGORIES_KEY) or []

        try:
            operations = [OperationDefinition.from_dict(entry) for entry in raw_operations]
        except (KeyError, TypeError, ValueError) as e:
            raise CatalogError(f"Invalid operation definition in catalog: {e}") from e

        return cls(operations=operations, categories=[str(c) for c in categories])

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "OperationCatalog":
        """
        Load a catalog from a JSON or YAML file.

        Raises:
            CatalogError: If the file cannot be read or parsed
        """
        path = Path(path)
        logger.info(f"Loading operation catalog from {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise CatalogError(f"Cannot read catalog {path}: {e}") from e
        except yaml.YAMLError as e:
            raise CatalogError(f"Cannot parse catalog {path}: {e}") from e

        catalog = cls.from_data(data)
        logger.info(f"Loaded {len(catalog.operations)} operations in {len(catalog.grouped())} categories")
        return catalog

    def get(self, operation_id: Any) -> Optional[OperationDefinition]:
        """Definition for ``operation_id``; anything that is not an int id is not found."""
        # bool is an int subclass but never an operation id
        if not isinstance(operation_id, int) or isinstance(operation_id, bool):
            return None
        return self._by_id.get(operation_id)

    def __contains__(self, operation_id: Any) -> bool:
        return self.get(operation_id) is not None

    def __len__(self) -> int:
        return len(self._by_id)

    def grouped(self) -> Dict[str, List[OperationDefinition]]:
        """Operations by category, each group sorted by id ascending."""
        groups: Dict[str, List[OperationDefinition]] = {category: [] for category in self.categories}
        for op in self._by_id.values():
            groups.setdefault(op.category, []).append(op)
        for ops in groups.values():
            ops.sort(key=lambda op: op.id)
        return groups

    def default_expanded_categories(self) -> List[str]:
        """Declared categories that have at least one operation."""
        groups = self.grouped()
        return [category for category in self.categories if groups.get(category)]
