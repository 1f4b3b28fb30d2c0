"""
Consolidated constants for labprotocol.

This module defines the parameter kinds, drag-payload tags and the fixed
document layout policy used when rendering a protocol.
"""

from enum import Enum
from typing import Dict, Optional, Sequence, Tuple


class ParameterKind(Enum):
    """Semantic kind of a catalog parameter, derived from its raw type string."""
    BOOLEAN = "boolean"
    TEXT = "text"
    MULTILINE_TEXT = "multiline_text"
    NUMBER = "number"
    NUMBER_WITH_UNIT = "number_with_unit"
    NUMBER_FIXED_UNIT = "number_fixed_unit"
    PERCENTAGE = "percentage"
    OPTIONS = "options"
    DURATION = "duration"

    @classmethod
    def classify(cls, raw_type: str, options: Optional[Sequence[str]] = None) -> "ParameterKind":
        """
        Resolve the kind of a parameter from its raw catalog type.

        Checks run in a fixed order: a boolean type wins over options, options
        win over the free-form text keywords, and only then are the numeric
        raw types matched exactly.
        """
        lowered = raw_type.lower()

        if lowered == RAW_TYPE_BOOLEAN:
            return cls.BOOLEAN
        if options:
            return cls.OPTIONS
        if any(keyword in lowered for keyword in MULTILINE_TYPE_KEYWORDS):
            return cls.MULTILINE_TEXT
        if raw_type == RAW_TYPE_NUMBER_WITH_UNIT:
            return cls.NUMBER_WITH_UNIT
        if raw_type in FIXED_UNIT_RAW_TYPES:
            return cls.NUMBER_FIXED_UNIT
        if raw_type == RAW_TYPE_PERCENTAGE:
            return cls.PERCENTAGE
        if raw_type == RAW_TYPE_DURATION:
            return cls.DURATION
        if raw_type == RAW_TYPE_NUMBER:
            return cls.NUMBER
        return cls.TEXT


class DragSource(Enum):
    """Where a drag gesture started: the catalog (left) or the step list (right)."""
    CATALOG = "left"
    STEP_LIST = "right"


# Raw catalog type strings
RAW_TYPE_BOOLEAN = "boolean"
RAW_TYPE_NUMBER = "number"
RAW_TYPE_NUMBER_WITH_UNIT = "number + unit"
RAW_TYPE_PERCENTAGE = "percentage"
RAW_TYPE_DURATION = "number + unit or days"
FIXED_UNIT_PREFIX = "number + "
FIXED_UNITS: Tuple[str, ...] = ("°C", "rpm")
# raw type -> the unit it fixes, e.g. "number + rpm" -> "rpm"
FIXED_UNIT_RAW_TYPES: Dict[str, str] = {FIXED_UNIT_PREFIX + unit: unit for unit in FIXED_UNITS}

MULTILINE_TYPE_KEYWORDS: Tuple[str, ...] = (
    "array",
    "list",
    "dict",
    "expression",
    "free text",
    "estimated time",
    "additional tips",
    "string or dict",
    "reference image path",
    "reference video path",
)

# Keys of a number + unit value
NUMERIC_VALUE_KEY = "numericValue"
UNIT_KEY = "unit"

# Catalog file structure
CATALOG_OPERATIONS_KEY = "atomic_operations"
CATALOG_METADATA_KEY = "metadata"
CATALOG_CATEGORIES_KEY = "categories"
CATEGORY_SUFFIX = "_OPERATIONS"

# Drag payload wire format
DRAG_SOURCE_KEY = "source"
DRAG_OPERATION_ID_KEY = "operationId"
DRAG_INSTANCE_ID_KEY = "instanceId"

# Display placeholders
EMPTY_VALUE_PLACEHOLDER = "—"
UNTITLED_PROTOCOL = "Untitled protocol"
REQUIRED_MARKER = " *"
BULLET = "•"

# Document layout policy (millimetres on an A4 page)
PAGE_WIDTH = 210
PAGE_HEIGHT = 297
PAGE_TOP_Y = 20
PAGE_MAX_Y = 270
LINE_HEIGHT = 6
TEXT_MAX_WIDTH = 180
MARGIN_X = 14
PARAMETER_INDENT_X = 18
TITLE_CENTER_X = 105
SEPARATOR_END_X = 196
SEPARATOR_GAP = 10
PARAMETER_BLOCK_GAP = 2
SEPARATOR_GRAY = 200

# Fonts: (face, size in points)
TITLE_FONT = ("Helvetica-Bold", 18)
META_FONT = ("Helvetica", 11)
SECTION_FONT = ("Helvetica-Bold", 14)
STEP_TITLE_FONT = ("Helvetica-Bold", 11)
BODY_FONT = ("Helvetica", 11)

# Export
DEFAULT_FILE_BASE_NAME = "protocol"
PDF_EXTENSION = ".pdf"
PAYLOAD_EXTENSION = ".json"
GENERATED_ON_FORMAT = "%m/%d/%Y, %I:%M:%S %p"
