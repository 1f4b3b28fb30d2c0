"""
Label formatting for operation names, categories, parameters and values.

This module provides the single place where identifier-style catalog strings
are turned into the human-readable text shown in the step list and written
into the exported document.
"""

import json
from typing import Any, Mapping

from labprotocol.constants.constants import (
    CATEGORY_SUFFIX, EMPTY_VALUE_PLACEHOLDER, NUMERIC_VALUE_KEY,
    RAW_TYPE_NUMBER_WITH_UNIT, REQUIRED_MARKER, UNIT_KEY,
)
from labprotocol.core.catalog import ParameterDefinition


class LabelFormatter:
    """
    Utility class for consistent label formatting.

    Formatting Patterns:
    - Identifiers: "CELL_CULTURE" -> "Cell Culture"
    - Categories: "SAMPLE_PREP_OPERATIONS" -> "Sample Prep"
    - Parameters: required "incubation_time" -> "Incubation Time *"
    - Values: {"numericValue": "37", "unit": "°C"} -> "37 °C"
    """

    @staticmethod
    def from_snake_case(value: str) -> str:
        """
        Convert an identifier to Title Case words.

        The value is lowercased, split on underscores with empty pieces
        dropped, and the first letter of each word is upper-cased.

        Example:
            >>> LabelFormatter.from_snake_case("ADD_REAGENT")
            'Add Reagent'
            >>> LabelFormatter.from_snake_case("__spin__down")
            'Spin Down'
        """
        words = [word for word in value.lower().split("_") if word]
        return " ".join(word[0].upper() + word[1:] for word in words)

    @staticmethod
    def format_category_label(category: str) -> str:
        """
        Convert a category tag to its display label.

        Example:
            >>> LabelFormatter.format_category_label("LIQUID_HANDLING_OPERATIONS")
            'Liquid Handling'
            >>> LabelFormatter.format_category_label("IMAGING")
            'Imaging'
        """
        base = category[:-len(CATEGORY_SUFFIX)] if category.endswith(CATEGORY_SUFFIX) else category
        return LabelFormatter.from_snake_case(base)

    @staticmethod
    def format_operation_label(name: str) -> str:
        return LabelFormatter.from_snake_case(name)

    @staticmethod
    def format_parameter_label(param: ParameterDefinition) -> str:
        """
        Display label of a parameter; required parameters are marked with " *".

        Example:
            >>> LabelFormatter.format_parameter_label(ParameterDefinition("volume", "number", required=True))
            'Volume *'
        """
        base = LabelFormatter.from_snake_case(param.name)
        return f"{base}{REQUIRED_MARKER}" if param.required else base

    @staticmethod
    def format_parameter_value(raw_type: str, value: Any) -> str:
        """
        Render a stored parameter value as display text.

        Args:
            raw_type: The parameter's raw catalog type
            value: The stored value, possibly missing

        Returns:
            "—" for a missing or empty value, "{number} {unit}" for a
            number + unit value, compact JSON for any other structured value,
            and plain text otherwise

        Example:
            >>> LabelFormatter.format_parameter_value("number + unit", {"numericValue": "37", "unit": "°C"})
            '37 °C'
            >>> LabelFormatter.format_parameter_value("text", None)
            '—'
        """
        if value is None or value == "":
            return EMPTY_VALUE_PLACEHOLDER

        if raw_type == RAW_TYPE_NUMBER_WITH_UNIT and isinstance(value, Mapping):
            numeric_value = _to_text(value.get(NUMERIC_VALUE_KEY))
            unit = _to_text(value.get(UNIT_KEY))
            text = f"{numeric_value} {unit}".strip()
            return text or EMPTY_VALUE_PLACEHOLDER

        if isinstance(value, (Mapping, list, tuple)):
            try:
                return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
            except (TypeError, ValueError):
                return str(value)

        return _to_text(value)


def _to_text(value: Any) -> str:
    """Plain text of a scalar, with missing parts rendered as empty."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# Convenience functions for ease of use
def format_category_label(category: str) -> str:
    return LabelFormatter.format_category_label(category)


def format_operation_label(name: str) -> str:
    return LabelFormatter.format_operation_label(name)


def format_parameter_label(param: ParameterDefinition) -> str:
    return LabelFormatter.format_parameter_label(param)


def format_parameter_value(raw_type: str, value: Any) -> str:
    return LabelFormatter.format_parameter_value(raw_type, value)
