"""
Tests for LabelFormatter display text.
"""
import pytest

from labprotocol.core.catalog import ParameterDefinition
from labprotocol.ui.shared.label_formatter import (
    LabelFormatter, format_category_label, format_parameter_value,
)


class TestLabels:

    @pytest.mark.parametrize("raw, expected", [
        ("ADD_REAGENT", "Add Reagent"),
        ("incubate", "Incubate"),
        ("__spin__down_", "Spin Down"),
        ("PCR_2X_MIX", "Pcr 2x Mix"),
        ("", ""),
    ])
    def test_from_snake_case(self, raw, expected):
        assert LabelFormatter.from_snake_case(raw) == expected

    def test_category_label_strips_suffix(self):
        assert format_category_label("CELL_CULTURE_OPERATIONS") == "Cell Culture"
        assert format_category_label("MISC") == "Misc"

    def test_parameter_label_marks_required(self):
        assert LabelFormatter.format_parameter_label(
            ParameterDefinition("cell_line", "string", required=True)) == "Cell Line *"
        assert LabelFormatter.format_parameter_label(
            ParameterDefinition("density", "number")) == "Density"


class TestParameterValue:

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_value_placeholder(self, value):
        assert format_parameter_value("string", value) == "—"

    def test_number_with_unit(self):
        value = {"numericValue": 37, "unit": "°C"}
        assert format_parameter_value("number + unit", value) == "37 °C"

    def test_number_with_unit_partial(self):
        assert format_parameter_value("number + unit", {"numericValue": "5"}) == "5"
        assert format_parameter_value("number + unit", {"unit": "mL"}) == "mL"
        assert format_parameter_value("number + unit", {"numericValue": "", "unit": ""}) == "—"

    def test_structured_values_render_as_compact_json(self):
        assert format_parameter_value("dict", {"a": 1, "b": "µL"}) == '{"a":1,"b":"µL"}'
        assert format_parameter_value("list of reagents", ["PBS", "DMEM"]) == '["PBS","DMEM"]'

    def test_number_with_unit_type_but_scalar_value(self):
        assert format_parameter_value("number + unit", 12) == "12"

    @pytest.mark.parametrize("value, expected", [
        (True, "true"),
        (False, "false"),
        (3.0, "3"),
        (2.5, "2.5"),
        (0, "0"),
        ("HeLa", "HeLa"),
    ])
    def test_scalars(self, value, expected):
        assert format_parameter_value("number", value) == expected
