"""Global pytest configuration and shared fixtures for labprotocol tests."""
import math
from typing import List

import pytest

from labprotocol.core.catalog import OperationCatalog
from labprotocol.core.config import FontSpec
from labprotocol.core.protocol.step_list_manager import StepListManager
from labprotocol.rendering.text_wrapper import TextWrapper


class FixedWidthWrapper(TextWrapper):
    """Wraps every ``chars_per_line`` characters, ignoring fonts."""

    def __init__(self, chars_per_line: int = 1000):
        self.chars_per_line = chars_per_line
        self.calls = []

    def wrap(self, text: str, max_width: float, font: FontSpec) -> List[str]:
        self.calls.append((text, max_width, font))
        if not text:
            return [""]
        count = math.ceil(len(text) / self.chars_per_line)
        return [text[i * self.chars_per_line:(i + 1) * self.chars_per_line] for i in range(count)]


@pytest.fixture
def catalog_data():
    """Catalog structure in the on-disk file format."""
    return {
        "atomic_operations": [
            {
                "id": 2,
                "name": "INCUBATE",
                "category": "CELL_CULTURE_OPERATIONS",
                "parameters": [
                    {"name": "temperature", "type": "number + unit", "required": True, "units": ["°C", "K"]},
                    {"name": "duration", "type": "number + unit or days"},
                    {"name": "shaking", "type": "boolean"},
                ],
            },
            {
                "id": 1,
                "name": "SEED_CELLS",
                "category": "CELL_CULTURE_OPERATIONS",
                "parameters": [
                    {"name": "cell_line", "type": "string", "required": True},
                    {"name": "density", "type": "number"},
                ],
                "example": "Seed HeLa at 1e5 cells/mL",
            },
            {
                "id": 5,
                "name": "CENTRIFUGE",
                "category": "SAMPLE_PREP_OPERATIONS",
                "parameters": [
                    {"name": "speed", "type": "number + rpm"},
                    {"name": "mode", "type": "string", "options": ["soft", "hard"]},
                ],
            },
            {
                "id": 9,
                "name": "WAIT",
                "category": "MISC",
                "parameters": [],
            },
        ],
        "metadata": {
            "categories": ["CELL_CULTURE_OPERATIONS", "IMAGING_OPERATIONS", "SAMPLE_PREP_OPERATIONS"],
        },
    }


@pytest.fixture
def catalog(catalog_data):
    return OperationCatalog.from_data(catalog_data)


@pytest.fixture
def manager(catalog):
    return StepListManager(catalog)


@pytest.fixture
def one_line_wrapper():
    return FixedWidthWrapper()
