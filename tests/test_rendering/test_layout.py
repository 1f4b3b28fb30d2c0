"""
Tests for PaginatedDocumentRenderer page breaks and cursor advances.

With a wrapper that never splits lines, the header block ends at y=56 and a
step without parameters advances the cursor by 32.
"""
from datetime import datetime

import pytest

from labprotocol.core.catalog import ParameterDefinition
from labprotocol.core.config import FontSpec, LayoutConfig
from labprotocol.core.protocol.state import ProtocolSnapshot
from labprotocol.core.steps.step_instance import StepInstance
from labprotocol.rendering.layout import PaginatedDocumentRenderer, RuleBlock, TextBlock

from tests.conftest import FixedWidthWrapper

GENERATED_AT = datetime(2026, 1, 2, 3, 4, 5)


def make_step(name="WAIT", category="MISC_OPERATIONS", parameters=(), values=None, instance_id="s"):
    return StepInstance(
        instance_id=instance_id,
        operation_id=1,
        operation_name=name,
        category=category,
        parameters=tuple(parameters),
        values=dict(values or {}),
    )


def render(steps, header="Cell Prep", wrapper=None):
    renderer = PaginatedDocumentRenderer(wrapper or FixedWidthWrapper())
    return renderer.render(ProtocolSnapshot(header=header, steps=tuple(steps)), generated_at=GENERATED_AT)


def texts(page):
    return [(block.lines, block.y) for block in page.text_blocks()]


def first_line_y(page, prefix):
    for block in page.text_blocks():
        if block.lines[0].startswith(prefix):
            return block.y
    raise AssertionError(f"No line starting with {prefix!r} on page {page.number}")


class TestHeader:

    def test_header_blocks(self):
        layout = render([])
        page = layout.pages[0]

        assert layout.page_count == 1
        assert layout.title == "Cell Prep"
        assert texts(page) == [
            (("Cell Prep",), 20),
            (("Generated on: 01/02/2026, 03:04:05 AM",), 32),
            (("Number of steps: 0",), 38),
            (("Steps",), 50),
        ]

        title = page.text_blocks()[0]
        assert title.align == "center"
        assert title.x == 105
        assert title.font == FontSpec("Helvetica-Bold", 18)
        assert page.text_blocks()[3].font == FontSpec("Helvetica-Bold", 14)

    def test_untitled_protocol(self):
        layout = render([], header="")
        assert layout.title == "Untitled protocol"
        assert layout.pages[0].text_blocks()[0].lines == ("Untitled protocol",)

    def test_step_count_line(self):
        layout = render([make_step(instance_id=str(i)) for i in range(3)])
        assert first_line_y(layout.pages[0], "Number of steps: 3") == 38


class TestStepBlock:

    def test_step_without_parameters(self):
        page = render([make_step("SPIN_DOWN", "SAMPLE_PREP_OPERATIONS")]).pages[0]
        step_blocks = page.text_blocks()[4:]

        assert [(b.lines, b.x, b.y) for b in step_blocks] == [
            (("Step 1: Spin Down",), 14, 56),
            (("Category: Sample Prep",), 14, 62),
        ]
        assert step_blocks[0].font == FontSpec("Helvetica-Bold", 11)
        rules = [b for b in page.blocks if isinstance(b, RuleBlock)]
        assert rules == [RuleBlock(x1=14, x2=196, y=78, gray=200)]

    def test_parameter_lines(self):
        step = make_step(
            "INCUBATE",
            parameters=[
                ParameterDefinition("temperature", "number + unit", required=True),
                ParameterDefinition("shaking", "boolean"),
                ParameterDefinition("notes", "free text"),
            ],
            values={"temperature": {"numericValue": "37", "unit": "°C"}, "shaking": True},
        )
        page = render([step]).pages[0]

        assert first_line_y(page, "Parameters:") == 70
        param_blocks = page.text_blocks()[-3:]
        assert [(b.lines[0], b.x, b.y) for b in param_blocks] == [
            ("• Temperature *: 37 °C", 18, 76),
            ("• Shaking: true", 18, 82),
            ("• Notes: —", 18, 88),
        ]
        rules = [b for b in page.blocks if isinstance(b, RuleBlock)]
        assert rules[0].y == 104

    def test_wrapped_lines_advance_cursor(self):
        wrapper = FixedWidthWrapper(chars_per_line=10)
        step = make_step("SEED_CELLS", parameters=[ParameterDefinition("note", "string")],
                         values={"note": "x" * 25})
        page = render([step], wrapper=wrapper).pages[0]

        # "Step 1: Seed Cells" -> 2 lines, "Category: Misc" -> 2 lines
        assert first_line_y(page, "Category") == 68
        assert first_line_y(page, "Parameters:") == 82
        note = page.text_blocks()[-1]
        assert note.y == 88
        assert len(note.lines) == 4
        assert note.bottom == 106
        rules = [b for b in page.blocks if isinstance(b, RuleBlock)]
        assert rules[0].y == 122

    def test_wrapper_receives_width_and_font(self):
        wrapper = FixedWidthWrapper()
        render([make_step()], wrapper=wrapper)
        text, max_width, font = wrapper.calls[0]
        assert text == "Step 1: Wait"
        assert max_width == 180
        assert font == FontSpec("Helvetica-Bold", 11)


class TestPagination:

    def test_eighth_step_starts_second_page(self):
        steps = [make_step(instance_id=str(i)) for i in range(8)]
        layout = render(steps)

        assert layout.page_count == 2
        first_page_starts = [b.y for b in layout.pages[0].text_blocks() if b.lines[0].startswith("Step ")]
        assert first_page_starts == [56, 88, 120, 152, 184, 216, 248]
        assert first_line_y(layout.pages[1], "Step 8: Wait") == 20

    def test_seven_steps_fit_on_one_page(self):
        layout = render([make_step(instance_id=str(i)) for i in range(7)])
        assert layout.page_count == 1

    def test_long_parameter_list_breaks_mid_step(self):
        params = [ParameterDefinition(f"p{i}", "number") for i in range(40)]
        layout = render([make_step("MIX", parameters=params)])

        assert layout.page_count == 2
        first, second = layout.pages
        first_params = [b for b in first.text_blocks() if b.lines[0].startswith("•")]
        second_params = [b for b in second.text_blocks() if b.lines[0].startswith("•")]

        assert len(first_params) == 33
        assert first_params[-1].y == 268
        assert second_params[0].lines == ("• P33: —",)
        assert second_params[0].y == 20
        assert len(second_params) == 7
        assert [b.y for b in second.blocks if isinstance(b, RuleBlock)] == [72]

    def test_no_break_inside_step_body(self):
        # a step starting just above the limit keeps its title and category together
        steps = [make_step(instance_id=str(i)) for i in range(7)]
        page = render(steps).pages[0]
        assert first_line_y(page, "Step 7") == 248
        assert [b.y for b in page.text_blocks() if b.lines[0].startswith("Category")][-1] == 254

    def test_custom_layout_config(self):
        renderer = PaginatedDocumentRenderer(FixedWidthWrapper(), config=LayoutConfig(max_y=100))
        layout = renderer.render(ProtocolSnapshot("P", tuple(make_step(instance_id=str(i)) for i in range(3))),
                                 generated_at=GENERATED_AT)
        # steps start at 56 and 88; the third would start at 120 > 100
        assert layout.page_count == 2

    def test_render_is_deterministic(self):
        steps = [make_step(instance_id=str(i)) for i in range(9)]
        assert render(steps) == render(steps)

    @pytest.mark.parametrize("count, pages", [(0, 1), (7, 1), (8, 2), (16, 3)])
    def test_page_count(self, count, pages):
        # 8 steps fit on each following page: 20, 52, ..., 244
        assert render([make_step(instance_id=str(i)) for i in range(count)]).page_count == pages


def test_text_block_bottom():
    block = TextBlock(lines=("a", "b", "c"), x=0, y=10, font=FontSpec("Helvetica", 11), line_height=6)
    assert block.bottom == 22
