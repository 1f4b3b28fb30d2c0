"""
Paginated Document Renderer.

Lays out a protocol snapshot (header plus ordered steps) across fixed-size
pages in a single top-to-bottom pass. The renderer decides where page breaks
fall and how text wraps; drawing the result is left to a backend.

Page breaks are only checked before a step starts and before each parameter
line. Nothing is moved back once placed.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple, Union

from labprotocol.constants.constants import BULLET, GENERATED_ON_FORMAT, UNTITLED_PROTOCOL
from labprotocol.core.config import FontSpec, LayoutConfig
from labprotocol.core.protocol.state import ProtocolSnapshot
from labprotocol.core.steps.step_instance import StepInstance
from labprotocol.rendering.text_wrapper import TextWrapper
from labprotocol.ui.shared.label_formatter import LabelFormatter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextBlock:
    """
    Lines of text placed at (x, y).

    ``y`` is the baseline of the first line; line ``i`` sits at
    ``y + i * line_height``.
    """
    lines: Tuple[str, ...]
    x: float
    y: float
    font: FontSpec
    line_height: float
    align: str = "left"

    @property
    def bottom(self) -> float:
        return self.y + self.line_height * (len(self.lines) - 1)


@dataclass(frozen=True)
class RuleBlock:
    """Horizontal separator line."""
    x1: float
    x2: float
    y: float
    gray: int


Block = Union[TextBlock, RuleBlock]


@dataclass
class Page:
    number: int
    blocks: List[Block] = field(default_factory=list)

    def text_blocks(self) -> List[TextBlock]:
        return [block for block in self.blocks if isinstance(block, TextBlock)]


@dataclass
class DocumentLayout:
    """Ordered pages of a rendered protocol."""
    title: str
    pages: List[Page]

    @property
    def page_count(self) -> int:
        return len(self.pages)


class _Cursor:
    """Vertical write position plus the pages produced so far."""

    def __init__(self, config: LayoutConfig):
        self.config = config
        self.pages: List[Page] = []
        self.y = config.top_y
        self.new_page()

    @property
    def page(self) -> Page:
        return self.pages[-1]

    def new_page(self) -> None:
        self.pages.append(Page(number=len(self.pages) + 1))
        self.y = self.config.top_y

    def break_if_needed(self) -> None:
        if self.y > self.config.max_y:
            logger.debug(f"Page {self.page.number} full at y={self.y}; starting page {self.page.number + 1}")
            self.new_page()

    def place(self, lines: List[str], x: float, font: FontSpec, align: str = "left") -> TextBlock:
        block = TextBlock(
            lines=tuple(lines),
            x=x,
            y=self.y,
            font=font,
            line_height=self.config.line_height,
            align=align,
        )
        self.page.blocks.append(block)
        return block

    def rule(self) -> None:
        self.page.blocks.append(RuleBlock(
            x1=self.config.margin_x,
            x2=self.config.separator_end_x,
            y=self.y,
            gray=self.config.separator_gray,
        ))


class PaginatedDocumentRenderer:
    """
    Turns a ProtocolSnapshot into a DocumentLayout.

    The snapshot is only read. Rendering the same snapshot with the same
    wrapper and timestamp always yields the same layout.
    """

    def __init__(self, wrapper: TextWrapper, config: Optional[LayoutConfig] = None,
                 untitled_label: str = UNTITLED_PROTOCOL,
                 generated_on_format: str = GENERATED_ON_FORMAT):
        self.wrapper = wrapper
        self.config = config or LayoutConfig()
        self.untitled_label = untitled_label
        self.generated_on_format = generated_on_format

    def render(self, snapshot: ProtocolSnapshot, generated_at: Optional[datetime] = None) -> DocumentLayout:
        config = self.config
        generated_at = generated_at or datetime.now()
        title = snapshot.header or self.untitled_label

        cursor = _Cursor(config)

        cursor.place([title], config.title_center_x, config.title_font, align="center")
        cursor.y += config.line_height * 2

        cursor.place([f"Generated on: {generated_at.strftime(self.generated_on_format)}"],
                     config.margin_x, config.meta_font)
        cursor.y += config.line_height
        cursor.place([f"Number of steps: {len(snapshot.steps)}"], config.margin_x, config.meta_font)
        cursor.y += config.line_height * 2

        cursor.place(["Steps"], config.margin_x, config.section_font)
        cursor.y += config.line_height

        for number, step in enumerate(snapshot.steps, start=1):
            self._render_step(cursor, number, step)

        logger.debug(f"Laid out {len(snapshot.steps)} steps on {len(cursor.pages)} pages")
        return DocumentLayout(title=title, pages=cursor.pages)

    def _wrapped(self, cursor: _Cursor, text: str, x: float, font: FontSpec) -> None:
        lines = self.wrapper.wrap(text, self.config.max_width, font)
        cursor.place(lines, x, font)
        cursor.y += self.config.line_height * len(lines)

    def _render_step(self, cursor: _Cursor, number: int, step: StepInstance) -> None:
        config = self.config
        cursor.break_if_needed()

        step_title = f"Step {number}: {LabelFormatter.format_operation_label(step.operation_name)}"
        self._wrapped(cursor, step_title, config.margin_x, config.step_title_font)

        category_line = f"Category: {LabelFormatter.format_category_label(step.category)}"
        self._wrapped(cursor, category_line, config.margin_x, config.body_font)

        if step.parameters:
            cursor.y += config.parameter_block_gap
            cursor.place(["Parameters:"], config.margin_x, config.body_font)
            cursor.y += config.line_height

            for param in step.parameters:
                # long parameter lists can overflow mid-step
                cursor.break_if_needed()
                label = LabelFormatter.format_parameter_label(param)
                value = LabelFormatter.format_parameter_value(param.type, step.values.get(param.name))
                self._wrapped(cursor, f"{BULLET} {label}: {value}", config.parameter_indent_x, config.body_font)

        cursor.y += config.separator_gap
        cursor.rule()
        cursor.y += config.separator_gap
