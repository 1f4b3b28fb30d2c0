"""
PDF backend: draws a DocumentLayout with reportlab.

Layout coordinates are top-down in layout units (millimetres); reportlab
measures bottom-up in points, so every y is flipped against the page height.
"""

import io
import logging
from pathlib import Path
from typing import BinaryIO, Union

from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from labprotocol.core.config import LayoutConfig
from labprotocol.io.atomic import atomic_write_bytes
from labprotocol.rendering.layout import DocumentLayout, Page, RuleBlock, TextBlock

logger = logging.getLogger(__name__)


class PdfDocumentWriter:
    """Writes laid-out pages to a PDF file or stream."""

    def __init__(self, config: LayoutConfig, unit: float = mm):
        self.config = config
        self.unit = unit

    def _page_y(self, y: float) -> float:
        return (self.config.page_height - y) * self.unit

    def _draw_text(self, pdf: canvas.Canvas, block: TextBlock) -> None:
        pdf.setFont(block.font.face, block.font.size)
        x = block.x * self.unit
        for index, line in enumerate(block.lines):
            y = self._page_y(block.y + index * block.line_height)
            if block.align == "center":
                pdf.drawCentredString(x, y, line)
            elif block.align == "right":
                pdf.drawRightString(x, y, line)
            else:
                pdf.drawString(x, y, line)

    def _draw_rule(self, pdf: canvas.Canvas, block: RuleBlock) -> None:
        pdf.saveState()
        level = block.gray / 255.0
        pdf.setStrokeColorRGB(level, level, level)
        y = self._page_y(block.y)
        pdf.line(block.x1 * self.unit, y, block.x2 * self.unit, y)
        pdf.restoreState()

    def _draw_page(self, pdf: canvas.Canvas, page: Page) -> None:
        for block in page.blocks:
            if isinstance(block, TextBlock):
                self._draw_text(pdf, block)
            elif isinstance(block, RuleBlock):
                self._draw_rule(pdf, block)

    def write(self, document: DocumentLayout, stream: BinaryIO) -> None:
        """Draw every page of ``document`` into a binary stream."""
        page_size = (self.config.page_width * self.unit, self.config.page_height * self.unit)
        pdf = canvas.Canvas(stream, pagesize=page_size)
        pdf.setTitle(document.title)

        for page in document.pages:
            self._draw_page(pdf, page)
            pdf.showPage()

        pdf.save()

    def to_bytes(self, document: DocumentLayout) -> bytes:
        buffer = io.BytesIO()
        self.write(document, buffer)
        return buffer.getvalue()

    def write_file(self, document: DocumentLayout, path: Union[str, Path]) -> Path:
        """
        Write ``document`` to ``path`` atomically.

        Raises:
            ExportError: If the file cannot be written
        """
        path = Path(path)
        atomic_write_bytes(path, self.to_bytes(document))
        logger.info(f"Wrote {document.page_count} page(s) to {path}")
        return path
