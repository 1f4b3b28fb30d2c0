"""
Text wrapping backends for the document renderer.

Wrapping a string to a width depends on font metrics, so the layout treats
it as a substitutable capability: a wrapper returns the ordered lines of a
string, none wider than the requested width. The layout only consumes the
number of lines, which drives the vertical cursor.
"""

import abc
from typing import List

from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import stringWidth

from labprotocol.core.config import FontSpec


class TextWrapper(abc.ABC):
    """Splits text into lines that fit a width in layout units."""

    @abc.abstractmethod
    def wrap(self, text: str, max_width: float, font: FontSpec) -> List[str]:
        """
        Args:
            text: Text to wrap
            max_width: Available width in layout units
            font: Font the text will be drawn with

        Returns:
            At least one line; an empty string wraps to ``[""]``
        """
        raise NotImplementedError


class ReportLabTextWrapper(TextWrapper):
    """
    Wraps with reportlab's font metrics.

    Layout units are converted to points with ``unit`` (millimetres by
    default) before measuring. Text is split at spaces first; a word that is
    still wider than the line, such as compact JSON or a long file path, is
    then broken between characters.
    """

    def __init__(self, unit: float = mm):
        self.unit = unit

    def wrap(self, text: str, max_width: float, font: FontSpec) -> List[str]:
        width = max_width * self.unit
        lines = []
        for line in simpleSplit(text, font.face, font.size, width):
            lines.extend(self._break_long_line(line, width, font))
        return lines or [""]

    @staticmethod
    def _break_long_line(line: str, width: float, font: FontSpec) -> List[str]:
        if stringWidth(line, font.face, font.size) <= width:
            return [line]

        pieces = []
        current = ""
        for char in line:
            # a single glyph wider than the line still gets a line of its own
            if current and stringWidth(current + char, font.face, font.size) > width:
                pieces.append(current)
                current = char
            else:
                current += char
        if current:
            pieces.append(current)
        return pieces
