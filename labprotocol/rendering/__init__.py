"""
Document rendering: pagination layout, text wrapping and file naming.
"""

from labprotocol.rendering.filename import protocol_base_name, protocol_filename
from labprotocol.rendering.layout import (
    DocumentLayout, Page, PaginatedDocumentRenderer, RuleBlock, TextBlock,
)
from labprotocol.rendering.text_wrapper import ReportLabTextWrapper, TextWrapper

__all__ = [
    'DocumentLayout',
    'Page',
    'PaginatedDocumentRenderer',
    'ReportLabTextWrapper',
    'RuleBlock',
    'TextBlock',
    'TextWrapper',
    'protocol_base_name',
    'protocol_filename',
]
