"""
Protocol Export Service - snapshot to document artifact.

Takes an immutable snapshot of a protocol, builds the protocol data payload
and renders the paginated document. Rendering never touches the editing
state; only the snapshot taken at export time is read.
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from labprotocol.constants.constants import PAYLOAD_EXTENSION
from labprotocol.core.config import GlobalProtocolConfig, get_default_global_config
from labprotocol.core.protocol.state import ProtocolSnapshot
from labprotocol.io.atomic import atomic_write_json
from labprotocol.io.pdf_writer import PdfDocumentWriter
from labprotocol.rendering.filename import protocol_base_name, protocol_filename
from labprotocol.rendering.layout import DocumentLayout, PaginatedDocumentRenderer
from labprotocol.rendering.text_wrapper import ReportLabTextWrapper, TextWrapper

logger = logging.getLogger(__name__)


def build_protocol_payload(snapshot: ProtocolSnapshot) -> Dict[str, Any]:
    """
    Plain data description of a protocol, shaped for a persistence backend.

    Every parameter of every step is listed in definition order with its
    stored value, or None when no value was entered.
    """
    return {
        "header": snapshot.header,
        "steps": [
            {
                "instanceId": step.instance_id,
                "operationId": step.operation_id,
                "operationName": step.operation_name,
                "category": step.category,
                "parameters": [
                    {
                        "name": param.name,
                        "type": param.type,
                        "required": param.required,
                        "value": step.values.get(param.name),
                    }
                    for param in step.parameters
                ],
            }
            for step in snapshot.steps
        ],
    }


@dataclass(frozen=True)
class ExportResult:
    pdf_path: Path
    payload: Dict[str, Any]
    page_count: int
    payload_path: Optional[Path] = None


class ProtocolExporter:
    """
    Service layer for protocol export.

    Handles:
    - Layout of the snapshot into pages
    - Naming and writing the PDF artifact
    - The protocol data payload side channel
    """

    def __init__(self, config: Optional[GlobalProtocolConfig] = None,
                 wrapper: Optional[TextWrapper] = None,
                 writer: Optional[PdfDocumentWriter] = None):
        self.config = config or get_default_global_config()
        self.renderer = PaginatedDocumentRenderer(
            wrapper or ReportLabTextWrapper(),
            self.config.layout,
            untitled_label=self.config.export.untitled_label,
            generated_on_format=self.config.export.generated_on_format,
        )
        self.writer = writer or PdfDocumentWriter(self.config.layout)

    def render(self, snapshot: ProtocolSnapshot, generated_at: Optional[datetime] = None) -> DocumentLayout:
        return self.renderer.render(snapshot, generated_at=generated_at)

    def export(self, snapshot: ProtocolSnapshot, output_dir: Optional[Path] = None,
               generated_at: Optional[datetime] = None,
               write_payload: Optional[bool] = None) -> ExportResult:
        """
        Render ``snapshot`` and write the PDF into ``output_dir``.

        Args:
            snapshot: Protocol to export
            output_dir: Target directory; defaults to the configured one
            generated_at: Timestamp printed in the document; defaults to now
            write_payload: Also write the data payload as JSON; defaults to
                the configured setting

        Returns:
            ExportResult describing what was written

        Raises:
            ExportError: If a file cannot be written
        """
        output_dir = Path(output_dir) if output_dir is not None else self.config.export.output_dir
        if write_payload is None:
            write_payload = self.config.export.write_payload

        payload = build_protocol_payload(snapshot)
        logger.debug(f"Protocol payload: {payload}")

        document = self.render(snapshot, generated_at=generated_at)
        pdf_path = self.writer.write_file(document, output_dir / protocol_filename(snapshot.header))

        payload_path = None
        if write_payload:
            payload_path = output_dir / (protocol_base_name(snapshot.header) + PAYLOAD_EXTENSION)
            atomic_write_json(payload_path, payload)
            logger.info(f"Wrote protocol payload to {payload_path}")

        logger.info(f"Exported protocol '{document.title}' with {len(snapshot.steps)} steps to {pdf_path}")
        return ExportResult(
            pdf_path=pdf_path,
            payload=payload,
            page_count=document.page_count,
            payload_path=payload_path,
        )
