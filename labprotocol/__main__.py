"""
labprotocol command line entry point.

    labprotocol catalog --catalog operations.json
    labprotocol export protocol.yaml --catalog operations.json --output-dir out/ --payload
"""
import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

from labprotocol.core.catalog import OperationCatalog, ParameterDefinition
from labprotocol.core.config import GlobalProtocolConfig, load_global_config
from labprotocol.core.exceptions import LabProtocolError
from labprotocol.core.xdg_paths import get_labprotocol_log_dir
from labprotocol.services.export_service import ProtocolExporter
from labprotocol.services.protocol_file_service import load_protocol_file
from labprotocol.ui.shared.label_formatter import LabelFormatter


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the labprotocol CLI."""
    args = _parse_command_line_arguments(argv)
    logger = _setup_logging(args.debug, log_to_file=not args.no_log_file)

    config = load_global_config(args.config)

    try:
        catalog = _load_catalog(args, config)
        if args.command == "catalog":
            _print_catalog(catalog)
        elif args.command == "export":
            _export(args, config, catalog)
    except LabProtocolError as e:
        logger.error(f"{e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


def _parse_command_line_arguments(argv: Optional[List[str]]):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(prog="labprotocol", description="Lab protocol builder")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", type=str, default=None,
                        help="Path to a global configuration YAML file")
    parser.add_argument("--no-log-file", action="store_true",
                        help="Log to the console instead of the log directory")

    subparsers = parser.add_subparsers(dest="command", required=True)

    catalog_parser = subparsers.add_parser("catalog", help="List catalog operations by category")
    catalog_parser.add_argument("--catalog", type=str, default=None, help="Operation catalog (JSON or YAML)")

    export_parser = subparsers.add_parser("export", help="Render a protocol description to PDF")
    export_parser.add_argument("protocol", type=str, help="Protocol description (YAML)")
    export_parser.add_argument("--catalog", type=str, default=None, help="Operation catalog (JSON or YAML)")
    export_parser.add_argument("--output-dir", type=str, default=None,
                               help="Directory for the PDF (default: configured output directory)")
    export_parser.add_argument("--payload", action="store_true",
                               help="Also write the protocol data payload as JSON")

    return parser.parse_args(argv)


def _setup_logging(debug_mode: bool, log_to_file: bool = True):
    """Setup logging configuration."""
    log_level = logging.DEBUG if debug_mode else logging.INFO
    root_logger = logging.getLogger()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    if log_to_file:
        log_file = get_labprotocol_log_dir() / f"labprotocol_{time.strftime('%Y%m%d_%H%M%S')}.log"
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(formatter)
        # replaces the console handler installed on package import
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
        root_logger.addHandler(file_handler)
    elif not root_logger.hasHandlers():
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    root_logger.setLevel(log_level)
    logging.getLogger("labprotocol").setLevel(log_level)
    logger = logging.getLogger("labprotocol.main")
    logger.info(f"labprotocol starting with log level: {logging.getLevelName(log_level)}")
    return logger


def _load_catalog(args, config: GlobalProtocolConfig) -> OperationCatalog:
    catalog_path = args.catalog or config.catalog_path
    if not catalog_path:
        raise LabProtocolError("No operation catalog given (use --catalog or set catalog_path in the config)")
    return OperationCatalog.from_file(catalog_path)


def _print_catalog(catalog: OperationCatalog) -> None:
    expanded = set(catalog.default_expanded_categories())
    for category, operations in catalog.grouped().items():
        if not operations:
            continue
        marker = "▾" if category in expanded else "▸"
        print(f"{marker} {LabelFormatter.format_category_label(category)}")
        for op in operations:
            print(f"    [{op.id}] {LabelFormatter.format_operation_label(op.name)}")
            for param in op.parameters:
                print(f"        {LabelFormatter.format_parameter_label(param)} ({_describe_parameter(param)})")


def _describe_parameter(param: ParameterDefinition) -> str:
    """Kind of a parameter plus the values it can take, e.g. "number with unit: °C, K"."""
    kind = param.kind.value.replace("_", " ")
    choices = param.options or param.units
    if param.fixed_unit:
        choices = (param.fixed_unit,)
    return f"{kind}: {', '.join(str(choice) for choice in choices)}" if choices else kind


def _export(args, config: GlobalProtocolConfig, catalog: OperationCatalog) -> None:
    manager = load_protocol_file(catalog, args.protocol)
    exporter = ProtocolExporter(config)
    result = exporter.export(
        manager.snapshot(),
        output_dir=Path(args.output_dir) if args.output_dir else None,
        write_payload=args.payload or None,
    )
    print(f"Wrote {result.pdf_path} ({result.page_count} page(s))")
    if result.payload_path:
        print(f"Wrote {result.payload_path}")


if __name__ == "__main__":
    sys.exit(main())
