"""
Global configuration dataclasses for labprotocol.

This module defines the layout policy used by the document renderer, the
export settings, and the overarching GlobalProtocolConfig. Configuration is
immutable; user overrides are read once from a YAML file at startup.
"""

import dataclasses
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from labprotocol.constants import constants as c
from labprotocol.core.xdg_paths import get_labprotocol_config_dir

logger = logging.getLogger(__name__)

GLOBAL_CONFIG_FILE_NAME = "global_config.yaml"


@dataclass(frozen=True)
class FontSpec:
    """Font face and size in points."""
    face: str
    size: float


@dataclass(frozen=True)
class LayoutConfig:
    """
    Page geometry and cursor advances of the exported document.

    All distances are in millimetres on the page. The defaults are the fixed
    layout policy; changing them changes where page breaks fall.
    """
    page_width: float = c.PAGE_WIDTH
    page_height: float = c.PAGE_HEIGHT
    top_y: float = c.PAGE_TOP_Y
    max_y: float = c.PAGE_MAX_Y
    """A new page starts before a step or parameter line once the cursor passes this."""
    line_height: float = c.LINE_HEIGHT
    max_width: float = c.TEXT_MAX_WIDTH
    """Wrap width of body text."""
    margin_x: float = c.MARGIN_X
    parameter_indent_x: float = c.PARAMETER_INDENT_X
    title_center_x: float = c.TITLE_CENTER_X
    separator_end_x: float = c.SEPARATOR_END_X
    separator_gap: float = c.SEPARATOR_GAP
    parameter_block_gap: float = c.PARAMETER_BLOCK_GAP
    separator_gray: int = c.SEPARATOR_GRAY

    title_font: FontSpec = FontSpec(*c.TITLE_FONT)
    meta_font: FontSpec = FontSpec(*c.META_FONT)
    section_font: FontSpec = FontSpec(*c.SECTION_FONT)
    step_title_font: FontSpec = FontSpec(*c.STEP_TITLE_FONT)
    body_font: FontSpec = FontSpec(*c.BODY_FONT)


@dataclass(frozen=True)
class ExportConfig:
    """Where and how exported protocols are written."""
    output_dir: Path = Path(".")
    write_payload: bool = False
    """Also write the protocol data payload as JSON next to the PDF."""
    untitled_label: str = c.UNTITLED_PROTOCOL
    generated_on_format: str = c.GENERATED_ON_FORMAT


@dataclass(frozen=True)
class GlobalProtocolConfig:
    """
    Root configuration object for a labprotocol session.
    Instantiated at application startup and treated as immutable.
    """
    catalog_path: Optional[Path] = None
    """Default operation catalog used when none is given on the command line."""

    layout: LayoutConfig = field(default_factory=LayoutConfig)
    export: ExportConfig = field(default_factory=ExportConfig)


def get_default_global_config() -> GlobalProtocolConfig:
    logger.info("Initializing with default GlobalProtocolConfig.")
    return GlobalProtocolConfig()


def get_user_config_file() -> Path:
    return get_labprotocol_config_dir() / GLOBAL_CONFIG_FILE_NAME


def _construct_layout_config(layout_data: Dict[str, Any]) -> LayoutConfig:
    defaults = dataclasses.asdict(LayoutConfig())
    merged = {**defaults, **layout_data}
    for name, value in merged.items():
        if name.endswith("_font") and isinstance(value, dict):
            merged[name] = FontSpec(**value)
    return LayoutConfig(**merged)


def _construct_config_from_data(loaded_data: Dict[str, Any]) -> GlobalProtocolConfig:
    """Merge loaded data over the defaults."""
    layout_data = loaded_data.pop('layout', None) or {}
    export_data = loaded_data.pop('export', None) or {}

    export_args = {**dataclasses.asdict(ExportConfig()), **export_data}
    export_args['output_dir'] = Path(export_args['output_dir']).expanduser()

    catalog_path = loaded_data.get('catalog_path')

    return GlobalProtocolConfig(
        catalog_path=Path(catalog_path).expanduser() if catalog_path else None,
        layout=_construct_layout_config(layout_data),
        export=ExportConfig(**export_args),
    )


def load_global_config(config_file: Optional[Union[str, Path]] = None) -> GlobalProtocolConfig:
    """
    Load the global configuration, falling back to defaults.

    A missing, empty or malformed file is not an error: a warning is logged
    and the default configuration is returned.

    Args:
        config_file: YAML file to read; defaults to the user config file
    """
    config_file = Path(config_file) if config_file else get_user_config_file()
    if not config_file.exists():
        return get_default_global_config()

    logger.info(f"Attempting to load user-defined GlobalProtocolConfig from {config_file}")
    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            loaded_data = yaml.safe_load(f)

        if not loaded_data or not isinstance(loaded_data, dict):
            logger.warning(f"User config file {config_file} is empty or not a valid structure. Using default config.")
            return get_default_global_config()

        config = _construct_config_from_data(loaded_data)
        logger.info("Successfully loaded and applied user-defined GlobalProtocolConfig.")
        return config

    except yaml.YAMLError as e:
        logger.warning(f"Error parsing YAML from {config_file}: {e}. Using default config.")
    except (TypeError, ValueError) as e:
        logger.warning(f"Error constructing GlobalProtocolConfig from {config_file} (likely due to mismatched fields/types): {e}. Using default config.")
    except OSError as e:
        logger.warning(f"Cannot read {config_file}: {e}. Using default config.")
    return get_default_global_config()
