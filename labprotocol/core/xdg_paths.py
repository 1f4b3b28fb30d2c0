"""
XDG-style directory locations for labprotocol.

- Data: ~/.local/share/labprotocol/
- Logs: ~/.local/share/labprotocol/logs/
- Config: ~/.config/labprotocol/
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def get_labprotocol_data_dir() -> Path:
    """
    Get the labprotocol data directory, creating it if needed.

    Returns:
        Path to ~/.local/share/labprotocol/
    """
    data_dir = Path.home() / ".local" / "share" / "labprotocol"
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_labprotocol_log_dir() -> Path:
    log_dir = get_labprotocol_data_dir() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def get_labprotocol_config_dir() -> Path:
    """
    Get the user config directory. Not created: it only ever holds files the
    user writes by hand.

    Returns:
        Path to ~/.config/labprotocol/
    """
    return Path.home() / ".config" / "labprotocol"
