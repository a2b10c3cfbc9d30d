"""Dashboard configuration.

Reads the dashboard settings from ~/.worklog-dashboard/config.toml. Every
key is optional; anything missing or unreadable falls back to defaults:

    [dashboard]
    data_url = "https://dec-backend-2.onrender.com/data"
    request_timeout = 30
    title = "Weekly Developer Activity"
    default_color = "#8884d8"
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import toml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "~/.worklog-dashboard/config.toml"

DEFAULTS: Dict[str, Any] = {
    "dashboard": {
        "data_url": "https://dec-backend-2.onrender.com/data",
        "request_timeout": 30,
        "title": "Weekly Developer Activity",
        "default_color": "#8884d8",
    }
}


class DashboardConfig:
    """Settings for the activity dashboard, backed by a toml file."""

    def __init__(self, config_file: Optional[str] = None):
        """Initialize the configuration.

        Args:
            config_file: Path to config.toml. If None, uses
                ~/.worklog-dashboard/config.toml
        """
        if config_file is None:
            config_file = os.path.expanduser(DEFAULT_CONFIG_FILE)

        self.config_file = Path(config_file)
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from config.toml merged over the defaults."""
        config = copy.deepcopy(DEFAULTS)
        if not self.config_file.exists():
            return config

        try:
            with open(self.config_file, 'r') as f:
                loaded = toml.load(f)
        except (OSError, toml.TomlDecodeError) as e:
            logger.warning(f"Ignoring unreadable config file {self.config_file}: {e}")
            return config

        section = loaded.get("dashboard", {})
        if isinstance(section, dict):
            config["dashboard"].update(section)
        return config

    @property
    def data_url(self) -> str:
        return str(self.config["dashboard"]["data_url"])

    @property
    def request_timeout(self) -> float:
        try:
            return float(self.config["dashboard"]["request_timeout"])
        except (TypeError, ValueError):
            return float(DEFAULTS["dashboard"]["request_timeout"])

    @property
    def title(self) -> str:
        return str(self.config["dashboard"]["title"])

    @property
    def default_color(self) -> str:
        return str(self.config["dashboard"]["default_color"])


# Module-level singleton instance
config = DashboardConfig()
