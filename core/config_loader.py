import logging
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

logger = logging.getLogger(__name__)

# Inclusive bounds for numeric model parameters (None = unbounded)
PARAM_BOUNDS = {
    "temperature": (0.0, 1.0),
    "top_p": (0.0, 1.0),
    "top_k": (0, None),
    "max_tokens": (1, None),
}


class ConfigLoader:
    """Loads and tracks configuration file with hot reload support."""

    def __init__(self, config_path: str):
        self.config_path = Path(config_path)
        self.config: Optional[Dict[str, Any]] = None
        self.last_mtime: Optional[float] = None

    def load(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        with open(self.config_path, 'r') as f:
            config = yaml.safe_load(f) or {}

        if not isinstance(config, dict):
            raise ValueError(f"Config root must be a mapping: {self.config_path}")

        self.validate(config)

        self.config = config
        self.last_mtime = self.config_path.stat().st_mtime
        return config

    @staticmethod
    def validate(config: Dict[str, Any]) -> None:
        """Check required model parameters are present and in range."""
        for field, (low, high) in PARAM_BOUNDS.items():
            if field not in config:
                raise ValueError(f"Missing required config field: {field}")

            value = config[field]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Config field {field} must be a number, got {value!r}")
            if field in ("top_k", "max_tokens") and not isinstance(value, int):
                raise ValueError(f"Config field {field} must be an integer, got {value!r}")
            if value < low or (high is not None and value > high):
                bound = f"[{low}, {high}]" if high is not None else f">= {low}"
                raise ValueError(f"Config field {field}={value} out of range {bound}")

    def check_and_reload(self) -> tuple[bool, Optional[Dict[str, Any]]]:
        """
        Check if config file has been modified and reload if necessary.

        Returns:
            Tuple of (was_reloaded: bool, config: Optional[Dict])
        """
        if not self.config_path.exists():
            return False, self.config

        current_mtime = self.config_path.stat().st_mtime

        # First load or file has been modified
        if self.last_mtime is None or current_mtime > self.last_mtime:
            try:
                config = self.load()
                return True, config
            except (OSError, ValueError, yaml.YAMLError) as e:
                logger.error(f"Error reloading config: {e}")
                # Don't retry the same broken file on every turn
                self.last_mtime = current_mtime
                return False, self.config

        return False, self.config

    def get_config(self) -> Dict[str, Any]:
        """Get current configuration."""
        if self.config is None:
            self.load()
        return self.config
