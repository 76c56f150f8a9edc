"""
User configuration management for imgcollide.

Supports configuration from multiple sources (in order of priority):
1. Command-line arguments (highest priority)
2. Environment variables
3. User config file (~/.imgcollide/config.json)
4. Default values from config.py (lowest priority)

Example config.json:
{
    "default_side": 10,
    "use_dct": true,
    "default_workers": 4,
    "max_image_pixels": 500000000
}
"""

import json
import os
from pathlib import Path
from typing import Any, Optional
import logging

from .config import (
    CONFIG_DIR,
    DEFAULT_SIDE,
    DEFAULT_USE_DCT,
    DEFAULT_WORKERS,
    MAX_IMAGE_PIXELS,
)

logger = logging.getLogger(__name__)

_TRUE_STRINGS = {'1', 'true', 'yes', 'on'}
_FALSE_STRINGS = {'0', 'false', 'no', 'off'}


def _as_bool(key: str, value: Any, default: bool) -> bool:
    """Coerce a flag read from env or JSON; unrecognized values fall back to default."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    logger.warning(f"Ignoring invalid {key} value {value!r}, using {default}")
    return default


def _as_positive_int(key: str, value: Any, default: int) -> int:
    """Coerce a count read from env or JSON; anything but a positive integer falls back to default."""
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value
    logger.warning(f"Ignoring invalid {key} value {value!r}, using {default}")
    return default


class UserConfig:
    """
    Manages user configuration from file and environment variables.

    The config file is lazy-loaded and cached until reload() is called.
    """

    _instance: Optional['UserConfig'] = None
    _config_data: Optional[dict] = None

    def __new__(cls):
        """Singleton pattern to ensure one config instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def config_dir(self) -> Path:
        """Get the configuration directory path."""
        env_dir = os.getenv('IMGCOLLIDE_CONFIG_DIR')
        if env_dir:
            return Path(env_dir)
        return Path(CONFIG_DIR)

    @property
    def config_file_path(self) -> Path:
        """Get the configuration file path."""
        return self.config_dir / 'config.json'

    def _load_config_file(self) -> dict:
        """Load configuration from JSON file."""
        if not self.config_file_path.exists():
            return {}

        try:
            with open(self.config_file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
                logger.debug(f"Loaded configuration from {self.config_file_path}")
                return data if isinstance(data, dict) else {}
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to load config file {self.config_file_path}: {e}")
            return {}

    def _get_config_data(self) -> dict:
        """Get cached config data (lazy loading)."""
        if self._config_data is None:
            self._config_data = self._load_config_file()
        return self._config_data

    def reload(self):
        """Reload configuration from file."""
        self._config_data = None

    def get(self, key: str, default: Any = None, env_var: Optional[str] = None) -> Any:
        """
        Get a configuration value with priority:
        1. Environment variable (if env_var specified)
        2. Config file
        3. Default value

        Args:
            key: Configuration key
            default: Default value if not found
            env_var: Optional environment variable name to check

        Returns:
            Configuration value
        """
        if env_var:
            env_value = os.getenv(env_var)
            if env_value is not None:
                # Try to parse as JSON so "12" and "false" get their real types
                try:
                    return json.loads(env_value)
                except (json.JSONDecodeError, TypeError):
                    return env_value

        config_data = self._get_config_data()
        if key in config_data:
            return config_data[key]

        return default

    @property
    def default_side(self) -> int:
        """Edge length of the fingerprint bit grid."""
        return self.get('default_side', default=DEFAULT_SIDE, env_var='IMGCOLLIDE_SIDE')

    @property
    def use_dct(self) -> bool:
        """Whether to apply the DCT pre-step."""
        value = self.get('use_dct', default=DEFAULT_USE_DCT, env_var='IMGCOLLIDE_USE_DCT')
        return _as_bool('use_dct', value, DEFAULT_USE_DCT)

    @property
    def default_workers(self) -> int:
        """Number of parallel workers for decoding and hashing."""
        return self.get('default_workers', default=DEFAULT_WORKERS, env_var='IMGCOLLIDE_WORKERS')

    @property
    def max_image_pixels(self) -> int:
        """Maximum image size in pixels (decompression bomb limit)."""
        value = self.get('max_image_pixels', default=MAX_IMAGE_PIXELS, env_var='IMGCOLLIDE_MAX_PIXELS')
        return _as_positive_int('max_image_pixels', value, MAX_IMAGE_PIXELS)

    def hash_config(self, side: Optional[int] = None, use_dct: Optional[bool] = None):
        """
        Build a HashConfig, letting explicit arguments override stored values.

        Raises:
            ConfigError: If the resulting side is not a positive integer
        """
        from .models import HashConfig

        return HashConfig(
            side=self.default_side if side is None else side,
            use_dct=self.use_dct if use_dct is None else use_dct,
        )

    def create_example_config(self) -> bool:
        """Create an example configuration file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

        example_config = {
            "_comment": "imgcollide user configuration",
            "default_side": DEFAULT_SIDE,
            "use_dct": DEFAULT_USE_DCT,
            "default_workers": DEFAULT_WORKERS,
            "max_image_pixels": MAX_IMAGE_PIXELS,
        }

        try:
            with open(self.config_file_path, 'w', encoding='utf-8') as f:
                json.dump(example_config, f, indent=2)
            logger.info(f"Created example config file at {self.config_file_path}")
            return True
        except OSError as e:
            logger.error(f"Failed to create example config: {e}")
            return False


# Global instance
_user_config = UserConfig()


def get_user_config() -> UserConfig:
    """Get the global UserConfig instance."""
    return _user_config
