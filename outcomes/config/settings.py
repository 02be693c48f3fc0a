"""
Package settings and configuration.

Values are read from the environment (and a .env file, if present).
"""

import os
from typing import Optional, Dict, Any
from dotenv import load_dotenv
from ..core.logging_config import DEFAULT_FORMAT, get_logger

load_dotenv()

logger = get_logger(__name__)

_LEVEL_NAMES = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class Settings:
    """
    Package settings.

    Centralizes logging and pipeline defaults.
    """

    def __init__(self):
        """Initialize settings from environment and defaults."""
        # Logging Settings
        self.log_level = os.getenv('OUTCOMES_LOG_LEVEL', 'INFO')
        self.log_format = os.getenv('OUTCOMES_LOG_FORMAT', DEFAULT_FORMAT)
        self.log_file = os.getenv('OUTCOMES_LOG_FILE') or None

        # Pipeline Settings
        self.pipeline_strict = os.getenv('OUTCOMES_PIPELINE_STRICT', 'false').lower() == 'true'
        self.pipeline_name = os.getenv('OUTCOMES_PIPELINE_NAME', 'pipeline')

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (supports dot notation)
            default: Default value if not found

        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self

        for k in keys:
            if hasattr(value, k):
                value = getattr(value, k)
            else:
                return default

        return value if value is not None else default

    def validate(self) -> bool:
        """
        Validate settings.

        Returns:
            True if the log level is a known logging level name
        """
        if self.log_level.upper() not in _LEVEL_NAMES:
            logger.warning(f"Unknown log level: {self.log_level}")
            return False
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            'log_level': self.log_level,
            'log_format': self.log_format,
            'log_file': self.log_file,
            'pipeline_strict': self.pipeline_strict,
            'pipeline_name': self.pipeline_name,
        }


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Optional[Settings]):
    """Set the global settings instance (useful for testing)."""
    global _settings
    _settings = settings
