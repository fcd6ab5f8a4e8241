"""
Configuration settings for toolhub.

This module provides a centralized configuration loaded from the environment
or a .env file.
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings
from pydantic import ConfigDict

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """
    Application settings.

    Load configuration from environment variables or .env file.
    """
    # HTTP server settings
    host: str = os.getenv("TOOLHUB_HOST", "0.0.0.0")
    port: int = int(os.getenv("TOOLHUB_PORT", "3000"))

    # Development mode
    debug: bool = os.getenv("TOOLHUB_DEBUG", "False").lower() == "true"

    # Registry settings
    seed_registry: bool = os.getenv("TOOLHUB_SEED_REGISTRY", "True").lower() == "true"

    # Logging settings
    log_level: str = os.getenv("TOOLHUB_LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("TOOLHUB_LOG_FILE", None)
    enable_file_logging: bool = os.getenv("TOOLHUB_ENABLE_FILE_LOGGING", "False").lower() == "true"

    model_config = ConfigDict(
        env_prefix="TOOLHUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    def configure_logging(self, log_level: Optional[str] = None, log_file: Optional[str] = None) -> None:
        """
        Configure logging based on settings.

        Args:
            log_level: Overrides the configured log level
            log_file: Overrides the configured log file
        """
        import logging

        level_name = (log_level or self.log_level).upper()
        level = getattr(logging, level_name, None)
        if not isinstance(level, int):
            level = logging.INFO

        logging_config = {
            'level': level,
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S',
        }

        # An explicit log file always wins; otherwise file logging must be enabled
        target_file = log_file or (self.log_file if self.enable_file_logging else None)
        if target_file:
            logging_config['filename'] = target_file
            logging_config['filemode'] = 'a'

        logging.basicConfig(**logging_config)

        # Set uvicorn access logs to WARNING to reduce noise
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# Create a global settings instance
settings = Settings()


def print_settings(current: Optional[Settings] = None) -> str:
    """
    Generate a printable string of current settings.

    Args:
        current: Settings to render instead of the process-wide ones

    Returns:
        String representation of settings
    """
    lines = ["Current Settings:"]

    for key, value in sorted((current or settings).model_dump().items()):
        if value is None:
            value = "Not set"
        lines.append(f"  {key}: {value}")

    return "\n".join(lines)
