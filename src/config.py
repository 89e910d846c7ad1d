"""
Configuration and constants for the IEEE paper formatter.

This module provides:
- Global logging setup
- Upload, server and export settings
- Environment variable overrides
"""

import os
from dataclasses import dataclass, field
from typing import List
import logging

# ============================================================================
# Logging Configuration
# ============================================================================

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger("ieee_formatter")


# ============================================================================
# Processing Configuration
# ============================================================================

@dataclass
class UploadConfig:
    """Upload limits."""
    max_upload_mb: float = 50.0
    allowed_suffixes: List[str] = field(default_factory=lambda: [".docx"])

    @property
    def max_upload_bytes(self) -> int:
        return int(self.max_upload_mb * 1024 * 1024)


@dataclass
class ServerConfig:
    """HTTP API configuration."""
    host: str = "127.0.0.1"
    port: int = 5000
    debug: bool = False
    cors_origins: str = "*"


@dataclass
class ExportConfig:
    """Export configuration."""
    filename: str = "IEEE_Formatted_Document.docx"
    mimetype: str = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


@dataclass
class FormatterConfig:
    """Main configuration."""
    upload: UploadConfig = field(default_factory=UploadConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    export: ExportConfig = field(default_factory=ExportConfig)


# ============================================================================
# Default Configuration Instance
# ============================================================================

def get_config() -> FormatterConfig:
    """Get the default configuration with environment overrides."""
    config = FormatterConfig()

    max_upload = os.environ.get("IEEE_FORMATTER_MAX_UPLOAD_MB")
    if max_upload:
        try:
            config.upload.max_upload_mb = float(max_upload)
        except ValueError:
            logger.warning(f"Ignoring invalid IEEE_FORMATTER_MAX_UPLOAD_MB: {max_upload!r}")

    config.server.host = os.environ.get("IEEE_FORMATTER_HOST", config.server.host)

    port = os.environ.get("IEEE_FORMATTER_PORT")
    if port:
        try:
            config.server.port = int(port)
        except ValueError:
            logger.warning(f"Ignoring invalid IEEE_FORMATTER_PORT: {port!r}")

    if os.environ.get("IEEE_FORMATTER_DEBUG", "").lower() == "true":
        config.server.debug = True

    config.server.cors_origins = os.environ.get(
        "IEEE_FORMATTER_CORS_ORIGINS", config.server.cors_origins
    )

    return config


# ============================================================================
# Schema Version
# ============================================================================

JSON_SCHEMA_VERSION = "1.0"
