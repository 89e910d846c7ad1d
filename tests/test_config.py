"""
Tests for configuration defaults and environment overrides.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


class TestConfig:
    """Test get_config."""

    def test_defaults(self, monkeypatch):
        """Test default values."""
        for name in ["MAX_UPLOAD_MB", "HOST", "PORT", "DEBUG", "CORS_ORIGINS"]:
            monkeypatch.delenv(f"IEEE_FORMATTER_{name}", raising=False)
        from config import get_config

        config = get_config()

        assert config.upload.max_upload_mb == 50.0
        assert config.upload.max_upload_bytes == 50 * 1024 * 1024
        assert config.server.port == 5000
        assert config.server.debug is False
        assert config.export.filename == "IEEE_Formatted_Document.docx"

    def test_env_overrides(self, monkeypatch):
        """Test environment variables override defaults."""
        monkeypatch.setenv("IEEE_FORMATTER_MAX_UPLOAD_MB", "2")
        monkeypatch.setenv("IEEE_FORMATTER_HOST", "0.0.0.0")
        monkeypatch.setenv("IEEE_FORMATTER_PORT", "8080")
        monkeypatch.setenv("IEEE_FORMATTER_DEBUG", "TRUE")
        monkeypatch.setenv("IEEE_FORMATTER_CORS_ORIGINS", "http://localhost:3000")
        from config import get_config

        config = get_config()

        assert config.upload.max_upload_bytes == 2 * 1024 * 1024
        assert config.server.host == "0.0.0.0"
        assert config.server.port == 8080
        assert config.server.debug is True
        assert config.server.cors_origins == "http://localhost:3000"

    def test_invalid_values_ignored(self, monkeypatch):
        """Test unparsable numbers fall back to defaults."""
        monkeypatch.setenv("IEEE_FORMATTER_MAX_UPLOAD_MB", "lots")
        monkeypatch.setenv("IEEE_FORMATTER_PORT", "http")
        from config import get_config

        config = get_config()

        assert config.upload.max_upload_mb == 50.0
        assert config.server.port == 5000
