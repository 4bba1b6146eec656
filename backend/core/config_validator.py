"""
Configuration validation for the transcript service.
Validates outbound HTTP, caption and API settings on startup.
"""
import logging
from typing import List, Dict, Any
from urllib.parse import urlparse


class ConfigValidator:
    """Validates system configuration before serving requests."""

    def __init__(self):
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def validate_all(self) -> Dict[str, Any]:
        """
        Run all validation checks.

        Returns:
            {
                "valid": bool,
                "errors": List[str],
                "warnings": List[str]
            }
        """
        self.errors = []
        self.warnings = []

        self._validate_url_templates()
        self._validate_http_settings()
        self._validate_caption_settings()
        self._validate_logging()
        self._validate_cors()

        return {
            "valid": len(self.errors) == 0,
            "errors": self.errors,
            "warnings": self.warnings
        }

    def _validate_url_templates(self):
        """Check that YouTube URL templates are usable."""
        from core import config

        templates = {
            "YOUTUBE_WATCH_URL": config.YOUTUBE_WATCH_URL,
            "YOUTUBE_THUMBNAIL_URL": config.YOUTUBE_THUMBNAIL_URL,
        }

        for name, template in templates.items():
            parsed = urlparse(template)
            if parsed.scheme not in ("http", "https") or not parsed.netloc:
                self.errors.append(
                    f"{name} must be an http(s) URL, got: {template!r}"
                )
            if "{video_id}" not in template:
                self.errors.append(
                    f"{name} must contain a {{video_id}} placeholder, got: {template!r}"
                )

    def _validate_http_settings(self):
        """Check outbound request settings."""
        from core import config

        if config.HTTP_TIMEOUT_SEC <= 0:
            self.errors.append(
                f"HTTP_TIMEOUT_SEC must be positive, got: {config.HTTP_TIMEOUT_SEC}"
            )
        elif config.HTTP_TIMEOUT_SEC > 120:
            self.warnings.append(
                f"HTTP_TIMEOUT_SEC is unusually high ({config.HTTP_TIMEOUT_SEC}s); "
                "slow upstream calls will hold request workers"
            )

        if not config.YOUTUBE_USER_AGENT.strip():
            self.warnings.append(
                "YOUTUBE_USER_AGENT is empty; YouTube may serve a consent page instead"
            )

    def _validate_caption_settings(self):
        """Check caption selection and search settings."""
        from core import config

        if not config.PREFERRED_CAPTION_LANGUAGE.strip():
            self.errors.append("PREFERRED_CAPTION_LANGUAGE must not be empty")

        if config.SEARCH_CONTEXT_CHARS < 0:
            self.errors.append(
                f"SEARCH_CONTEXT_CHARS must be >= 0, got: {config.SEARCH_CONTEXT_CHARS}"
            )

    def _validate_logging(self):
        """Check that LOG_LEVEL names a logging level."""
        from core import config

        if not isinstance(logging.getLevelName(config.LOG_LEVEL), int):
            self.errors.append(
                f"LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL, "
                f"got: {config.LOG_LEVEL!r}"
            )

    def _validate_cors(self):
        """Warn about fully open CORS."""
        from core import config

        if not config.CORS_ORIGINS:
            self.errors.append("CORS_ORIGINS must list at least one origin (or '*')")
        elif "*" in config.CORS_ORIGINS:
            self.warnings.append("CORS is open to all origins ('*')")


# Global validator instance
config_validator = ConfigValidator()
