"""Application configuration loaded from environment variables."""

from __future__ import annotations

import os


class Config:
    """Default configuration for the Flask backend."""

    SECRET_KEY = os.getenv("SECRET_KEY", "dev-key-change-in-prod")
    DEBUG = os.getenv("FLASK_DEBUG", "0") == "1"

    # CORS: origins allowed to call this API
    CORS_ORIGINS = os.getenv(
        "CORS_ORIGINS", "http://localhost:*",
    ).split(",")

    # Base used when a resolve request carries none
    DEFAULT_BASE = os.getenv("URISOLVE_DEFAULT_BASE", "")

    # Upper bound on references per batch request
    MAX_REFERENCES = int(os.getenv("URISOLVE_MAX_REFERENCES", "1000"))


class TestConfig(Config):
    """Configuration overrides for testing."""

    TESTING = True
    DEFAULT_BASE = "http://example.org/base/doc"
    MAX_REFERENCES = 5
