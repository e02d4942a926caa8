"""Fixtures for backend tests."""

from __future__ import annotations

import pytest

from urisolve.backend.app import create_app
from urisolve.backend.config import TestConfig


@pytest.fixture()
def app():
    """Create a test Flask application."""
    application = create_app(TestConfig)
    yield application


@pytest.fixture()
def client(app):
    """Flask test client."""
    return app.test_client()
