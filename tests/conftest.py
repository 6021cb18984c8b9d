"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Settings pointing at the packaged frontend
- Application and test client setup
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.main import create_app
from src.config.settings import Settings


@pytest.fixture
def settings() -> Settings:
    """Settings with packaged defaults."""
    return Settings()


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """Create application from settings."""
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client for the application."""
    return TestClient(app)
