"""
Factorial Service Tests - Test Configuration.

Provides pytest fixtures shared by the API, service and settings tests.
"""

import os
from typing import Iterator

import pytest
from fastapi import FastAPI

os.environ.setdefault("LOG_FILE", "logs/test.log")

from app.core.config import AppSettings, get_app_settings  # noqa: E402
from app.main import create_app  # noqa: E402


@pytest.fixture
def app() -> Iterator[FastAPI]:
    """
    Fresh application instance per test.

    Dependency overrides are cleared on teardown so one test cannot
    leak configuration into another.
    """
    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def limited_app(app: FastAPI) -> FastAPI:
    """
    Application whose operand ceiling is lowered to 10.

    Returns:
        FastAPI app with get_app_settings overridden
    """
    app.dependency_overrides[get_app_settings] = lambda: AppSettings(max_operand=10)
    return app
