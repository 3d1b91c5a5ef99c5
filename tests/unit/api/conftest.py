"""
Common fixtures for API unit tests.

Provides shared test utilities:
- FastAPI apps built with an injected in-memory repository
- TestClient for disk and inline resume storage
- Sample form data and resume files
"""

import io
from dataclasses import replace

import pytest
from fastapi.testclient import TestClient

from src.api.main import create_app


@pytest.fixture
def app(disk_settings, in_memory_repository):
    """App with disk resume storage and in-memory repository."""
    return create_app(settings=disk_settings, repository=in_memory_repository)


@pytest.fixture
def client(app):
    """
    FastAPI TestClient for testing endpoints.

    Used as a context manager so the lifespan runs.
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def inline_client(inline_settings, in_memory_repository):
    """TestClient for an app storing resumes inline."""
    app = create_app(settings=inline_settings, repository=in_memory_repository)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def dev_client(disk_settings, in_memory_repository):
    """TestClient for an app running in development mode (error detail exposed)."""
    settings = replace(disk_settings, environment="development")
    app = create_app(settings=settings, repository=in_memory_repository)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def valid_form():
    """Minimal valid submission form."""
    return {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "mobile": "+1 555 0100",
        "message": "Looking forward to hearing from you.",
    }


@pytest.fixture
def resume_file():
    """Small PDF-like resume upload tuple for TestClient."""
    content = b"%PDF-1.4\n" + b"0" * 1024
    return ("jane_cv.pdf", io.BytesIO(content), "application/pdf")
