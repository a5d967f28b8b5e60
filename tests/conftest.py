"""Pytest configuration and fixtures."""

import pytest
from dotenv import load_dotenv

# Load test environment variables before importing any application code
load_dotenv(".env.test", override=True)

import httpx  # noqa: E402


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with no network access")


@pytest.fixture
def sample_media_record():
    """Media record as returned by GET media."""
    return {
        "id": "m1",
        "groupIds": ["g1", "g2"],
        "url": "https://cdn.example.com/m1.mp4",
        "name": "Lobby loop",
        "status": "READY",
        "processingError": None,
        "createdAt": "2026-01-10T09:00:00.000Z",
        "updatedAt": "2026-01-10T09:05:00.000Z",
    }


@pytest.fixture
def legacy_media_record():
    """Media record from before multi-group assignment."""
    return {
        "id": "m-legacy",
        "groupId": "g7",
        "url": None,
        "name": None,
        "status": "PENDING",
        "processingError": None,
    }


@pytest.fixture
def make_response():
    """Build a real httpx.Response for a given status and JSON body."""

    def _make(status_code, json_body=None, text=None):
        request = httpx.Request("GET", "http://signage.test/api/media")
        if text is not None:
            return httpx.Response(status_code, text=text, request=request)
        if json_body is None:
            return httpx.Response(status_code, request=request)
        return httpx.Response(status_code, json=json_body, request=request)

    return _make
