"""Shared test fixtures for the Zoho Books client tests."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from zoho_books_client.zoho import Zoho
from zoho_books_client.zoho_client import ZohoApiClient


@pytest.fixture
def mock_response():
    """Factory for creating mock HTTP responses.

    Usage:
        resp = mock_response(200, {"code": 0, "contact": {...}})
        resp = mock_response(502, text="Bad Gateway")
    """
    def _make(status_code=200, json_data=None, text=None, headers=None):
        response = MagicMock()
        response.status_code = status_code
        if json_data is not None:
            response.json.return_value = json_data
            response.text = text or str(json_data)
        else:
            response.json.side_effect = ValueError("No JSON")
            response.text = text or ""
        response.headers = headers or {}
        return response
    return _make


@pytest.fixture
def api_client():
    """A ZohoApiClient with a static token and a mocked _request method."""
    client = ZohoApiClient(org_id="20000000001", access_token="1000.test-access-token")
    client._request = AsyncMock()
    return client


@pytest.fixture
def mock_api_client():
    """A stand-in for ZohoApiClient whose request() is an AsyncMock.

    Usage:
        def test_something(mock_api_client):
            mock_api_client.request.return_value = {...}
    """
    client = MagicMock(spec=ZohoApiClient)
    client.request = AsyncMock()
    return client


@pytest.fixture
def zoho(mock_api_client):
    return Zoho(mock_api_client)
