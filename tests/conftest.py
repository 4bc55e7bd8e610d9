"""
Shared fixtures for the MyDNSHost client tests.
"""

from unittest.mock import MagicMock, patch

import pytest

from mydnshost import MyDNSHostAPI


BASE_URL = "https://api.example.test/"


def make_response(json_data=None, text=None, status_code=200):
    """Create a mock requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    if json_data is None:
        response.json.side_effect = ValueError("No JSON object could be decoded")
        response.text = text if text is not None else ""
    else:
        response.json.return_value = json_data
        response.text = text if text is not None else "<json>"
    return response


@pytest.fixture
def mock_request():
    """Patch requests.Session.request and return the mock."""
    with patch("requests.Session.request") as mock:
        mock.return_value = make_response({"response": {}})
        yield mock


@pytest.fixture
def client():
    """Create an unauthenticated client."""
    with MyDNSHostAPI(BASE_URL) as api:
        yield api


@pytest.fixture
def authed_client(client):
    """Create a client authenticated with a user API key."""
    client.set_auth_user_key("admin@example.com", "APIKEY")
    return client


def sent(mock):
    """Return the keyword arguments of the last request."""
    return mock.call_args.kwargs
