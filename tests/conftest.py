"""Shared fixtures for the xing_api tests."""
from unittest import mock

import pytest

from xing_api import Client, reset_configuration


@pytest.fixture(autouse=True)
def clean_configuration():
    """Start every test without process-wide defaults."""
    reset_configuration()
    yield
    reset_configuration()


@pytest.fixture
def client():
    return Client()


def _response(body="{}", status_code=200):
    return mock.Mock(status_code=status_code, text=body)


@pytest.fixture
def access_token(client):
    """Replace the client's access token with a mock returning an empty JSON body."""
    token = mock.Mock()
    token.request.return_value = _response()
    with mock.patch.object(Client, 'access_token', new_callable=mock.PropertyMock, return_value=token):
        yield token


@pytest.fixture
def make_response():
    """Build a fake transport response."""
    return _response
