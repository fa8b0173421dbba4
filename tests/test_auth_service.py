"""Tests for the authentication call."""

from __future__ import annotations

import pytest

from conftest import FakeResponse
from vanledger.errors import NetworkError
from vanledger.services.auth import authenticate


@pytest.mark.parametrize(
    "body, expected",
    [
        ("true", True),
        ("false", False),
        ("True", True),
        ('{"token": "abc"}', True),
        ("{}", False),
        ("", False),
        ("welcome", False),
    ],
)
def test_response_body_decides(api_client, fake_session, body, expected):
    fake_session.queue(FakeResponse(200, text=body))

    assert authenticate(api_client, name="admin", password="secret") is expected


def test_posts_credentials(api_client, fake_session):
    fake_session.queue(FakeResponse(200, text="true"))

    authenticate(api_client, name="  admin ", password="secret")

    call = fake_session.calls[0]
    assert call["method"] == "POST"
    assert call["url"].endswith("/authenticate")
    assert call["json"] == {"name": "admin", "password": "secret"}


def test_blank_credentials_skip_the_request(api_client, fake_session):
    assert authenticate(api_client, name="", password="x") is False
    assert authenticate(api_client, name="admin", password="") is False
    assert fake_session.calls == []


def test_server_error_propagates(api_client, fake_session):
    fake_session.queue(FakeResponse(401, text="unauthorized"))

    with pytest.raises(NetworkError):
        authenticate(api_client, name="admin", password="wrong")
