"""
Shared fixtures for the challenge tests.

Every outbound call goes through requests.post, so tests patch that one
function and feed it real requests.Response objects built here.
"""

import json

import pytest
import requests
from unittest.mock import patch

from challenge.config.settings import settings

GENERATE_URL = settings.WEBHOOK_GENERATE_URL


def build_response(status_code=200, body=None, url=GENERATE_URL):
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.encoding = "utf-8"

    if body is None:
        response._content = b""
    elif isinstance(body, (bytes, str)):
        response._content = body.encode() if isinstance(body, str) else body
    else:
        response._content = json.dumps(body).encode()

    return response


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def mock_post():
    with patch("challenge.client.webhook.requests.post") as post:
        yield post


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Pin the knobs tests depend on, whatever a local .env says."""
    monkeypatch.setattr(settings, "SUBMIT_TO_RETURNED_WEBHOOK", True)
    monkeypatch.setattr(settings, "CANDIDATE_REG_NO", "REG12347")
    monkeypatch.setattr(settings, "REQUEST_TIMEOUT_SECONDS", 30)
    yield settings
