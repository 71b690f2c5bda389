"""Shared fixtures: fake HTTP responses, a controllable clock and test credentials."""

import io
import json

import pytest
import requests

from n26.models import ClientConfig, Credentials

DEVICE_TOKEN = "f2b3c5d8-1a2b-4c3d-9e8f-0a1b2c3d4e5f"


class RawBody(io.BytesIO):
    """Stand-in for the urllib3 body requests exposes as `response.raw`."""
    decode_content = False


def make_response(status_code=200, json_body=None, body=b"", url="https://api.tech26.de/"):
    """Build a real requests.Response whose body is read from memory."""
    if json_body is not None:
        body = json.dumps(json_body).encode()
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.raw = RawBody(body)
    return response


class FakeClock:
    """Monotonic clock that only moves when `sleep` is called."""

    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.now += seconds


@pytest.fixture
def credentials():
    return Credentials(username="jane@example.com", password="hunter2", device_token=DEVICE_TOKEN)


@pytest.fixture
def config():
    return ClientConfig(mfa_poll_interval=5, mfa_timeout=120)


@pytest.fixture
def clock():
    return FakeClock()
