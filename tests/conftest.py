"""
Shared fixtures for the 3taps client tests.

FakeTransport stands in for HttpClient: it records every call and answers
with a canned HttpResponse, so no test touches the network.
"""

import pytest

from threetaps.client import ThreeTapsClient
from threetaps.http_client import HttpResponse


class FakeTransport:
    def __init__(self, status_code: int = 200, text: str = "{}", reason: str = "OK"):
        self.response = HttpResponse(status_code=status_code, reason=reason, text=text)
        self.calls = []

    def get(self, url):
        self.calls.append(("GET", url, None))
        return self.response

    def post(self, url, data):
        self.calls.append(("POST", url, data))
        return self.response


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def client(transport: FakeTransport) -> ThreeTapsClient:
    return ThreeTapsClient(transport=transport)


@pytest.fixture
def make_client():
    """Build a client around a FakeTransport answering with the given response."""

    def _make(status_code=200, text="{}", reason="OK", **kwargs):
        fake = FakeTransport(status_code=status_code, text=text, reason=reason)
        return ThreeTapsClient(transport=fake, **kwargs), fake

    return _make
