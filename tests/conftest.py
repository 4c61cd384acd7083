from __future__ import annotations

from typing import Any, List

import pytest

from sfrest.request import Request
from sfrest.session import SessionToken


class FakeTransport:
    """Records every Request and answers from a queue of canned payloads."""

    def __init__(self, responses: List[Any] | None = None):
        self.responses = list(responses or [])
        self.sent: List[Request] = []

    def send(self, request: Request) -> Any:
        self.sent.append(request)
        payload = self.responses.pop(0) if self.responses else None
        if isinstance(payload, Exception):
            raise payload
        return payload


@pytest.fixture
def token() -> SessionToken:
    return SessionToken(
        instance_url="https://example.my.salesforce.com",
        access_token="00DFAKE-TOKEN",
        api_version="v60.0",
    )


@pytest.fixture
def fake_transport():
    """Factory: fake_transport(resp1, resp2, ...)."""

    def make(*responses: Any) -> FakeTransport:
        return FakeTransport(list(responses))

    return make
