from __future__ import annotations

from typing import Any, Dict, List, NamedTuple, Union

import pytest

from discord_webhook_client import Response, Route, WebhookClient

WEBHOOK_ID = '223344556677889900'
WEBHOOK_TOKEN = 'aB3-x_Y.z9'


class Call(NamedTuple):
    route: Route
    kwargs: Dict[str, Any]


class FakeTransport:
    """Records every request and answers with queued responses."""

    def __init__(self) -> None:
        self.calls: List[Call] = []
        self.responses: List[Union[Response, Exception]] = []

    def queue(self, status: int, body: Union[bytes, str] = b'', **headers: str) -> None:
        if isinstance(body, str):
            body = body.encode('utf-8')
        self.responses.append(Response(status, body, headers, reason='Test'))

    def fail(self, exc: Exception) -> None:
        self.responses.append(exc)

    def request(self, route: Route, **kwargs: Any) -> Response:
        self.calls.append(Call(route, kwargs))
        if not self.responses:
            return Response(204)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def last(self) -> Call:
        return self.calls[-1]


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def webhook(transport: FakeTransport) -> WebhookClient:
    return WebhookClient(id=WEBHOOK_ID, token=WEBHOOK_TOKEN, transport=transport)


@pytest.fixture
def waiting_webhook(transport: FakeTransport) -> WebhookClient:
    return WebhookClient(id=WEBHOOK_ID, token=WEBHOOK_TOKEN, wait=True, transport=transport)
