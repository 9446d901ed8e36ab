"""
The MIT License (MIT)

Copyright (c) 2025-present Developer Anonymous

Permission is hereby granted, free of charge, to any person obtaining a
copy of this software and associated documentation files (the "Software"),
to deal in the Software without restriction, including without limitation
the rights to use, copy, modify, merge, publish, distribute, sublicense,
and/or sell copies of the Software, and to permit persons to whom the
Software is furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS
OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER
DEALINGS IN THE SOFTWARE.
"""
from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Dict, List, Mapping, Optional, Protocol, Union, runtime_checkable
from urllib.parse import quote as urlquote

import aiohttp

from .errors import TransportError
from .utils import _to_json

__all__ = (
    'Route',
    'Response',
    'Transport',
    'AiohttpTransport',
)

_log = logging.getLogger(__name__)


class Route:
    BASE: str = 'https://discord.com/api'

    def __init__(self, method: str, path: str, *, webhook_id: str, webhook_token: str) -> None:
        self.method: str = method
        self.path: str = path
        self.webhook_id: str = webhook_id
        self.webhook_token: str = webhook_token
        self.url: str = self.BASE + path.format(
            webhook_id=urlquote(webhook_id, safe=''),
            webhook_token=urlquote(webhook_token, safe=''),
        )

    def __repr__(self) -> str:
        # the URL embeds the token, keep it out of reprs and logs
        return f'<Route method={self.method} path={self.path!r} webhook_id={self.webhook_id}>'


class Response:
    """A completed HTTP exchange, independent of the transport that made it.

    Attributes
    ----------
    status: :class:`int`
        The HTTP status code.
    body: :class:`bytes`
        The raw response body.
    headers: Dict[:class:`str`, :class:`str`]
        The response headers.
    reason: :class:`str`
        The HTTP reason phrase.
    """

    __slots__ = ('status', 'body', 'headers', 'reason')

    def __init__(
        self,
        status: int,
        body: bytes = b'',
        headers: Optional[Mapping[str, str]] = None,
        reason: Optional[str] = None,
    ) -> None:
        self.status: int = status
        self.body: bytes = body
        self.headers: Dict[str, str] = dict(headers or {})
        self.reason: str = reason or ''

    def __repr__(self) -> str:
        return f'<Response status={self.status} size={len(self.body)}>'

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def text(self) -> str:
        return self.body.decode('utf-8', errors='replace')

    def json(self) -> Any:
        """Parses the body as JSON. Raises :exc:`ValueError` if it is not JSON."""
        return json.loads(self.text)


@runtime_checkable
class Transport(Protocol):
    """The interface :class:`WebhookClient` uses to talk to Discord.

    Implementations must raise :exc:`TransportError` when no response could be
    obtained and return a :class:`Response` for every HTTP status otherwise.
    """

    def request(
        self,
        route: Route,
        *,
        payload: Optional[Dict[str, Any]] = None,
        multipart: Optional[List[Dict[str, Any]]] = None,
        data: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, str]] = None,
    ) -> Response:
        ...


class AiohttpTransport:
    """A blocking :class:`Transport` backed by :mod:`aiohttp`.

    Each request runs in its own event loop through :func:`asyncio.run` with a
    fresh :class:`aiohttp.ClientSession`, so this must not be called from a
    coroutine running inside an event loop.

    Parameters
    ----------
    timeout: Optional[:class:`float`]
        Total timeout of a request in seconds. ``None`` keeps aiohttp's default.
    verify_tls: :class:`bool`
        Whether to verify the server's TLS certificate. Defaults to ``True``.
    """

    def __init__(self, *, timeout: Optional[float] = None, verify_tls: bool = True) -> None:
        self.timeout: Optional[float] = timeout
        self.verify_tls: bool = verify_tls

    def request(
        self,
        route: Route,
        *,
        payload: Optional[Dict[str, Any]] = None,
        multipart: Optional[List[Dict[str, Any]]] = None,
        data: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, str]] = None,
    ) -> Response:
        return asyncio.run(
            self._request(route, payload=payload, multipart=multipart, data=data, headers=headers, params=params)
        )

    async def _request(
        self,
        route: Route,
        *,
        payload: Optional[Dict[str, Any]],
        multipart: Optional[List[Dict[str, Any]]],
        data: Optional[str],
        headers: Optional[Dict[str, str]],
        params: Optional[Dict[str, str]],
    ) -> Response:
        headers = dict(headers or {})
        to_send: Optional[Union[str, aiohttp.FormData]] = data

        if payload is not None:
            headers['Content-Type'] = 'application/json'
            to_send = _to_json(payload)

        if multipart:
            form_data = aiohttp.FormData(quote_fields=False)
            for p in multipart:
                form_data.add_field(**p)
            to_send = form_data

        kwargs: Dict[str, Any] = {'connector': aiohttp.TCPConnector(ssl=self.verify_tls)}
        if self.timeout is not None:
            kwargs['timeout'] = aiohttp.ClientTimeout(total=self.timeout)

        try:
            async with aiohttp.ClientSession(**kwargs) as session:
                async with session.request(
                    route.method, route.url, data=to_send, headers=headers, params=params
                ) as response:
                    body = await response.read()
                    _log.debug(
                        'Webhook ID %s with %s %s has returned status code %s',
                        route.webhook_id,
                        route.method,
                        route.path,
                        response.status,
                    )
                    return Response(response.status, body, response.headers, response.reason)
        except asyncio.TimeoutError as exc:
            _log.debug('Webhook ID %s with %s %s timed out', route.webhook_id, route.method, route.path)
            raise TransportError(f'{route.method} request to webhook {route.webhook_id} timed out', exc) from exc
        except aiohttp.ClientError as exc:
            _log.debug(
                'Webhook ID %s with %s %s failed: %s', route.webhook_id, route.method, route.path, exc
            )
            raise TransportError(f'{route.method} request to webhook {route.webhook_id} failed: {exc}', exc) from exc
