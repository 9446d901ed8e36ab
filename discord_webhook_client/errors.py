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

from typing import TYPE_CHECKING, Any, Optional

import discord

if TYPE_CHECKING:
    from .http import Response

__all__ = (
    'WebhookException',
    'ConfigurationError',
    'ValidationError',
    'TransportError',
    'RemoteError',
)


class WebhookException(discord.DiscordException):
    """Base exception class for this library.

    Subclasses :exc:`discord.DiscordException`, so handlers written for
    discord.py catch these as well.
    """

    pass


class ConfigurationError(WebhookException):
    """Raised when a :class:`WebhookClient` is constructed from a malformed
    webhook URL or without an ID and token.
    """

    pass


class ValidationError(WebhookException, ValueError):
    """Raised when the parameters passed to an operation are invalid.

    Nothing has been sent to Discord when this is raised.
    """

    pass


class TransportError(WebhookException):
    """Raised when the request could not be delivered, because the connection
    failed, timed out, or TLS verification failed.

    Attributes
    ----------
    original: :class:`Exception`
        The exception raised by the underlying HTTP library.
    """

    def __init__(self, message: str, original: Exception) -> None:
        self.original: Exception = original
        super().__init__(message)


class RemoteError(WebhookException):
    """Raised when Discord answers with an unsuccessful response.

    Attributes
    ----------
    response: :class:`Response`
        The response that was received.
    status: :class:`int`
        The HTTP status code of the response.
    text: :class:`str`
        The raw body of the response.
    code: :class:`int`
        The Discord specific error code, ``0`` if the body did not carry one.
    message: :class:`str`
        The error message Discord sent, if any.
    """

    def __init__(self, response: Response, message: Optional[str] = None) -> None:
        self.response: Response = response
        self.status: int = response.status
        self.text: str = response.text
        self.code: int = 0
        self.message: str = ''

        data: Any
        try:
            data = response.json()
        except ValueError:
            data = None

        if isinstance(data, dict):
            self.code = data.get('code', 0)
            self.message = data.get('message', '')

        fmt = '{0} (status code: {1})'
        if message is None:
            message = self.message or self.text
        if message:
            fmt += ': {2}'

        super().__init__(fmt.format(response.reason, self.status, message))
