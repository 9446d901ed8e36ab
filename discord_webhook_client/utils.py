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

import base64
import re
from typing import Any, Tuple

import discord

__all__ = (
    'MISSING',
    'parse_webhook_url',
)

MISSING: Any = discord.utils.MISSING

_WEBHOOK_URL_RE = re.compile(
    r'/webhooks/(?P<id>[^/?#\s]+)/(?P<token>[^/?#\s]+)/?(?:[?#]\S*)?$'
)


def parse_webhook_url(url: str) -> Tuple[str, str]:
    """Extracts the webhook ID and token from a full webhook URL.

    Parameters
    ----------
    url: :class:`str`
        A URL of the form ``https://discord.com/api/webhooks/{id}/{token}``.

    Raises
    ------
    ValueError
        The URL does not end with ``webhooks/{id}/{token}``.

    Returns
    -------
    Tuple[:class:`str`, :class:`str`]
        The webhook ID and token.
    """
    m = _WEBHOOK_URL_RE.search(url.strip())
    if m is None:
        raise ValueError(f'{url!r} is not a valid webhook URL')
    return m.group('id'), m.group('token')


def _to_json(obj: Any) -> str:
    return discord.utils._to_json(obj)


def _get_mime_type_for_image(data: bytes) -> str:
    if data.startswith(b'\x89\x50\x4E\x47\x0D\x0A\x1A\x0A'):
        return 'image/png'
    elif data[0:3] == b'\xff\xd8\xff' or data[6:10] in (b'JFIF', b'Exif'):
        return 'image/jpeg'
    elif data.startswith((b'\x47\x49\x46\x38\x37\x61', b'\x47\x49\x46\x38\x39\x61')):
        return 'image/gif'
    elif data.startswith(b'RIFF') and data[8:12] == b'WEBP':
        return 'image/webp'
    else:
        return 'image/unknown'


def _bytes_to_base64_data(data: bytes) -> str:
    mime = _get_mime_type_for_image(data)
    b64 = base64.b64encode(data).decode('ascii')
    return f'data:{mime};base64,{b64}'
