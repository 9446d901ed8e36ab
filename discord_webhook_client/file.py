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

from typing import Any, Dict, Union

import discord

__all__ = (
    'Attachment',
)


class Attachment:
    """A file to upload alongside a webhook message.

    Parameters
    ----------
    name: :class:`str`
        The filename to display when uploading to Discord.
    data: :class:`bytes`
        The raw contents of the file.
    """

    __slots__ = ('name', 'data')

    def __init__(self, name: str, data: Union[bytes, bytearray, memoryview]) -> None:
        if not name:
            raise ValueError('attachment name must be a non-empty string')
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f'expected bytes-like attachment data, not {data.__class__.__name__}')

        self.name: str = name
        self.data: bytes = bytes(data)

    def __repr__(self) -> str:
        return f'<Attachment name={self.name!r} size={len(self.data)}>'

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Attachment) and self.name == other.name and self.data == other.data

    @classmethod
    def from_file(cls, file: discord.File) -> Attachment:
        """Reads a :class:`discord.File` into an :class:`Attachment`.

        The file is read from its current position and left open.
        """
        return cls(file.filename or 'untitled', file.fp.read())

    def to_form(self, index: int) -> Dict[str, Any]:
        return {
            'name': f'files[{index}]',
            'value': self.data,
            'filename': self.name,
            'content_type': 'application/octet-stream',
        }


def _to_attachment(obj: Any) -> Attachment:
    if isinstance(obj, Attachment):
        return obj
    if isinstance(obj, discord.File):
        return Attachment.from_file(obj)
    if isinstance(obj, dict):
        try:
            return Attachment(obj['name'], obj['data'])
        except KeyError as exc:
            raise TypeError(f'attachment mapping is missing the {exc.args[0]!r} key') from None
    if isinstance(obj, tuple) and len(obj) == 2:
        return Attachment(*obj)

    raise TypeError(f'expected Attachment, discord.File or (name, data) pair, not {obj.__class__.__name__}')
