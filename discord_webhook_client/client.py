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

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

import discord

from .errors import ConfigurationError, RemoteError, ValidationError
from .file import Attachment, _to_attachment
from .http import AiohttpTransport, Route, Response, Transport
from .utils import MISSING, _bytes_to_base64_data, _to_json, parse_webhook_url

if TYPE_CHECKING:
    from .types.webhook import (
        EditWebhook as EditWebhookPayload,
        ExecuteWebhook as ExecuteWebhookPayload,
        Message as MessagePayload,
        Webhook as WebhookPayload,
    )

    AttachmentLike = Union[Attachment, discord.File, Tuple[str, bytes], Mapping[str, Any]]
    EmbedLike = Union[discord.Embed, Mapping[str, Any]]

_log = logging.getLogger(__name__)

__all__ = (
    'WebhookClient',
)

MAX_ATTACHMENTS = 10
MAX_EMBEDS = 10


class WebhookClient:
    """Represents a Discord webhook that can be fetched, edited, deleted and
    used to send messages.

    The client is created either from the full webhook URL or from the
    webhook ID and token. No request is made until an operation is called.

    .. code-block:: python3

        webhook = WebhookClient('https://discord.com/api/webhooks/1234/abcd', wait=True)
        message = webhook.execute('Hello World')

    Parameters
    ----------
    url: :class:`str`
        The full webhook URL. Cannot be mixed with ``id`` and ``token``.
    id: :class:`str`
        The webhook ID.
    token: :class:`str`
        The webhook token.
    timeout: Optional[:class:`float`]
        The total timeout of each request, in seconds. Defaults to the
        transport's own default.
    verify_tls: :class:`bool`
        Whether to verify Discord's TLS certificate. Defaults to ``True``.
    wait: :class:`bool`
        Whether :meth:`execute` and friends should wait for Discord to confirm
        the message was posted. Defaults to ``False``.
    transport: :class:`Transport`
        The object used to send requests. Defaults to an
        :class:`AiohttpTransport` configured with ``timeout`` and ``verify_tls``.

    Attributes
    ----------
    guild_id: Optional[:class:`str`]
        The guild ID this webhook belongs to. ``None`` until fetched.
    channel_id: Optional[:class:`str`]
        The channel ID this webhook posts to. ``None`` until fetched.
    name: Optional[:class:`str`]
        The default name of the webhook. ``None`` until fetched.
    avatar: Optional[:class:`str`]
        The default avatar hash of the webhook. ``None`` until fetched.

    Raises
    ------
    ConfigurationError
        The URL is malformed or the ID and token are missing.
    """

    __slots__ = (
        '_id',
        '_token',
        '_timeout',
        '_verify_tls',
        '_wait',
        '_transport',
        'guild_id',
        'channel_id',
        'name',
        'avatar',
    )

    _CONFIG_KEYS = frozenset(('id', 'token', 'url', 'timeout', 'verify_tls', 'wait'))
    _CACHED_FIELDS = ('guild_id', 'channel_id', 'name', 'avatar')

    def __init__(
        self,
        url: str = MISSING,
        *,
        id: Union[str, int] = MISSING,
        token: str = MISSING,
        timeout: Optional[float] = None,
        verify_tls: bool = True,
        wait: bool = False,
        transport: Transport = MISSING,
    ) -> None:
        if url is not MISSING:
            if id is not MISSING or token is not MISSING:
                raise ConfigurationError('url cannot be mixed with id and token')
            if not isinstance(url, str):
                raise ConfigurationError(f'expected url to be str not {url.__class__.__name__}')
            try:
                id, token = parse_webhook_url(url)
            except ValueError as exc:
                raise ConfigurationError(str(exc)) from None

        if isinstance(id, int) and not isinstance(id, bool):
            id = str(id)

        if not id or not isinstance(id, str):
            raise ConfigurationError('a webhook url or a non-empty id is required')
        if not token or not isinstance(token, str):
            raise ConfigurationError('a webhook url or a non-empty token is required')

        if timeout is not None:
            if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
                raise ConfigurationError(f'timeout must be a positive number, got {timeout!r}')

        self._id: str = id
        self._token: str = token
        self._timeout: Optional[float] = timeout
        self._verify_tls: bool = bool(verify_tls)
        self._wait: bool = bool(wait)

        if transport is MISSING:
            transport = AiohttpTransport(timeout=timeout, verify_tls=self._verify_tls)
        self._transport: Transport = transport

        self.guild_id: Optional[str] = None
        self.channel_id: Optional[str] = None
        self.name: Optional[str] = None
        self.avatar: Optional[str] = None

    @classmethod
    def from_url(cls, url: str, **options: Any) -> WebhookClient:
        """Creates a client from a full webhook URL.

        Other keyword arguments are passed to the constructor.
        """
        return cls(url, **options)

    @classmethod
    def from_config(cls, config: Mapping[str, Any], *, transport: Transport = MISSING) -> WebhookClient:
        """Creates a client from a configuration mapping.

        Recognised keys are ``url``, ``id``, ``token``, ``timeout``,
        ``verify_tls`` and ``wait``.

        Raises
        ------
        ConfigurationError
            An unknown key was given, or the mapping does not identify a webhook.
        """
        unknown = set(config) - cls._CONFIG_KEYS
        if unknown:
            raise ConfigurationError(f'unrecognised webhook options: {", ".join(sorted(unknown))}')

        options = dict(config)
        url = options.pop('url', MISSING)
        return cls(url, transport=transport, **options)

    def __repr__(self) -> str:
        return f'<WebhookClient id={self._id!r} name={self.name!r} wait={self._wait}>'

    @property
    def id(self) -> str:
        """:class:`str`: The webhook ID."""
        return self._id

    @property
    def token(self) -> str:
        """:class:`str`: The webhook token."""
        return self._token

    @property
    def url(self) -> str:
        """:class:`str`: The base URL of this webhook, token included."""
        return self._route('GET').url

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    @property
    def verify_tls(self) -> bool:
        return self._verify_tls

    @property
    def wait(self) -> bool:
        """:class:`bool`: Whether messages are sent waiting for confirmation."""
        return self._wait

    @property
    def transport(self) -> Transport:
        return self._transport

    def _route(self, method: str, suffix: str = '') -> Route:
        return Route(
            method,
            '/webhooks/{webhook_id}/{webhook_token}' + suffix,
            webhook_id=self._id,
            webhook_token=self._token,
        )

    def _wait_params(self) -> Optional[Dict[str, str]]:
        return {'wait': 'true'} if self._wait else None

    def _update(self, data: Mapping[str, Any]) -> None:
        for key in self._CACHED_FIELDS:
            if key in data:
                setattr(self, key, data[key])

    def _parse_json(self, response: Response) -> Any:
        if not response.ok:
            raise RemoteError(response)
        try:
            return response.json()
        except ValueError:
            raise RemoteError(response, 'response body is not valid JSON') from None

    def _parse_webhook(self, response: Response) -> WebhookPayload:
        data = self._parse_json(response)
        if not isinstance(data, dict):
            raise RemoteError(response, 'expected a webhook object')
        self._update(data)
        return data  # type: ignore

    def get(self) -> WebhookPayload:
        """Fetches the webhook and refreshes the cached metadata.

        Raises
        ------
        RemoteError
            Discord answered with an unsuccessful status.
        TransportError
            The request could not be delivered.

        Returns
        -------
        Dict[:class:`str`, Any]
            The webhook object returned by Discord.
        """
        response = self._transport.request(self._route('GET'))
        return self._parse_webhook(response)

    def modify(self, name: str = MISSING, *, avatar: Optional[bytes] = MISSING) -> WebhookPayload:
        """Edits the webhook's default name and/or avatar.

        Parameters
        ----------
        name: :class:`str`
            The webhook's new default name.
        avatar: Optional[:class:`bytes`]
            A :term:`py:bytes-like object` of the webhook's new default avatar,
            as PNG, JPEG or GIF data. ``None`` resets it to the default avatar.

        Raises
        ------
        ValidationError
            Neither ``name`` nor ``avatar`` was given, or one had the wrong type.
        RemoteError
            Editing the webhook failed.
        TransportError
            The request could not be delivered.

        Returns
        -------
        Dict[:class:`str`, Any]
            The updated webhook object.
        """
        payload: EditWebhookPayload = {}

        if name is not MISSING and name is not None:
            if not isinstance(name, str):
                raise ValidationError(f'expected name to be str not {name.__class__.__name__}')
            payload['name'] = name

        if avatar is not MISSING:
            if avatar is None:
                payload['avatar'] = None
            elif isinstance(avatar, (bytes, bytearray, memoryview)):
                payload['avatar'] = _bytes_to_base64_data(bytes(avatar))
            else:
                raise ValidationError(f'expected avatar to be bytes not {avatar.__class__.__name__}')

        if not payload:
            raise ValidationError('modify requires at least one of name or avatar')

        response = self._transport.request(self._route('PATCH'), payload=payload)  # type: ignore
        return self._parse_webhook(response)

    def destroy(self) -> bool:
        """Deletes the webhook.

        The client keeps its cached metadata; later calls will fail remotely.

        Raises
        ------
        RemoteError
            Deleting the webhook failed.
        TransportError
            The request could not be delivered.
        """
        response = self._transport.request(self._route('DELETE'))
        if not response.ok:
            raise RemoteError(response)
        return True

    def _message_parameters(
        self,
        *,
        content: Any,
        username: str,
        avatar_url: str,
        tts: bool,
        file: AttachmentLike,
        files: Sequence[AttachmentLike],
        embed: EmbedLike,
        embeds: Sequence[EmbedLike],
    ) -> Tuple[ExecuteWebhookPayload, Optional[List[Dict[str, Any]]]]:
        if file is not MISSING and files is not MISSING:
            raise ValidationError('Cannot mix file and files keyword arguments.')
        if embed is not MISSING and embeds is not MISSING:
            raise ValidationError('Cannot mix embed and embeds keyword arguments.')
        if (file is not MISSING or files is not MISSING) and (embed is not MISSING or embeds is not MISSING):
            raise ValidationError('Cannot send files and embeds in the same message.')

        try:
            if file is not MISSING:
                attachments = [_to_attachment(file)]
            elif files is not MISSING:
                attachments = [_to_attachment(f) for f in files]
            else:
                attachments = []
        except (TypeError, ValueError) as exc:
            raise ValidationError(str(exc)) from exc

        if len(attachments) > MAX_ATTACHMENTS:
            raise ValidationError(f'files parameter must be a list of up to {MAX_ATTACHMENTS} elements')

        if embed is not MISSING:
            embed_list = [_embed_to_dict(embed)]
        elif embeds is not MISSING:
            try:
                embed_list = [_embed_to_dict(e) for e in embeds]
            except TypeError as exc:
                raise ValidationError(f'expected embeds to be a sequence not {embeds.__class__.__name__}') from exc
        else:
            embed_list = []

        if len(embed_list) > MAX_EMBEDS:
            raise ValidationError(f'embeds parameter must be a list of up to {MAX_EMBEDS} elements')

        if content is MISSING and not attachments and not embed_list:
            raise ValidationError('At least one of content, file, files, embed or embeds is required.')

        payload: ExecuteWebhookPayload = {}
        if content is not MISSING:
            payload['content'] = str(content)
        if username is not MISSING:
            payload['username'] = username
        if avatar_url is not MISSING:
            payload['avatar_url'] = str(avatar_url)
        if tts is not MISSING:
            payload['tts'] = bool(tts)
        if embed_list:
            payload['embeds'] = embed_list

        if not attachments:
            return payload, None

        multipart: List[Dict[str, Any]] = [
            {'name': 'payload_json', 'value': _to_json(payload)}
        ]
        multipart.extend(attachment.to_form(index) for index, attachment in enumerate(attachments))
        return payload, multipart

    def _handle_execute(self, response: Response, *, allow_empty: bool = False) -> Union[bool, Any]:
        # without wait Discord's answer is never inspected, error statuses included
        if not self._wait:
            return True
        if allow_empty and response.ok and not response.body.strip():
            return True
        return self._parse_json(response)

    def execute(
        self,
        content: Any = MISSING,
        *,
        username: str = MISSING,
        avatar_url: str = MISSING,
        tts: bool = MISSING,
        file: AttachmentLike = MISSING,
        files: Sequence[AttachmentLike] = MISSING,
        embed: EmbedLike = MISSING,
        embeds: Sequence[EmbedLike] = MISSING,
    ) -> Union[bool, MessagePayload]:
        """Sends a message using the webhook.

        ``execute('text')`` is a shorthand for ``execute(content='text')``.

        Files and embeds cannot be sent in the same message. Up to 10 files
        can be attached.

        Parameters
        ----------
        content: :class:`str`
            The content of the message to send.
        username: :class:`str`
            Overrides the default username of the webhook.
        avatar_url: :class:`str`
            Overrides the default avatar of the webhook.
        tts: :class:`bool`
            Whether the message should be sent using text-to-speech.
        file: :class:`Attachment`
            The file to upload. Cannot be mixed with ``files``. A
            :class:`discord.File` or a ``(name, data)`` pair is also accepted.
        files: List[:class:`Attachment`]
            The files to upload. Cannot be mixed with ``file``.
        embed: :class:`discord.Embed`
            The rich embed to send, or its dictionary form. Cannot be mixed
            with ``embeds``.
        embeds: List[:class:`discord.Embed`]
            Up to 10 embeds to send. Cannot be mixed with ``embed``.

        Raises
        ------
        ValidationError
            The parameters are invalid. Nothing was sent.
        RemoteError
            Sending the message failed. Only raised when :attr:`wait` is set.
        TransportError
            The request could not be delivered.

        Returns
        -------
        Union[:class:`bool`, Dict[:class:`str`, Any]]
            The message object Discord created if :attr:`wait` is set,
            ``True`` otherwise.
        """
        if content is None:
            content = MISSING
        if file is None:
            file = MISSING
        if files is None:
            files = MISSING
        if embed is None:
            embed = MISSING
        if embeds is None:
            embeds = MISSING

        payload, multipart = self._message_parameters(
            content=content,
            username=username,
            avatar_url=avatar_url,
            tts=tts,
            file=file,
            files=files,
            embed=embed,
            embeds=embeds,
        )

        route = self._route('POST')
        params = self._wait_params()
        if multipart is not None:
            _log.debug('Webhook ID %s is uploading %d file(s).', self._id, len(multipart) - 1)
            response = self._transport.request(route, multipart=multipart, params=params)
        else:
            response = self._transport.request(route, payload=payload, params=params)  # type: ignore

        return self._handle_execute(response)

    def execute_slack(self, payload: Union[str, Mapping[str, Any]]) -> bool:
        """Sends a Slack-compatible message using the webhook.

        Parameters
        ----------
        payload: Union[:class:`str`, Dict[:class:`str`, Any]]
            The Slack message, either already encoded as JSON or as a mapping
            that will be encoded.

        Raises
        ------
        ValidationError
            The payload is neither a string nor a mapping.
        RemoteError
            Discord rejected the message. Only raised when :attr:`wait` is set.
        TransportError
            The request could not be delivered.
        """
        if isinstance(payload, str):
            data = payload
        elif isinstance(payload, Mapping):
            data = _to_json(dict(payload))
        else:
            raise ValidationError(f'expected payload to be str or mapping not {payload.__class__.__name__}')

        response = self._transport.request(
            self._route('POST', '/slack'),
            data=data,
            headers={'Content-Type': 'application/json'},
            params=self._wait_params(),
        )

        if not self._wait:
            return True
        if not response.ok:
            raise RemoteError(response)
        if response.text != 'ok':
            raise RemoteError(response, f'unexpected response body {response.text!r}')
        return True

    def execute_github(self, json: str, event: str) -> Union[bool, Any]:
        """Sends a GitHub event payload using the webhook.

        Parameters
        ----------
        json: :class:`str`
            The GitHub event payload, already encoded as JSON.
        event: :class:`str`
            The GitHub event name, sent as the ``X-GitHub-Event`` header.

        Raises
        ------
        ValidationError
            ``json`` or ``event`` is missing.
        RemoteError
            Discord rejected the event. Only raised when :attr:`wait` is set.
        TransportError
            The request could not be delivered.
        """
        if not isinstance(json, str) or not json:
            raise ValidationError('execute_github requires the json payload as a non-empty string')
        if not isinstance(event, str) or not event:
            raise ValidationError('execute_github requires the event name as a non-empty string')

        response = self._transport.request(
            self._route('POST', '/github'),
            data=json,
            headers={'Content-Type': 'application/json', 'X-GitHub-Event': event},
            params=self._wait_params(),
        )
        return self._handle_execute(response, allow_empty=True)


def _embed_to_dict(embed: EmbedLike) -> Dict[str, Any]:
    if isinstance(embed, discord.Embed):
        return embed.to_dict()  # type: ignore
    if isinstance(embed, Mapping):
        return dict(embed)
    raise ValidationError(f'expected discord.Embed or mapping not {embed.__class__.__name__}')
