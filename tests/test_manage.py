import base64
import json

import pytest

from discord_webhook_client import RemoteError, TransportError, ValidationError

from .conftest import WEBHOOK_ID, WEBHOOK_TOKEN

BASE_URL = f'https://discord.com/api/webhooks/{WEBHOOK_ID}/{WEBHOOK_TOKEN}'
PNG = b'\x89PNG\r\n\x1a\n' + b'\x00' * 16
WEBHOOK = {
    'id': WEBHOOK_ID,
    'type': 1,
    'guild_id': '1001',
    'channel_id': '2002',
    'name': 'Captain Hook',
    'avatar': 'a1b2c3',
    'application_id': None,
}


class TestGet:
    def test_returns_mapping_and_caches_fields(self, webhook, transport):
        transport.queue(200, '{"id":"X","channel_id":"C","name":"N"}')

        data = webhook.get()

        assert data == {'id': 'X', 'channel_id': 'C', 'name': 'N'}
        assert webhook.channel_id == 'C'
        assert webhook.name == 'N'
        # fields missing from the response are left alone
        assert webhook.guild_id is None
        assert webhook.avatar is None

    def test_request_shape(self, webhook, transport):
        transport.queue(200, json.dumps(WEBHOOK))

        webhook.get()

        route, kwargs = transport.last
        assert route.method == 'GET'
        assert route.url == BASE_URL
        assert kwargs == {}

    def test_overwrites_cache_on_each_call(self, webhook, transport):
        transport.queue(200, json.dumps(WEBHOOK))
        transport.queue(200, json.dumps(dict(WEBHOOK, name='Renamed', avatar=None)))

        webhook.get()
        assert webhook.name == 'Captain Hook'
        assert webhook.guild_id == '1001'

        webhook.get()
        assert webhook.name == 'Renamed'
        assert webhook.avatar is None
        assert webhook.guild_id == '1001'

    def test_not_found_raises_remote_error(self, webhook, transport):
        transport.queue(404, '{"message": "Unknown Webhook", "code": 10015}')

        with pytest.raises(RemoteError) as excinfo:
            webhook.get()

        assert excinfo.value.status == 404
        assert excinfo.value.code == 10015
        assert excinfo.value.message == 'Unknown Webhook'
        assert 'Unknown Webhook' in excinfo.value.text

    def test_remote_error_keeps_non_json_body(self, webhook, transport):
        transport.queue(502, '<html>Bad Gateway</html>')

        with pytest.raises(RemoteError) as excinfo:
            webhook.get()

        assert excinfo.value.status == 502
        assert excinfo.value.code == 0
        assert excinfo.value.text == '<html>Bad Gateway</html>'

    def test_failed_get_keeps_cache(self, webhook, transport):
        transport.queue(200, json.dumps(WEBHOOK))
        transport.queue(401, '{"message": "Invalid Webhook Token", "code": 50027}')

        webhook.get()
        with pytest.raises(RemoteError):
            webhook.get()

        assert webhook.name == 'Captain Hook'

    def test_invalid_json_raises_remote_error(self, webhook, transport):
        transport.queue(200, 'definitely not json')

        with pytest.raises(RemoteError):
            webhook.get()

    def test_transport_error_propagates(self, webhook, transport):
        error = TransportError('connection refused', OSError(111, 'refused'))
        transport.fail(error)

        with pytest.raises(TransportError) as excinfo:
            webhook.get()

        assert excinfo.value is error
        assert isinstance(excinfo.value.original, OSError)


class TestModify:
    def test_name_shorthand(self, webhook, transport):
        transport.queue(200, json.dumps(dict(WEBHOOK, name='New Name')))

        data = webhook.modify('New Name')

        route, kwargs = transport.last
        assert route.method == 'PATCH'
        assert route.url == BASE_URL
        assert kwargs['payload'] == {'name': 'New Name'}
        assert data['name'] == 'New Name'
        assert webhook.name == 'New Name'
        assert webhook.channel_id == '2002'

    def test_avatar_is_sent_as_data_uri(self, webhook, transport):
        transport.queue(200, json.dumps(WEBHOOK))

        webhook.modify(avatar=PNG)

        payload = transport.last.kwargs['payload']
        assert list(payload) == ['avatar']
        prefix, encoded = payload['avatar'].split(',', 1)
        assert prefix == 'data:image/png;base64'
        assert base64.b64decode(encoded) == PNG

    @pytest.mark.parametrize(
        ('data', 'mime'),
        [
            (b'\xff\xd8\xff\xe0' + b'\x00' * 8, 'image/jpeg'),
            (b'GIF89a' + b'\x00' * 8, 'image/gif'),
            (b'RIFF\x00\x00\x00\x00WEBP', 'image/webp'),
            (b'plain bytes', 'image/unknown'),
        ],
    )
    def test_avatar_mime_type(self, webhook, transport, data, mime):
        transport.queue(200, json.dumps(WEBHOOK))

        webhook.modify(avatar=data)

        assert transport.last.kwargs['payload']['avatar'].startswith(f'data:{mime};base64,')

    def test_name_and_avatar(self, webhook, transport):
        transport.queue(200, json.dumps(WEBHOOK))

        webhook.modify(name='Both', avatar=PNG)

        assert set(transport.last.kwargs['payload']) == {'name', 'avatar'}

    def test_avatar_none_resets(self, webhook, transport):
        transport.queue(200, json.dumps(dict(WEBHOOK, avatar=None)))

        webhook.modify(avatar=None)

        assert transport.last.kwargs['payload'] == {'avatar': None}
        assert webhook.avatar is None

    def test_requires_name_or_avatar(self, webhook, transport):
        with pytest.raises(ValidationError):
            webhook.modify()
        assert transport.calls == []

    @pytest.mark.parametrize('kwargs', [{'name': 42}, {'avatar': 'not bytes'}])
    def test_rejects_wrong_types(self, webhook, transport, kwargs):
        with pytest.raises(ValidationError):
            webhook.modify(**kwargs)
        assert transport.calls == []

    def test_remote_error(self, webhook, transport):
        transport.queue(400, '{"message": "Invalid Form Body", "code": 50035}')

        with pytest.raises(RemoteError) as excinfo:
            webhook.modify('x')

        assert excinfo.value.status == 400
        assert webhook.name is None


class TestDestroy:
    def test_returns_true_on_no_content(self, webhook, transport):
        transport.queue(204)

        assert webhook.destroy() is True

        route, kwargs = transport.last
        assert route.method == 'DELETE'
        assert route.url == BASE_URL
        assert kwargs == {}

    def test_keeps_cached_state(self, webhook, transport):
        transport.queue(200, json.dumps(WEBHOOK))
        transport.queue(204)

        webhook.get()
        webhook.destroy()

        assert webhook.name == 'Captain Hook'

    def test_remote_error(self, webhook, transport):
        transport.queue(404, '{"message": "Unknown Webhook", "code": 10015}')

        with pytest.raises(RemoteError) as excinfo:
            webhook.destroy()

        assert excinfo.value.status == 404
