"""
discord_webhook_client
~~~~~~~~~~~~~~~~~~~~~~

A small blocking client for Discord webhooks: fetch, edit and delete a
webhook, and post regular, Slack-compatible or GitHub-compatible messages
through it.

:copyright: (c) 2025-present Developer Anonymous (aka DA344)
:license: MIT, see LICENSE for more details.
"""

__title__ = "discord-webhook-client"
__author__ = "Developer Anonymous (aka DA344)"
__license__ = "MIT"
__copyright__ = "Copyright 2025-present Developer Anonymous (aka DA344)"
__version__ = "0.1.0a"

import logging

from .client import *
from .errors import *
from .file import *
from .http import *
from .utils import *

logging.getLogger(__name__).addHandler(logging.NullHandler())
