"""PushPlus channel: send the notification to a phone via the PushPlus API."""
from __future__ import annotations

import logging
import os
import re
from typing import Any

import requests

from teaclock.channel.base import Channel

logger = logging.getLogger(__name__)

PUSHPLUS_URL = "https://www.pushplus.plus/send"
DEFAULT_TITLE = "Tea Clock"

# Match ${VAR_NAME} in token string
ENV_PLACEHOLDER_RE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


def _resolve_token(raw: str) -> str:
    """Replace ${ENV_VAR} in token with os.environ values."""
    def repl(match: re.Match[str]) -> str:
        key = match.group(1)
        return os.environ.get(key, "")
    return ENV_PLACEHOLDER_RE.sub(repl, raw)


class PushPlusChannel(Channel):
    """POST each message to PushPlus with token/title/content/template.

    Delivery problems are logged and swallowed: a failed push must not stop
    the rest of the notifier chain.
    """

    def notify(self, message: str) -> None:
        token = self.channel_config.get("token")
        if not token:
            logger.error("PushPlus channel config missing 'token'")
            return
        token = _resolve_token(str(token))
        if not token:
            logger.error("PushPlus token is empty (env var not set or empty). Check .env")
            return
        payload: dict[str, Any] = {
            "token": token,
            "title": self.channel_config.get("title") or DEFAULT_TITLE,
            "content": message,
            "template": "txt",
        }
        topic = self.channel_config.get("topic")
        if topic:
            payload["topic"] = topic

        try:
            resp = requests.post(PUSHPLUS_URL, json=payload, timeout=10)
            if resp.status_code != 200:
                logger.error(
                    "PushPlus send failed: status=%s body=%s",
                    resp.status_code,
                    resp.text[:500],
                )
                return
            data = resp.json()
            if isinstance(data, dict) and data.get("code") != 200:
                logger.error(
                    "PushPlus API error: code=%s msg=%s",
                    data.get("code"),
                    data.get("msg", ""),
                )
                return
            logger.info("PushPlus notification sent: %r", message)
        except requests.RequestException as e:
            logger.exception("PushPlus request failed: %s", e)
