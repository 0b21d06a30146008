"""Stdio channel: one message per line on a text stream."""
from __future__ import annotations

import sys

from teaclock.channel.base import Channel


class StdioChannel(Channel):
    def notify(self, message: str) -> None:
        # sys.stdout is looked up per call; it may be replaced after construction.
        out = self.stream if self.stream is not None else sys.stdout
        out.write(f"{message}\n")
        out.flush()
