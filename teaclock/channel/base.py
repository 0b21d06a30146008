"""Channel abstraction: the notifier at the bottom of the layer chain."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TextIO


class Channel(ABC):
    """Abstract channel: notify(message) -> None.

    Every channel is built from its config section and the clock's output
    stream; each subclass uses whichever of the two it needs.
    """

    def __init__(self, channel_config: dict | None = None, stream: TextIO | None = None) -> None:
        self.channel_config = channel_config or {}
        self.stream = stream

    @abstractmethod
    def notify(self, message: str) -> None:
        """Deliver the message to the channel's sink (stdout, push service, ...)."""
        ...
