"""Channel layer: base + stdio + PushPlus; factory by type."""
from __future__ import annotations

from teaclock.channel.base import Channel
from teaclock.channel.pushplus import PushPlusChannel
from teaclock.channel.stdio import StdioChannel

_CHANNELS: dict[str, type[Channel]] = {
    "stdio": StdioChannel,
    "pushplus": PushPlusChannel,
}


def get_channel(channel_type: str) -> type[Channel]:
    """Return channel class for given type ('stdio' or 'pushplus')."""
    if channel_type not in _CHANNELS:
        raise ValueError(f"Unknown channel type: {channel_type}")
    return _CHANNELS[channel_type]


def channel_types() -> list[str]:
    return list(_CHANNELS)


__all__ = ["Channel", "PushPlusChannel", "StdioChannel", "channel_types", "get_channel"]
