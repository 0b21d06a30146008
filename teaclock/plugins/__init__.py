# Plugin registry; installation order is registry order unless configured otherwise.
from __future__ import annotations

from teaclock.plugins.beep import BeepPlugin
from teaclock.plugins.bell import BellPlugin
from teaclock.plugins.log import LogPlugin

PLUGINS: dict[str, type] = {
    "log": LogPlugin,
    "bell": BellPlugin,
    "beep": BeepPlugin,
}


def get_plugin(plugin_id: str):
    """Return plugin class for plugin_id; raises KeyError if unknown."""
    if plugin_id not in PLUGINS:
        raise KeyError(f"Unknown plugin_id: {plugin_id}")
    return PLUGINS[plugin_id]


def plugin_ids() -> list[str]:
    return list(PLUGINS)
