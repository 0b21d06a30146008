"""Runner: load config, validate, build the tea clock and start it."""
from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, TextIO

import yaml

from teaclock.channel import get_channel
from teaclock.clock import TeaClock
from teaclock.plugins import get_plugin, plugin_ids
from teaclock.timer import validate_minutes

logger = logging.getLogger(__name__)

DEFAULT_MINUTES = 3


def default_config() -> dict:
    return {
        "minutes": DEFAULT_MINUTES,
        "notifier": {"type": "stdio"},
        "plugins": plugin_ids(),
    }


def load_config(path: str | Path) -> dict:
    """Load YAML config from path; an empty file yields an empty dict."""
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def validate_config(config: dict) -> None:
    """Validate minutes, notifier and plugins; raise ValueError on error."""
    if not isinstance(config, dict):
        raise ValueError("config: top level must be a mapping")

    if config.get("minutes") is not None:
        try:
            validate_minutes(config["minutes"])
        except ValueError as e:
            raise ValueError(f"config: {e}") from None

    notifier = config.get("notifier")
    if notifier is not None:
        if not isinstance(notifier, dict):
            raise ValueError("config: notifier must be a dict")
        try:
            get_channel(notifier.get("type", "stdio"))
        except TypeError:
            raise ValueError(f"config: notifier type {notifier.get('type')!r} is not a channel name") from None

    plugins = config.get("plugins")
    if plugins is not None:
        if not isinstance(plugins, list):
            raise ValueError("config: plugins must be a list")
        for i, plugin_id in enumerate(plugins):
            try:
                get_plugin(plugin_id)
            except (KeyError, TypeError):
                raise ValueError(f"config: plugins[{i}] '{plugin_id}' not in plugin registry") from None


def resolve_config(
    config_path: str | Path | None,
    minutes: float | None = None,
    plugins: list[str] | None = None,
) -> dict:
    """Merge defaults, the config file (if any) and command-line overrides."""
    config = default_config()
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"config not found: {path}")
        loaded = load_config(path)
        validate_config(loaded)
        # An explicit null keeps the default.
        config.update({k: v for k, v in loaded.items() if v is not None})
    if minutes is not None:
        config["minutes"] = minutes
    if plugins is not None:
        config["plugins"] = plugins
    validate_config(config)
    return config


def build_clock(
    config: dict,
    sleep: Callable[[float], None] = time.sleep,
    stream: TextIO | None = None,
) -> TeaClock:
    notifier_cfg = config.get("notifier") or {}
    chan_type = notifier_cfg.get("type", "stdio")
    channel = get_channel(chan_type)(notifier_cfg, stream=stream)
    plugin_classes = [get_plugin(pid) for pid in config.get("plugins") or []]
    return TeaClock(
        config.get("minutes", DEFAULT_MINUTES),
        notifier=channel,
        plugins=plugin_classes,
        sleep=sleep,
        stream=stream,
    )


def run(
    config_path: str | Path | None = None,
    minutes: float | None = None,
    plugins: list[str] | None = None,
    sleep: Callable[[float], None] = time.sleep,
    stream: TextIO | None = None,
) -> TeaClock:
    """Resolve config, build the clock and block until the tea is ready."""
    config = resolve_config(config_path, minutes, plugins)
    clock = build_clock(config, sleep=sleep, stream=stream)
    logger.info(
        "Tea clock: %s minute(s), notifier=%s, plugins=%s",
        clock.timer.minutes,
        (config.get("notifier") or {}).get("type", "stdio"),
        config.get("plugins"),
    )
    clock.start()
    return clock
