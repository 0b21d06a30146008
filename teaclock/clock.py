"""TeaClock: owns a notifier and a timer, installs plugins at construction."""
from __future__ import annotations

import logging
import sys
import time
from typing import Callable, Iterable, TextIO

from teaclock.channel import StdioChannel
from teaclock.models import ClockPlugin, Notifier
from teaclock.plugins import PLUGINS
from teaclock.timer import SleepTimer

logger = logging.getLogger(__name__)


class TeaClock:
    """Controller for one tea timer.

    Construction order: notifier, timer bound to the clock's notifier, then
    plugins. The timer resolves ``self.notifier`` when it fires, so layers
    installed by plugins after the timer exists still wrap the notification.

    ``plugins`` is a sequence of plugin classes (or zero-arg factories); None
    means every registered plugin, in registry order. Each one is instantiated
    and installed in turn; an exception from either step propagates and the
    clock is not created.
    """

    def __init__(
        self,
        minutes: float,
        notifier: Notifier | None = None,
        plugins: Iterable[Callable[[], ClockPlugin]] | None = None,
        sleep: Callable[[float], None] = time.sleep,
        stream: TextIO | None = None,
    ) -> None:
        self.stream = stream
        self.notifier: Notifier = notifier if notifier is not None else StdioChannel(stream=stream)
        self.timer = SleepTimer(minutes, self.notify, sleep=sleep)
        self.plugins: list[ClockPlugin] = []
        self._init_plugins(PLUGINS.values() if plugins is None else plugins)

    def _init_plugins(self, factories: Iterable[Callable[[], ClockPlugin]]) -> None:
        for factory in factories:
            plugin = factory()
            plugin.install(self)
            self.plugins.append(plugin)
            logger.debug("Installed plugin %s", getattr(plugin, "id", plugin))
        logger.info("Plugins installed: %s", [getattr(p, "id", p) for p in self.plugins])

    def echo(self, text: str, end: str = "\n") -> None:
        """Write text to the clock's output stream (stdout by default)."""
        out = self.stream if self.stream is not None else sys.stdout
        out.write(f"{text}{end}")
        out.flush()

    def notify(self, message: str) -> None:
        self.notifier.notify(message)

    def start(self) -> None:
        self.timer.start()
