"""log plugin: record every notification in the application log."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from teaclock.models import NotifierLayer

if TYPE_CHECKING:
    from teaclock.clock import TeaClock

logger = logging.getLogger(__name__)


class LogLayer(NotifierLayer):
    def before(self, message: str) -> None:
        logger.info("notify: %s", message)


class LogPlugin:
    id = "log"

    def install(self, clock: TeaClock) -> None:
        clock.notifier = LogLayer(clock.notifier)
