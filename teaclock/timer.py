"""Sleep timer: wait the configured minutes, then fire one notification."""
from __future__ import annotations

import logging
import math
import threading
import time
from numbers import Real
from typing import Callable

from teaclock.models import TimerState

logger = logging.getLogger(__name__)

TEA_READY = "Tea is ready!"


def validate_minutes(minutes: object) -> float:
    """Return minutes as float; raise ValueError if negative, not a number, or too long to sleep."""
    if isinstance(minutes, bool) or not isinstance(minutes, Real):
        raise ValueError(f"minutes must be a number, got {minutes!r}")
    value = float(minutes)
    if math.isnan(value) or value < 0:
        raise ValueError(f"minutes must be >= 0, got {minutes!r}")
    # time.sleep overflows above threading.TIMEOUT_MAX seconds.
    if not math.isfinite(value * 60) or value * 60 > threading.TIMEOUT_MAX:
        raise ValueError(f"minutes must be finite and at most {threading.TIMEOUT_MAX / 60:g}, got {minutes!r}")
    return value


class SleepTimer:
    """Blocks for minutes * 60 seconds on start(), then calls notify(TEA_READY).

    ``sleep`` is injectable so tests can simulate elapsed time. A timer fires
    once; calling start() again raises RuntimeError.
    """

    def __init__(
        self,
        minutes: float,
        notify: Callable[[str], None],
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.minutes = validate_minutes(minutes)
        self.notify = notify
        self._sleep = sleep
        self.state = TimerState.IDLE

    @property
    def seconds(self) -> float:
        return self.minutes * 60

    @property
    def fired(self) -> bool:
        return self.state is TimerState.FIRED

    def start(self) -> None:
        if self.state is not TimerState.IDLE:
            raise RuntimeError(f"timer already started (state={self.state.value})")
        self.state = TimerState.RUNNING
        logger.info("Timer started: %s minute(s)", self.minutes)
        self._sleep(self.seconds)
        self.notify(TEA_READY)
        self.state = TimerState.FIRED
        logger.info("Timer fired")
