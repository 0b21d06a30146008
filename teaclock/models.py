"""Core protocols shared by the clock, its notifiers and plugins."""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from teaclock.clock import TeaClock


class TimerState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    FIRED = "fired"


class Notifier(Protocol):
    """Anything that accepts a text message and produces a side effect."""

    def notify(self, message: str) -> None:
        ...


class NotifierLayer:
    """Notifier that wraps another one and delegates to it.

    Subclasses override ``before`` to run their own effect; the wrapped
    notifier is always called afterwards with the same message.
    """

    def __init__(self, inner: Notifier) -> None:
        self.inner = inner

    def before(self, message: str) -> None:
        pass

    def notify(self, message: str) -> None:
        self.before(message)
        self.inner.notify(message)


class ClockPlugin(Protocol):
    """Plugin protocol: id + install(clock), called once at clock construction."""

    @property
    def id(self) -> str:
        """Plugin unique id, e.g. 'beep'."""
        ...

    def install(self, clock: TeaClock) -> None:
        """Layer behavior onto clock.notifier (typically clock.notifier = Layer(clock.notifier))."""
        ...
