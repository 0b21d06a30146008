"""bell plugin: ring the terminal bell before the wrapped notification."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from teaclock.models import Notifier, NotifierLayer

if TYPE_CHECKING:
    from teaclock.clock import TeaClock

BELL = "\a"


class BellLayer(NotifierLayer):
    def __init__(self, inner: Notifier, echo: Callable[..., None]) -> None:
        super().__init__(inner)
        self.echo = echo

    def before(self, message: str) -> None:
        # No newline: the bell is not a visible line of output.
        self.echo(BELL, end="")


class BellPlugin:
    id = "bell"

    def install(self, clock: TeaClock) -> None:
        clock.notifier = BellLayer(clock.notifier, clock.echo)
