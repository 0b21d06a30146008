"""beep plugin: print BEEP! right before the wrapped notification."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from teaclock.models import Notifier, NotifierLayer

if TYPE_CHECKING:
    from teaclock.clock import TeaClock

BEEP = "BEEP!"


class BeepLayer(NotifierLayer):
    def __init__(self, inner: Notifier, echo: Callable[..., None]) -> None:
        super().__init__(inner)
        self.echo = echo

    def before(self, message: str) -> None:
        self.echo(BEEP)


class BeepPlugin:
    id = "beep"

    def install(self, clock: TeaClock) -> None:
        clock.notifier = BeepLayer(clock.notifier, clock.echo)
