"""
ports.py: Interfaces the session depends on but does not implement.
"""

from typing import Protocol

from .data_models import Snapshot


class Persistence(Protocol):
    """Best-score storage. `load` is called once per session, `save` on every new best."""

    def load(self) -> int: ...

    def save(self, score: int) -> None: ...


class Presentation(Protocol):
    """Observes the session after every mutation; never feeds back into it."""

    def render(self, snapshot: Snapshot) -> None: ...
