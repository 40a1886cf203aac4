"""Navigation boundary — where fragments come from and where redirects go.

The router only talks to a ``Location``: it reads the current fragment,
subscribes to change notifications, and assigns a new fragment to
redirect. ``MemoryLocation`` is the in-process implementation used by
tests, scripts and embedding hosts.
"""

import logging
from collections import deque
from collections.abc import Callable
from typing import Protocol, TypeAlias, runtime_checkable

logger = logging.getLogger("hashrouter.location")

Listener: TypeAlias = Callable[[str], object]
Unsubscribe: TypeAlias = Callable[[], None]


@runtime_checkable
class Location(Protocol):
    """A source of fragment change notifications.

    Implementations must deliver notifications serially: an ``assign``
    made while listeners are running is delivered after they return.
    """

    @property
    def fragment(self) -> str: ...

    def assign(self, fragment: str) -> None: ...

    def subscribe(self, listener: Listener) -> Unsubscribe: ...


class MemoryLocation:
    """In-memory ``Location`` with serial, queued delivery.

    Like a browser hash, assigning the fragment that is already current
    does not notify anyone. Every accepted assignment is kept in
    ``history`` for inspection.

    Usage::

        location = MemoryLocation("/inbox")
        router = Router(location)
        router.start()
        location.assign("/user/42")   # dispatches synchronously
    """

    __slots__ = ("_delivering", "_fragment", "_listeners", "_pending", "history")

    def __init__(self, fragment: str = "") -> None:
        self._fragment = fragment
        self._listeners: list[Listener] = []
        self._pending: deque[str] = deque()
        self._delivering = False
        self.history: list[str] = []

    @property
    def fragment(self) -> str:
        return self._fragment

    def assign(self, fragment: str) -> None:
        """Set the fragment and notify listeners if it changed."""
        if fragment == self._fragment:
            return
        self._fragment = fragment
        self.history.append(fragment)
        self._pending.append(fragment)
        if self._delivering:
            # Delivered by the outer loop once current listeners return
            return
        self._drain()

    def subscribe(self, listener: Listener) -> Unsubscribe:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _drain(self) -> None:
        self._delivering = True
        try:
            while self._pending:
                fragment = self._pending.popleft()
                logger.debug("Fragment changed: %s", fragment)
                for listener in list(self._listeners):
                    listener(fragment)
        finally:
            self._delivering = False
