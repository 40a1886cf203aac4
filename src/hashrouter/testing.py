"""Test utilities for hashrouter applications.

Uses the same Router and Location types as production. No wrapper
translation layer::

    from hashrouter.testing import RecordingHandler, assert_dispatched
"""

from collections.abc import Callable
from typing import Any

from hashrouter.context import NavigationContext


class RecordingHandler:
    """A route handler that remembers every context it was called with.

    An optional *side_effect* runs after recording. Pass an exception
    instance to make the handler raise it.
    """

    def __init__(
        self,
        name: str = "recorder",
        side_effect: Callable[[NavigationContext], Any] | BaseException | None = None,
    ) -> None:
        self.__qualname__ = name
        self.calls: list[NavigationContext] = []
        self.side_effect = side_effect

    def __call__(self, ctx: NavigationContext) -> Any:
        self.calls.append(ctx)
        if isinstance(self.side_effect, BaseException):
            raise self.side_effect
        if self.side_effect is not None:
            return self.side_effect(ctx)
        return None

    def __repr__(self) -> str:
        return f"RecordingHandler({self.__qualname__!r}, calls={len(self.calls)})"

    @property
    def called(self) -> bool:
        return bool(self.calls)

    @property
    def last(self) -> NavigationContext:
        assert self.calls, f"{self.__qualname__} was never called"
        return self.calls[-1]

    @property
    def paths(self) -> list[str]:
        return [ctx.path for ctx in self.calls]


def assert_dispatched(
    handler: RecordingHandler,
    path: str,
    *,
    params: Any = None,
    query: dict[str, str] | None = None,
) -> None:
    """Assert *handler*'s most recent call was for *path* (and params/query if given)."""
    ctx = handler.last
    assert ctx.path == path, f"Expected dispatch to {path!r}, got {ctx.path!r}"
    if params is not None:
        assert ctx.params == params, f"Expected params {params!r}, got {ctx.params!r}"
    if query is not None:
        assert dict(ctx.query) == query, f"Expected query {query!r}, got {dict(ctx.query)!r}"
