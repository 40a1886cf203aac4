"""Navigation context passed to route handlers."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from hashrouter._internal.types import Params
from hashrouter.url import QueryParams


@dataclass(frozen=True, slots=True)
class NavigationContext:
    """What a handler sees for one matched route.

    ``params`` is a name -> value dict for ``:name`` routes, a tuple of
    positional captures for raw pattern routes, and empty for literal
    routes. ``redirect`` navigates through the router that dispatched
    this context.

    Usage::

        @router.route("/user/:id")
        def show_user(ctx: NavigationContext) -> None:
            if ctx.query.get("tab") == "legacy":
                ctx.redirect(f"/user/{ctx.params['id']}")
    """

    path: str
    query: QueryParams
    params: Params
    metadata: Mapping[str, Any] = field(default_factory=dict)
    _redirect: Callable[[str], None] | None = field(default=None, repr=False, compare=False)

    def redirect(self, url: str) -> None:
        """Request navigation to *url* (a leading ``/`` is added if missing)."""
        if self._redirect is None:
            msg = "This context is not bound to a router"
            raise RuntimeError(msg)
        self._redirect(url)
