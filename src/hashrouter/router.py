"""Fragment router — dispatches every navigation to all matching routes.

One ``Router`` owns one ``RouteRegistry`` and listens to one
``Location``. Each navigation runs a single dispatch pass:

1. Reject fragments without a leading ``/``.
2. Split the fragment into path and query.
3. Query the registry repeatedly, resuming after the last match, and
   invoke every matching handler in registration order. A literal
   match is terminal and ends the pass.
4. If nothing matched on the very first pass, redirect once to the
   home path.

Handler errors are logged and never interrupt the pass.
"""

import logging
from collections import deque
from collections.abc import Callable, Mapping
from typing import Any

from hashrouter._internal.invoke import invoke_handler
from hashrouter._internal.types import Handler, RouteSpecInput
from hashrouter.config import RouterConfig
from hashrouter.context import NavigationContext
from hashrouter.location import Location, MemoryLocation, Unsubscribe
from hashrouter.routing.registry import RouteRegistry
from hashrouter.routing.route import RouteMatch
from hashrouter.url import ParsedUrl, parse_url


def fix_url(url: str) -> str:
    """Prefix a leading ``/`` when *url* lacks one."""
    return url if url.startswith("/") else "/" + url


class Router:
    """Fragment router bound to a ``Location``.

    Mutable during setup (route registration). ``start()`` subscribes to
    location changes and runs the first dispatch pass.

    Usage::

        location = MemoryLocation("/user/42?tab=info")
        router = Router(location)

        @router.route("/user/:id")
        def show_user(ctx):
            print(ctx.params["id"], ctx.query.get("tab"))

        router.start()
    """

    __slots__ = (
        "_deferred",
        "_dispatching",
        "_location",
        "_logger",
        "_passes",
        "_redirected_home",
        "_registry",
        "_trace_level",
        "_unsubscribe",
        "config",
        "initialized",
    )

    def __init__(
        self,
        location: Location | None = None,
        config: RouterConfig | None = None,
        *,
        registry: RouteRegistry | None = None,
    ) -> None:
        self.config: RouterConfig = config or RouterConfig()
        self._location: Location = location if location is not None else MemoryLocation()
        self._registry: RouteRegistry = registry if registry is not None else RouteRegistry()
        self._logger = logging.getLogger(self.config.logger_name)
        self._trace_level = logging.INFO if self.config.debug else logging.DEBUG
        self._unsubscribe: Unsubscribe | None = None
        # One-shot: the automatic home redirect happens at most once per router
        self._redirected_home = False
        self._passes = 0
        self._dispatching = False
        self._deferred: deque[str] = deque()
        self.initialized = False

    @property
    def location(self) -> Location:
        return self._location

    @property
    def registry(self) -> RouteRegistry:
        return self._registry

    # -- Route registration --

    def add(
        self,
        spec: RouteSpecInput,
        handler: Handler,
        metadata: Mapping[str, Any] | None = None,
    ) -> bool:
        """Register *handler* for a path template or ``re.Pattern``.

        String specs get a missing leading ``/`` added, since fragments
        without one are never dispatched.
        """
        if isinstance(spec, str):
            spec = fix_url(spec.strip())
        added = self._registry.add(spec, handler, metadata)
        if added:
            self._trace("Listening: %s", spec if isinstance(spec, str) else spec.pattern)
        return added

    def remove(self, spec: RouteSpecInput) -> bool:
        """Unregister every route registered under *spec*."""
        return self._registry.remove(spec)

    def on(
        self,
        path: str,
        handler: Handler,
        metadata: Mapping[str, Any] | None = None,
    ) -> bool:
        """Register *handler* for *path*, adding a missing leading ``/``."""
        return self.add(path, handler, metadata)

    def route(self, path: str, **metadata: Any) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator.

        Args:
            path: Fragment path. Use ``:name`` for path parameters.
            **metadata: Stored on the route and exposed as ``ctx.metadata``.
        """

        def decorator(func: Handler) -> Handler:
            self.on(path, func, metadata)
            return func

        return decorator

    # -- Dispatch --

    def check(self, fragment: str | None = None) -> int:
        """Run one dispatch pass for *fragment* (default: current location).

        Returns the number of handlers invoked.
        """
        if not fragment:
            fragment = self._location.fragment
        if not fragment.startswith("/"):
            self._logger.warning("Ignoring fragment without leading '/': %r", fragment)
            return 0

        url = parse_url(fragment)
        self._passes += 1
        first_pass = self._passes == 1

        count = 0
        cursor = 0
        # A handler may call check()/refresh() itself; only the outermost pass flushes
        nested = self._dispatching
        self._dispatching = True
        try:
            while (found := self._registry.query(url.path, cursor)) is not None:
                count += 1
                self._trace("@%d -> %s (%s)", count, url.path, found.route.display)
                self._invoke(url, found)
                if found.terminal:
                    break
                cursor = found.position + 1

            if count == 0:
                self._trace("No route registered for %s", url.path)
                if first_pass:
                    self._redirect_home_once(url.path)
        except BaseException:
            # Redirects from an aborted pass must not leak into the next one
            if not nested:
                self._deferred.clear()
            raise
        finally:
            self._dispatching = nested

        if nested:
            return count
        # Redirects requested during the pass become new navigations only now
        while self._deferred:
            self._location.assign(self._deferred.popleft())
        return count

    def _invoke(self, url: ParsedUrl, found: RouteMatch) -> None:
        ctx = NavigationContext(
            path=url.path,
            query=url.query,
            params=found.params,
            metadata=found.metadata,
            _redirect=self.redirect,
        )
        outcome = invoke_handler(found.handler, ctx)
        if outcome.failure is not None:
            self._logger.error(
                "Handler %s failed for %s",
                outcome.failure.handler_name,
                url.path,
                exc_info=outcome.failure.error,
            )

    def _redirect_home_once(self, path: str) -> None:
        if not self.config.redirect_home or self._redirected_home:
            return
        self._redirected_home = True
        self._trace("First navigation has no route, going to %s", self.config.home)
        if path != self.config.home:
            self.redirect(self.config.home)

    def redirect(self, url: str) -> None:
        """Navigate to *url*. The resulting change is dispatched as a new event."""
        url = fix_url(url)
        self._trace("Redirect: %s", url)
        if self._dispatching:
            self._deferred.append(url)
            return
        self._location.assign(url)

    def refresh(self) -> int:
        """Re-dispatch the current fragment."""
        self._trace("Refresh")
        return self.check()

    # -- Lifecycle --

    def start(self) -> None:
        """Subscribe to location changes and handle the current fragment.

        A current fragment without a leading ``/`` is replaced by the
        home path instead of being dispatched.
        """
        self._trace("Init")
        if self._unsubscribe is None:
            self._unsubscribe = self._location.subscribe(self._on_change)

        if self._location.fragment.startswith("/"):
            self.check()
        elif self.config.redirect_home:
            self._trace("First visit, going to %s", self.config.home)
            self._redirected_home = True
            self.redirect(self.config.home)
        self.initialized = True

    def stop(self) -> None:
        """Stop listening to location changes."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self.initialized = False

    def _on_change(self, fragment: str) -> None:
        self.check(fragment)

    def _trace(self, msg: str, *args: object) -> None:
        self._logger.log(self._trace_level, msg, *args)
