"""hashrouter — fragment routing with named parameters and cumulative matches.

Maps a navigated URL fragment to every registered handler that matches
it, extracting ``:name`` parameters and query data.

Basic usage::

    from hashrouter import MemoryLocation, Router

    location = MemoryLocation("/user/42?tab=info")
    router = Router(location)

    @router.route("/user/:id")
    def show_user(ctx):
        print(ctx.params["id"], ctx.query["tab"])

    router.start()
    location.assign("/user/7")
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "HashRouterError",
    "InvalidRouteSpec",
    "Location",
    "MemoryLocation",
    "NavigationContext",
    "ParsedUrl",
    "QueryParams",
    "RouteMatch",
    "RouteRegistry",
    "Router",
    "RouterConfig",
    "parse_query",
    "parse_url",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import hashrouter`` fast while providing a clean top-level API.
    """
    if name == "Router":
        from hashrouter.router import Router

        return Router

    if name == "RouterConfig":
        from hashrouter.config import RouterConfig

        return RouterConfig

    if name == "NavigationContext":
        from hashrouter.context import NavigationContext

        return NavigationContext

    if name in ("Location", "MemoryLocation"):
        from hashrouter import location as _location

        return getattr(_location, name)

    if name in ("RouteRegistry", "RouteMatch"):
        from hashrouter import routing as _routing

        return getattr(_routing, name)

    if name in ("ParsedUrl", "QueryParams", "parse_query", "parse_url"):
        from hashrouter import url as _url

        return getattr(_url, name)

    if name in ("ConfigurationError", "HashRouterError", "InvalidRouteSpec"):
        from hashrouter import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
