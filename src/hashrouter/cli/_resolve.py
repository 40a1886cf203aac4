"""Locate the application's ``Router`` from a ``"module:name"`` string."""

import importlib

from hashrouter.router import Router


def resolve_router(import_string: str) -> Router:
    """Import *import_string* and return the router it names.

    ``"pkg.nav:app_router"`` reads ``app_router`` from ``pkg.nav``; a bare
    ``"pkg.nav"`` reads ``pkg.nav.router``. A callable that is not itself a
    router is treated as a builder and called with no arguments, so apps
    that register routes inside a function can be inspected too.

    Import failures propagate unchanged. Anything that does not end up as
    a ``Router`` raises ``TypeError``.
    """
    module_name, _, name = import_string.partition(":")
    module = importlib.import_module(module_name)
    target = getattr(module, name or "router")

    if callable(target) and not isinstance(target, Router):
        try:
            target = target()
        except Exception as exc:
            msg = f"Router builder {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(target, Router):
        kind = type(target).__name__
        raise TypeError(f"{import_string!r} gives a {kind}, not a hashrouter.Router instance")
    return target
