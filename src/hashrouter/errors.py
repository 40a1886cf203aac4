"""hashrouter exception hierarchy.

Shared across the compiler, registry and router so every module
raises and catches the same types.
"""


class HashRouterError(Exception):
    """Base for all hashrouter-specific errors."""


class ConfigurationError(HashRouterError):
    """Raised when router configuration is invalid.

    Raised from ``RouterConfig`` at construction time.
    """


class InvalidRouteSpec(HashRouterError, TypeError):
    """A route spec that is neither a path string nor a compiled pattern.

    Raised by ``compile_spec``. ``RouteRegistry.add`` and
    ``RouteRegistry.remove`` catch it and report failure with ``False``.
    """

    def __init__(self, spec: object) -> None:
        self.spec = spec
        super().__init__(
            f"Route spec must be a path string or re.Pattern, got {type(spec).__name__}: {spec!r}"
        )
