"""Invoke helpers — call a route handler and capture the outcome.

Any code that calls a user-provided handler goes through here, so
the catch-and-report decision lives in exactly one place.

Usage::

    from hashrouter._internal.invoke import invoke_handler

    outcome = invoke_handler(handler, ctx)
    if outcome.failure is not None:
        ...
"""

from dataclasses import dataclass
from typing import Any

from hashrouter._internal.types import Handler


@dataclass(frozen=True, slots=True)
class HandlerFailure:
    """A handler raised while being invoked."""

    handler: Handler
    error: Exception

    @property
    def handler_name(self) -> str:
        return getattr(self.handler, "__qualname__", None) or repr(self.handler)


@dataclass(frozen=True, slots=True)
class Invocation:
    """Outcome of a single handler call."""

    result: Any = None
    failure: HandlerFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def invoke_handler(handler: Handler, *args: Any, **kwargs: Any) -> Invocation:
    """Call *handler* and capture either its return value or its error.

    Only ``Exception`` subclasses are captured; ``KeyboardInterrupt``
    and ``SystemExit`` still propagate.
    """
    try:
        result = handler(*args, **kwargs)
    except Exception as exc:
        return Invocation(failure=HandlerFailure(handler=handler, error=exc))
    return Invocation(result=result)
