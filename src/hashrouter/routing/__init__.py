"""Routing — path compiler and dual-table route registry.

Literal paths are matched exactly; ``:name`` templates and raw
patterns are scanned in registration order.
"""

from hashrouter.routing.compiler import compile_spec
from hashrouter.routing.registry import RouteRegistry
from hashrouter.routing.route import (
    TERMINAL,
    CompiledRoute,
    LiteralSpec,
    PatternSpec,
    RawPatternSpec,
    RouteMatch,
)

__all__ = [
    "TERMINAL",
    "CompiledRoute",
    "LiteralSpec",
    "PatternSpec",
    "RawPatternSpec",
    "RouteMatch",
    "RouteRegistry",
    "compile_spec",
]
