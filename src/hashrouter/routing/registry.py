"""Dual-table route registry.

Literal paths live in a dict (exact match, last write wins). Patterns
live in a list whose order is match priority. Literal lookups always
run first and short-circuit the pattern scan.
"""

import logging
from collections.abc import Mapping
from typing import Any

from hashrouter._internal.types import Handler, RouteSpecInput
from hashrouter.errors import InvalidRouteSpec
from hashrouter.routing.compiler import compile_spec
from hashrouter.routing.route import (
    TERMINAL,
    CompiledRoute,
    LiteralSpec,
    PatternSpec,
    RawPatternSpec,
    RouteMatch,
    pattern_key,
)

logger = logging.getLogger("hashrouter.routing")


class RouteRegistry:
    """Route table with continuation-by-index queries.

    Usage::

        registry = RouteRegistry()
        registry.add("/about", about)
        registry.add("/user/:id", show_user)
        registry.add("/user/:id", audit)

        match = registry.query("/user/42")           # show_user, position 0
        match = registry.query("/user/42", match.position + 1)  # audit, position 1

    A ``query`` that hits the literal table returns ``position == TERMINAL``;
    callers must not continue past it.
    """

    __slots__ = ("_literals", "_patterns")

    def __init__(self) -> None:
        self._literals: dict[str, CompiledRoute] = {}
        self._patterns: list[CompiledRoute] = []

    def add(
        self,
        spec: RouteSpecInput,
        handler: Handler,
        metadata: Mapping[str, Any] | None = None,
    ) -> bool:
        """Register *handler* for *spec*. Returns ``False`` if *spec* is invalid."""
        try:
            compiled = compile_spec(spec)
        except InvalidRouteSpec as exc:
            logger.warning("Rejected route: %s", exc)
            return False

        route = CompiledRoute(spec=compiled, handler=handler, metadata=dict(metadata or {}))
        match compiled:
            case LiteralSpec(path=path):
                self._literals[path] = route
            case PatternSpec() | RawPatternSpec():
                self._patterns.append(route)
        logger.debug("Registered %s route %s", route.kind, route.display)
        return True

    def query(self, path: str, start: int = 0) -> RouteMatch | None:
        """Find the next route for *path*.

        Checks the literal table first. Otherwise scans patterns from
        index *start* (inclusive) and returns the first full match, or
        ``None`` when nothing matches from *start* onward.
        """
        literal = self._literals.get(path)
        if literal is not None:
            return RouteMatch(position=TERMINAL, route=literal, params={})

        for index in range(max(start, 0), len(self._patterns)):
            route = self._patterns[index]
            match route.spec:
                case PatternSpec(regex=regex, names=names):
                    found = regex.fullmatch(path)
                    if found is None:
                        continue
                    params = dict(zip(names, found.groups(), strict=True))
                    return RouteMatch(position=index, route=route, params=params)
                case RawPatternSpec(regex=regex):
                    found = regex.fullmatch(path)
                    if found is None:
                        continue
                    return RouteMatch(position=index, route=route, params=found.groups())
        return None

    def query_all(self, path: str) -> list[RouteMatch]:
        """Every match a dispatch pass for *path* would visit, in order."""
        found: list[RouteMatch] = []
        cursor = 0
        while (result := self.query(path, cursor)) is not None:
            found.append(result)
            if result.terminal:
                break
            cursor = result.position + 1
        return found

    def remove(self, spec: RouteSpecInput) -> bool:
        """Unregister *spec*.

        A pattern spec removes every pattern entry with the same textual
        form. Returns ``True`` if anything was removed.
        """
        try:
            compiled = compile_spec(spec)
        except InvalidRouteSpec as exc:
            logger.warning("Cannot remove route: %s", exc)
            return False

        match compiled:
            case LiteralSpec(path=path):
                removed = self._literals.pop(path, None) is not None
            case PatternSpec(regex=regex) | RawPatternSpec(regex=regex):
                key = pattern_key(regex)
                kept = [r for r in self._patterns if pattern_key(r.spec.regex) != key]  # type: ignore[union-attr]
                removed = len(kept) != len(self._patterns)
                self._patterns = kept

        if removed:
            logger.debug("Removed route %r", spec)
        return removed

    @property
    def routes(self) -> list[CompiledRoute]:
        """All registered routes: literals first, then patterns in priority order."""
        return [*self._literals.values(), *self._patterns]

    def clear(self) -> None:
        self._literals.clear()
        self._patterns.clear()

    def __len__(self) -> int:
        return len(self._literals) + len(self._patterns)

    def __contains__(self, spec: object) -> bool:
        try:
            compiled = compile_spec(spec)
        except InvalidRouteSpec:
            return False
        match compiled:
            case LiteralSpec(path=path):
                return path in self._literals
            case PatternSpec(regex=regex) | RawPatternSpec(regex=regex):
                key = pattern_key(regex)
                return any(pattern_key(r.spec.regex) == key for r in self._patterns)  # type: ignore[union-attr]
