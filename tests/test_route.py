"""Tests for hashrouter.routing.route — spec variants, CompiledRoute, RouteMatch."""

import re

import pytest

from hashrouter.routing.compiler import compile_spec
from hashrouter.routing.route import (
    TERMINAL,
    CompiledRoute,
    LiteralSpec,
    RawPatternSpec,
    RouteMatch,
    pattern_key,
)


def _handler(ctx: object) -> str:
    return "ok"


class TestCompiledRoute:
    def test_literal(self) -> None:
        route = CompiledRoute(spec=LiteralSpec("/about"), handler=_handler)
        assert route.kind == "literal"
        assert route.param_names == ()
        assert route.display == "/about"
        assert route.metadata == {}

    def test_pattern(self) -> None:
        route = CompiledRoute(spec=compile_spec("/user/:id"), handler=_handler)
        assert route.kind == "pattern"
        assert route.param_names == ("id",)
        assert route.display == "/user/:id"

    def test_raw_pattern(self) -> None:
        route = CompiledRoute(spec=RawPatternSpec(re.compile(r"/p/(\d+)")), handler=_handler)
        assert route.kind == "pattern"
        assert route.param_names is None
        assert route.display == r"/p/(\d+)"

    def test_frozen(self) -> None:
        route = CompiledRoute(spec=LiteralSpec("/about"), handler=_handler)
        with pytest.raises(AttributeError):
            route.handler = print  # type: ignore[misc]


class TestRouteMatch:
    def test_terminal(self) -> None:
        route = CompiledRoute(spec=LiteralSpec("/"), handler=_handler, metadata={"a": 1})
        match = RouteMatch(position=TERMINAL, route=route, params={})
        assert match.terminal
        assert match.handler is _handler
        assert match.metadata == {"a": 1}

    def test_positioned(self) -> None:
        route = CompiledRoute(spec=compile_spec("/user/:id"), handler=_handler)
        assert RouteMatch(position=3, route=route, params={"id": "1"}).terminal is False


class TestPatternKey:
    def test_same_text_same_key(self) -> None:
        assert pattern_key(re.compile("a")) == pattern_key(re.compile("a"))

    def test_flags_matter(self) -> None:
        assert pattern_key(re.compile("a")) != pattern_key(re.compile("a", re.IGNORECASE))
