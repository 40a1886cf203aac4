"""Tests for hashrouter.cli._resolve — Router import resolution."""

import sys
import types

import pytest

from hashrouter.cli._resolve import resolve_router
from hashrouter.router import Router


def _factory() -> Router:
    return Router()


def _broken_factory() -> Router:
    msg = "no location"
    raise RuntimeError(msg)


@pytest.fixture
def _fake_router_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module with a hashrouter Router on sys.modules."""
    mod = types.ModuleType("_fake_hashrouter_nav")
    mod.router = Router()  # type: ignore[attr-defined]
    mod.custom = Router()  # type: ignore[attr-defined]
    mod.make = _factory  # type: ignore[attr-defined]
    mod.broken = _broken_factory  # type: ignore[attr-defined]
    mod.not_a_router = "just a string"  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_hashrouter_nav", mod)


@pytest.mark.usefixtures("_fake_router_module")
class TestResolveRouter:
    def test_explicit_attribute(self) -> None:
        assert isinstance(resolve_router("_fake_hashrouter_nav:custom"), Router)

    def test_default_attribute(self) -> None:
        """Omitting :attr defaults to 'router'."""
        router = resolve_router("_fake_hashrouter_nav")
        assert router is sys.modules["_fake_hashrouter_nav"].router  # type: ignore[attr-defined]

    def test_factory(self) -> None:
        assert isinstance(resolve_router("_fake_hashrouter_nav:make"), Router)

    def test_factory_error(self) -> None:
        with pytest.raises(TypeError, match="raised an error: no location"):
            resolve_router("_fake_hashrouter_nav:broken")

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_router("nonexistent_module_xyz:router")

    def test_missing_attribute(self) -> None:
        with pytest.raises(AttributeError):
            resolve_router("_fake_hashrouter_nav:does_not_exist")

    def test_wrong_type(self) -> None:
        with pytest.raises(TypeError, match=r"not a hashrouter\.Router instance"):
            resolve_router("_fake_hashrouter_nav:not_a_router")
