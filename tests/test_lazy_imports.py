"""Tests for hashrouter's lazy top-level API."""

import pytest

import hashrouter


class TestLazyImports:
    @pytest.mark.parametrize("name", hashrouter.__all__)
    def test_public_names_resolve(self, name: str) -> None:
        assert getattr(hashrouter, name) is not None

    def test_router_is_class(self) -> None:
        from hashrouter.router import Router

        assert hashrouter.Router is Router

    def test_unknown_name(self) -> None:
        with pytest.raises(AttributeError, match="has no attribute"):
            hashrouter.DoesNotExist  # noqa: B018

    def test_version(self) -> None:
        assert hashrouter.__version__ == "0.1.0"
