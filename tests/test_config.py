"""Tests for hashrouter.config — RouterConfig frozen dataclass."""

import pytest

from hashrouter.config import RouterConfig
from hashrouter.errors import ConfigurationError


class TestRouterConfig:
    def test_defaults(self) -> None:
        cfg = RouterConfig()

        assert cfg.home == "/"
        assert cfg.redirect_home is True
        assert cfg.debug is False
        assert cfg.logger_name == "hashrouter.router"

    def test_override(self) -> None:
        cfg = RouterConfig(home="/inbox", redirect_home=False, debug=True)

        assert cfg.home == "/inbox"
        assert cfg.redirect_home is False
        assert cfg.debug is True

    def test_frozen(self) -> None:
        cfg = RouterConfig()

        with pytest.raises(AttributeError):
            cfg.debug = True  # type: ignore[misc]

    def test_home_needs_leading_slash(self) -> None:
        with pytest.raises(ConfigurationError, match="must start with '/'"):
            RouterConfig(home="inbox")

    def test_empty_logger_name(self) -> None:
        with pytest.raises(ConfigurationError):
            RouterConfig(logger_name="")
