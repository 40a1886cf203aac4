"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

from hashrouter.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(home="/dashboard", debug=True)
    """

    # Target of the automatic first-navigation redirect
    home: str = "/"
    redirect_home: bool = True

    # Logging
    debug: bool = False  # Dispatch trace at INFO instead of DEBUG
    logger_name: str = "hashrouter.router"

    def __post_init__(self) -> None:
        if not self.home.startswith("/"):
            msg = f"RouterConfig.home must start with '/', got {self.home!r}"
            raise ConfigurationError(msg)
        if not self.logger_name:
            msg = "RouterConfig.logger_name must not be empty"
            raise ConfigurationError(msg)
