"""
Exceptions

Errors raised while loading and resolving table configurations.

A missing user bundle is never an error: resolution falls back to the
shipped defaults. Only the default configuration is mandatory.
"""


class ConfigurationError(Exception):
    """Base class for all configuration errors."""


class ConfigurationLoadingError(ConfigurationError):
    """The default configuration or the configured loader could not be loaded."""


class UnknownGroupError(ConfigurationError, KeyError):
    """A table asked for a group that no configuration file declares."""

    def __init__(self, group: str, available: list[str]) -> None:
        self.group = group
        self.available = available
        super().__init__(
            f"The group '{group}' doesn't exist in the configuration. "
            f"Available groups: {', '.join(available)}"
        )

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])
