"""
Table Configuration Types

Value objects handed to the rendering layer once resolution is done.

Models:
    - TableConfiguration: options of one group, keyed by ConfigurationKey
    - ResolvedConfiguration: outcome of a full resolution pass
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from datatables_config.types.configuration import DEFAULT_GROUP_NAME, ConfigurationKey

_TRUE_VALUES = frozenset({"true", "1", "yes", "on"})
_FALSE_VALUES = frozenset({"false", "0", "no", "off"})


class TableConfiguration(BaseModel):
    """
    Options applied to every table of one group.

    Values stay as the raw strings found in the properties files. The
    accessors below only cover the common cases; anything richer (themes,
    export types, pagination enums) is converted by the consumer.

    Attributes:
        options: Raw option values keyed by configuration key
        request: Request the configuration was resolved for (not serialized)
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    options: dict[ConfigurationKey, str] = Field(default_factory=dict)
    request: Any = Field(default=None, exclude=True, repr=False)

    def __getitem__(self, key: ConfigurationKey) -> str:
        return self.options[key]

    def __iter__(self):
        # Iterate option keys like a mapping, not pydantic's (field, value) pairs
        return iter(self.options)

    def __contains__(self, key: object) -> bool:
        return key in self.options

    def __len__(self) -> int:
        return len(self.options)

    def keys(self):
        return self.options.keys()

    def items(self):
        return self.options.items()

    def get(self, key: ConfigurationKey, default: str | None = None) -> str | None:
        """Raw value, or default when unset or blank."""
        value = self.options.get(key)
        if value is None or not value.strip():
            return default
        return value

    def get_bool(self, key: ConfigurationKey, default: bool | None = None) -> bool | None:
        """
        Boolean value of an option.

        Raises:
            ValueError: If the value is not a recognised boolean literal
        """
        value = self.get(key)
        if value is None:
            return default
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ValueError(f"Option '{key.value}' is not a boolean: {value!r}")

    def get_int(self, key: ConfigurationKey, default: int | None = None) -> int | None:
        """Integer value of an option. Raises ValueError on non-integers."""
        value = self.get(key)
        if value is None:
            return default
        try:
            return int(value.strip())
        except ValueError as e:
            raise ValueError(f"Option '{key.value}' is not an integer: {value!r}") from e

    def get_list(self, key: ConfigurationKey, separator: str = ",") -> list[str]:
        """Comma-separated option split into trimmed, non-empty items."""
        value = self.get(key)
        if value is None:
            return []
        return [item.strip() for item in value.split(separator) if item.strip()]

    def with_overrides(self, overrides: dict[ConfigurationKey, Any]) -> TableConfiguration:
        """Return a new configuration with programmatic overrides applied."""
        options = dict(self.options)
        for key, value in overrides.items():
            if isinstance(value, bool):
                value = str(value).lower()
            options[key] = str(value)
        return TableConfiguration(options=options, request=self.request)


class ResolvedConfiguration(BaseModel):
    """
    Result of resolving configurations for one locale.

    Attributes:
        locale: Locale tag the user bundle was looked up with
        groups: Every resolved group name (always includes the default group)
        configurations: One TableConfiguration per group
        locale_resolver: Value of the reserved locale resolver key, if any
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    locale: str | None = None
    groups: frozenset[str] = frozenset({DEFAULT_GROUP_NAME})
    configurations: dict[str, TableConfiguration] = Field(default_factory=dict)
    locale_resolver: str | None = None

    @property
    def default(self) -> TableConfiguration:
        """Configuration of the default group."""
        return self.configurations[DEFAULT_GROUP_NAME]
