"""
DatatablesSettings - Loader Configuration

Where configuration files are looked up and how the loader behaves.

Example:
    >>> # Use defaults (reads from environment)
    >>> settings = DatatablesSettings()

    >>> # Explicit configuration
    >>> settings = DatatablesSettings(
    ...     external_configuration_path="/etc/myapp/datatables",
    ...     default_locale="en_US",
    ... )

    >>> # From config file
    >>> settings = DatatablesSettings.from_file("./datatables.toml")

Environment Variables:
    DATATABLES_CONFIGURATION - Directory holding an externalized user bundle
    DATATABLES_DEFAULT_LOCALE - Locale tried when the requested one has no bundle
    DATATABLES_JSTL_PRESENT - Whether the JSP/JSTL integration is deployed
    DATATABLES_CONFIGURATION_LOADER - Dotted path of a custom ConfigurationLoader
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class DatatablesSettings:
    """Configuration for configuration loading."""

    # === Bundles ===

    user_bundle_name: str = "datatables"
    """Base name of the user bundle (datatables_fr_FR.properties, ...)"""

    default_resource: str = "datatables-default.properties"
    """Package resource holding the shipped defaults"""

    external_configuration_path: str | None = None
    """Directory searched first for the user bundle"""

    search_path: list[str] = ["."]
    """Directories searched for the user bundle when not externalized"""

    default_locale: str | None = None
    """Locale tried when no bundle matches the requested locale"""

    # === Loader ===

    loader_class: str = "datatables_config.resolution.loader:StandardConfigurationLoader"
    """ConfigurationLoader implementation instantiated by the configurator"""

    jstl_present: bool = False
    """Inject the JSTL message resolver when none is configured"""

    def __init__(self, **kwargs: Any) -> None:
        """
        Initialize settings.

        Args:
            **kwargs: Override any setting
        """
        # Class-level list must not be shared between instances
        self.search_path = list(type(self).search_path)

        self._load_from_env()

        for key, value in kwargs.items():
            if hasattr(self, key) and not key.startswith("_"):
                setattr(self, key, value)
            else:
                raise ValueError(f"Unknown configuration option: {key}")

    def _load_from_env(self) -> None:
        """Load settings from environment variables."""
        if path := os.getenv("DATATABLES_CONFIGURATION"):
            self.external_configuration_path = path
        if locale := os.getenv("DATATABLES_DEFAULT_LOCALE"):
            self.default_locale = locale
        if jstl := os.getenv("DATATABLES_JSTL_PRESENT"):
            self.jstl_present = jstl.strip().lower() in _TRUTHY
        if loader := os.getenv("DATATABLES_CONFIGURATION_LOADER"):
            self.loader_class = loader

    @classmethod
    def from_file(cls, path: str | Path) -> DatatablesSettings:
        """
        Load settings from a TOML file.

        Example TOML:
            [bundle]
            user_bundle_name = "datatables"
            external_configuration_path = "/etc/myapp/datatables"
            search_path = ["conf", "."]

            [loader]
            class = "myapp.config:CachingLoader"
            jstl_present = true

        Args:
            path: Path to TOML configuration file

        Returns:
            DatatablesSettings instance with values from file

        Raises:
            FileNotFoundError: If config file doesn't exist
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "rb") as f:
            data = tomllib.load(f)

        flat_config: dict[str, Any] = {}

        for key, value in data.get("bundle", {}).items():
            flat_config[key] = value

        for key, value in data.get("loader", {}).items():
            # loader.class -> loader_class
            flat_config["loader_class" if key == "class" else key] = value

        # Also support flat top-level keys
        for key, value in data.items():
            if key not in ("bundle", "loader") and not isinstance(value, dict):
                flat_config[key] = value

        return cls(**flat_config)

    @classmethod
    def from_env(cls) -> DatatablesSettings:
        """Load settings from environment variables only."""
        return cls()

    def with_overrides(self, **kwargs: Any) -> DatatablesSettings:
        """Return new settings with specified overrides."""
        new_settings = DatatablesSettings.__new__(DatatablesSettings)
        for key in dir(self):
            if not key.startswith("_") and not callable(getattr(self, key)):
                setattr(new_settings, key, getattr(self, key))
        new_settings.search_path = list(self.search_path)
        for key, value in kwargs.items():
            setattr(new_settings, key, value)
        return new_settings
