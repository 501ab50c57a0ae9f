"""
Default Configuration

The shipped defaults are read from package data once per process and kept
for its whole lifetime.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from pathlib import Path
from types import MappingProxyType

from datatables_config.exceptions import ConfigurationLoadingError
from datatables_config.loading.properties import parse_properties

logger = logging.getLogger(__name__)

DEFAULT_RESOURCE = "datatables-default.properties"


def get_resource_path(resource: str = DEFAULT_RESOURCE) -> Path:
    """Get path to a resource shipped with the package."""
    import datatables_config
    package_dir = Path(datatables_config.__file__).parent
    return package_dir / "resources" / resource


def read_default_resource(resource: str = DEFAULT_RESOURCE) -> dict[str, str]:
    """
    Read the default configuration resource.

    Raises:
        ConfigurationLoadingError: If the resource is missing, unreadable or malformed
    """
    path = get_resource_path(resource)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationLoadingError(
            f"Unable to load the default configuration file {path}. "
            "Ensure the datatables_config package is installed correctly with data files."
        ) from e
    try:
        return parse_properties(text)
    except ValueError as e:
        raise ConfigurationLoadingError(f"Invalid default configuration file {path}: {e}") from e


class DefaultPropertiesCache:
    """
    Single-assignment cells for default properties, one per resource.

    The first get_or_load() of a resource runs the reader under a lock;
    every later call returns the same read-only mapping. There is no
    invalidation.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._values: dict[str, Mapping[str, str]] = {}

    def is_loaded(self, resource: str = DEFAULT_RESOURCE) -> bool:
        return resource in self._values

    def get_or_load(
        self,
        reader: Callable[[], dict[str, str]],
        resource: str = DEFAULT_RESOURCE,
    ) -> Mapping[str, str]:
        """Return the cached properties of a resource, reading them on first access."""
        value = self._values.get(resource)
        if value is not None:
            return value

        with self._lock:
            if resource not in self._values:
                logger.debug(f"Loading default configuration from {resource}...")
                loaded = reader()
                self._values[resource] = MappingProxyType(dict(loaded))
                logger.debug(f"Default configuration loaded ({len(loaded)} properties)")
        return self._values[resource]


DEFAULT_PROPERTIES = DefaultPropertiesCache()
"""Process-wide cache used by loaders that are not given their own."""
