"""
Configuration Loaders

A loader turns the shipped defaults and the user bundle of a locale into
one TableConfiguration per group.

Resolution pass:
    loader = StandardConfigurationLoader(settings)
    result = loader.resolve("fr_FR", request)
    result.configurations["myTables"]  # -> TableConfiguration

Or step by step, threading the intermediate state explicitly:
    defaults = loader.load_default_configuration()
    user = loader.load_user_configuration("fr_FR")
    groups = loader.resolve_groups(user)
    loader.resolve_configurations(output, "fr_FR", request, user_properties=user, groups=groups)

Loaders keep no per-call state, so one instance may serve concurrent
resolutions for different locales.
"""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from functools import partial
from pathlib import Path
from typing import Any

from datatables_config.config.settings import DatatablesSettings
from datatables_config.loading.bundles import load_bundle
from datatables_config.loading.defaults import (
    DEFAULT_PROPERTIES,
    DefaultPropertiesCache,
    read_default_resource,
)
from datatables_config.resolution.groups import resolve_groups
from datatables_config.resolution.mapper import map_configuration
from datatables_config.resolution.merger import global_properties, grouped_properties, locale_resolver
from datatables_config.resolution.template_engine import apply_template_engine_defaults
from datatables_config.types.table import ResolvedConfiguration, TableConfiguration

logger = logging.getLogger(__name__)


def context_directories() -> list[Path]:
    """Directories of the process-wide import path, searched last."""
    return [Path(p) for p in sys.path]


class ConfigurationLoader(ABC):
    """
    Abstract interface for configuration loaders.

    Custom implementations are selected through the loader_class setting
    and must accept a DatatablesSettings instance as their only positional
    argument.
    """

    @abstractmethod
    def load_default_configuration(self) -> Mapping[str, str]:
        """
        Return the shipped default properties.

        Raises:
            ConfigurationLoadingError: If the defaults cannot be read
        """
        ...

    @abstractmethod
    def load_user_configuration(self, locale: str | None) -> dict[str, str]:
        """Return the user properties for a locale (empty when none exist)."""
        ...

    @abstractmethod
    def resolve_groups(self, user_properties: Mapping[str, str]) -> set[str]:
        """Return the group names declared by user properties."""
        ...

    @abstractmethod
    def resolve_configurations(
        self,
        output: dict[str, TableConfiguration],
        locale: str | None,
        request: Any,
        *,
        user_properties: Mapping[str, str],
        groups: set[str],
    ) -> None:
        """Store one TableConfiguration per group into output, replacing existing entries."""
        ...

    def resolve(
        self,
        locale: str | None = None,
        request: Any = None,
        output: dict[str, TableConfiguration] | None = None,
    ) -> ResolvedConfiguration:
        """
        Run a full resolution pass for one locale.

        Args:
            locale: Locale tag used for the user bundle lookup
            request: Request context attached to every TableConfiguration
            output: Optional map to populate in addition to the result

        Returns:
            ResolvedConfiguration with the groups and their configurations
        """
        default_properties = self.load_default_configuration()
        user_properties = self.load_user_configuration(locale)
        groups = self.resolve_groups(user_properties)

        if output is None:
            output = {}
        self.resolve_configurations(
            output, locale, request, user_properties=user_properties, groups=groups
        )

        return ResolvedConfiguration(
            locale=locale,
            groups=frozenset(groups),
            configurations={group: output[group] for group in groups},
            locale_resolver=locale_resolver(default_properties, user_properties),
        )


class StandardConfigurationLoader(ConfigurationLoader):
    """
    Default loader backed by properties files.

    User bundle lookup order:
        1. The externalized directory (external_configuration_path)
        2. The configured search path
        3. Every directory on sys.path
    The first strategy that finds a bundle file wins. No bundle at all means
    the defaults apply unchanged.
    """

    def __init__(
        self,
        settings: DatatablesSettings | None = None,
        *,
        jstl_present: bool | None = None,
        cache: DefaultPropertiesCache | None = None,
        resource_reader: Callable[[], dict[str, str]] | None = None,
    ) -> None:
        """
        Initialize the loader.

        Args:
            settings: Lookup settings (read from the environment when omitted)
            jstl_present: Overrides settings.jstl_present
            cache: Cache for the defaults; the process-wide one when omitted
            resource_reader: Reads the default properties on a cache miss
        """
        self.settings = settings if settings is not None else DatatablesSettings()
        self.jstl_present = self.settings.jstl_present if jstl_present is None else jstl_present
        self._cache = cache if cache is not None else DEFAULT_PROPERTIES
        self._resource_reader = resource_reader or partial(
            read_default_resource, self.settings.default_resource
        )

    def load_default_configuration(self) -> Mapping[str, str]:
        return self._cache.get_or_load(self._resource_reader, self.settings.default_resource)

    def load_user_configuration(self, locale: str | None) -> dict[str, str]:
        bundle: dict[str, str] | None = None

        # First check if the bundle is externalized
        path = self.settings.external_configuration_path
        if path and path.strip():
            directory = Path(path.strip())
            if not directory.is_dir():
                logger.warning(f"Wrong path to the externalized bundle: '{directory}' is not a directory")
            else:
                bundle = self._load_bundle(locale, [directory])
                if bundle is None:
                    logger.info(f"No *.properties file in {directory}. Trying to lookup in the search path...")

        if bundle is None:
            bundle = self._load_bundle(locale, [Path(p) for p in self.settings.search_path])

        if bundle is None:
            bundle = self._load_bundle(locale, context_directories())

        if bundle is None:
            logger.debug("No custom configuration. Using default one.")
            return {}

        return bundle

    def _load_bundle(self, locale: str | None, directories: list[Path]) -> dict[str, str] | None:
        try:
            return load_bundle(
                self.settings.user_bundle_name,
                locale,
                directories,
                default_locale=self.settings.default_locale,
            )
        except (OSError, ValueError) as e:
            logger.warning(f"Unreadable user bundle in {[str(d) for d in directories]}: {e}")
            return None

    def resolve_groups(self, user_properties: Mapping[str, str]) -> set[str]:
        return resolve_groups(user_properties)

    def resolve_configurations(
        self,
        output: dict[str, TableConfiguration],
        locale: str | None,
        request: Any,
        *,
        user_properties: Mapping[str, str],
        groups: set[str],
    ) -> None:
        logger.debug(f"Resolving configurations for the locale {locale}...")

        default_properties = self.load_default_configuration()
        adjusted = apply_template_engine_defaults(
            dict(user_properties), jstl_present=self.jstl_present
        )

        global_props = global_properties(default_properties, adjusted)

        for group in sorted(groups):
            logger.debug(f"Resolving configurations for the group {group}...")
            grouped = grouped_properties(group, global_props, adjusted)
            output[group] = map_configuration(grouped, group, request)

        logger.debug(f"{len(groups)} group(s) resolved ({sorted(groups)}) for the locale {locale}")
