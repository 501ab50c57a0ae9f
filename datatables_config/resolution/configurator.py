"""Selects the ConfigurationLoader implementation from the settings."""

from __future__ import annotations

import importlib

from datatables_config.config.settings import DatatablesSettings
from datatables_config.exceptions import ConfigurationLoadingError
from datatables_config.resolution.loader import ConfigurationLoader


def _import_class(path: str) -> type:
    """Import "package.module:Class" or "package.module.Class"."""
    module_name, sep, class_name = path.partition(":")
    if not sep:
        module_name, _, class_name = path.rpartition(".")
    if not module_name or not class_name:
        raise ConfigurationLoadingError(f"Invalid loader class path: '{path}'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigurationLoadingError(f"Unable to import the loader module '{module_name}'") from e

    try:
        return getattr(module, class_name)
    except AttributeError as e:
        raise ConfigurationLoadingError(
            f"The module '{module_name}' has no loader class '{class_name}'"
        ) from e


class DatatablesConfigurator:
    """Factory for the configured ConfigurationLoader."""

    @staticmethod
    def get_loader(settings: DatatablesSettings | None = None) -> ConfigurationLoader:
        """
        Instantiate the loader named by settings.loader_class.

        Raises:
            ConfigurationLoadingError: If the class cannot be imported or is not a loader
        """
        settings = settings if settings is not None else DatatablesSettings()
        loader_class = _import_class(settings.loader_class)

        if not isinstance(loader_class, type) or not issubclass(loader_class, ConfigurationLoader):
            raise ConfigurationLoadingError(
                f"'{settings.loader_class}' is not a ConfigurationLoader implementation"
            )

        return loader_class(settings)
