"""
Convenience Functions

Top-level functions for resolving table configurations without setting up
a loader explicitly. The loader is picked by DatatablesConfigurator.

Example:
    >>> from datatables_config import get_table_configuration
    >>> conf = get_table_configuration("myTables", locale="fr_FR")
    >>> conf.get_int(ConfigurationKey.AJAX_PIPE_SIZE)
    5
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from datatables_config.types.configuration import DEFAULT_GROUP_NAME

if TYPE_CHECKING:
    from datatables_config.config.settings import DatatablesSettings
    from datatables_config.types.table import ResolvedConfiguration, TableConfiguration


def resolve_configurations(
    locale: str | None = None,
    request: Any = None,
    settings: DatatablesSettings | None = None,
) -> ResolvedConfiguration:
    """
    Resolve every group's configuration for a locale.

    Args:
        locale: Locale tag such as "fr_FR" (None for the base bundle)
        request: Request context attached to each TableConfiguration
        settings: Loader settings (read from the environment when omitted)
    """
    from datatables_config.resolution.configurator import DatatablesConfigurator
    loader = DatatablesConfigurator.get_loader(settings)
    return loader.resolve(locale, request)


def get_table_configuration(
    group: str | None = None,
    *,
    locale: str | None = None,
    request: Any = None,
    settings: DatatablesSettings | None = None,
) -> TableConfiguration:
    """
    Resolve the configuration of a single group.

    Raises:
        UnknownGroupError: If no configuration declares the group
    """
    from datatables_config.exceptions import UnknownGroupError

    group = group or DEFAULT_GROUP_NAME
    resolved = resolve_configurations(locale, request, settings)
    try:
        return resolved.configurations[group]
    except KeyError:
        raise UnknownGroupError(group, sorted(resolved.groups)) from None
