"""
datatables-config - Table Configuration Resolution

Resolves the options of server-rendered data tables from the shipped
defaults and locale-specific user bundles, one configuration per group.

Example:
    >>> from datatables_config import resolve_configurations, ConfigurationKey
    >>> resolved = resolve_configurations("fr_FR")
    >>> sorted(resolved.groups)
    ['global', 'myTables']
    >>> resolved.configurations["myTables"].get(ConfigurationKey.FEATURE_PAGINATION_TYPE)
    'full_numbers'

Main Classes:
    StandardConfigurationLoader: Properties-file backed loader
    DatatablesConfigurator: Loader selection from settings
    DatatablesSettings: Lookup settings
    TableConfiguration: Options of one group
"""

__version__ = "0.3.0"

# Public API - lazy imports to keep "import datatables_config" cheap
def __getattr__(name: str):
    """Lazy import public API components."""

    if name in ("ConfigurationLoader", "StandardConfigurationLoader", "DatatablesConfigurator"):
        from datatables_config import resolution
        return getattr(resolution, name)

    if name == "DatatablesSettings":
        from datatables_config.config.settings import DatatablesSettings
        return DatatablesSettings

    # Convenience functions
    if name in ("resolve_configurations", "get_table_configuration"):
        from datatables_config.api import convenience
        return getattr(convenience, name)

    # Types
    if name in (
        "ConfigurationKey",
        "TableConfiguration",
        "ResolvedConfiguration",
        "DEFAULT_GROUP_NAME",
    ):
        from datatables_config import types
        return getattr(types, name)

    # Errors
    if name in ("ConfigurationError", "ConfigurationLoadingError", "UnknownGroupError"):
        from datatables_config import exceptions
        return getattr(exceptions, name)

    raise AttributeError(f"module 'datatables_config' has no attribute {name!r}")


__all__ = [
    # Main classes
    "ConfigurationLoader",
    "StandardConfigurationLoader",
    "DatatablesConfigurator",
    "DatatablesSettings",

    # Convenience functions
    "resolve_configurations",
    "get_table_configuration",

    # Types
    "ConfigurationKey",
    "TableConfiguration",
    "ResolvedConfiguration",
    "DEFAULT_GROUP_NAME",

    # Errors
    "ConfigurationError",
    "ConfigurationLoadingError",
    "UnknownGroupError",

    # Version
    "__version__",
]
