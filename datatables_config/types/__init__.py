"""
Type Definitions

Value types shared by the loading and resolution layers.

Modules:
    configuration: ConfigurationKey enum and reserved names
    table: TableConfiguration and ResolvedConfiguration models
"""

from datatables_config.types.configuration import (
    DEFAULT_GROUP_NAME,
    LOCALE_RESOLVER_KEY,
    ConfigurationKey,
)
from datatables_config.types.table import ResolvedConfiguration, TableConfiguration

__all__ = [
    "DEFAULT_GROUP_NAME",
    "LOCALE_RESOLVER_KEY",
    "ConfigurationKey",
    "ResolvedConfiguration",
    "TableConfiguration",
]
