"""
Configuration Resolution

From raw default and user properties to one TableConfiguration per group.

Modules:
    groups: Group discovery from user property keys
    merger: Per-group merging of defaults and user overrides
    mapper: Property names to ConfigurationKey mapping
    template_engine: JSTL message resolver default
    loader: ConfigurationLoader interface and standard implementation
    configurator: Loader selection from settings
"""

from datatables_config.resolution.configurator import DatatablesConfigurator
from datatables_config.resolution.groups import resolve_groups
from datatables_config.resolution.loader import ConfigurationLoader, StandardConfigurationLoader
from datatables_config.resolution.mapper import map_configuration
from datatables_config.resolution.merger import global_properties, grouped_properties
from datatables_config.resolution.template_engine import (
    JSTL_MESSAGE_RESOLVER,
    apply_template_engine_defaults,
)

__all__ = [
    "ConfigurationLoader",
    "DatatablesConfigurator",
    "JSTL_MESSAGE_RESOLVER",
    "StandardConfigurationLoader",
    "apply_template_engine_defaults",
    "global_properties",
    "grouped_properties",
    "map_configuration",
    "resolve_groups",
]
