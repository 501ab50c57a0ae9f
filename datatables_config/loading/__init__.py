"""
Property Loading

Reading default and user properties from disk.

Modules:
    properties: .properties file parser
    bundles: Locale-aware bundle lookup and merging
    defaults: Shipped defaults and their process-wide cache
"""

from datatables_config.loading.bundles import (
    bundle_files,
    candidate_suffixes,
    load_bundle,
    normalize_locale,
)
from datatables_config.loading.defaults import (
    DEFAULT_PROPERTIES,
    DefaultPropertiesCache,
    read_default_resource,
)
from datatables_config.loading.properties import parse_properties, read_properties

__all__ = [
    "DEFAULT_PROPERTIES",
    "DefaultPropertiesCache",
    "bundle_files",
    "candidate_suffixes",
    "load_bundle",
    "normalize_locale",
    "parse_properties",
    "read_default_resource",
    "read_properties",
]
