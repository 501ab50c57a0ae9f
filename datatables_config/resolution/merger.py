"""
Property Merging

Builds the flat, prefix-free property set of each group.

Precedence (last applied wins):
    1. Shipped defaults
    2. User overrides of the default group (global.*)
    3. User overrides of the group itself (<group>.*)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from datatables_config.resolution.groups import is_reserved, strip_group
from datatables_config.types.configuration import DEFAULT_GROUP_NAME, LOCALE_RESOLVER_KEY

logger = logging.getLogger(__name__)


def _overlay(target: dict[str, str], user_properties: Mapping[str, str], group: str) -> None:
    prefix = f"{group}."
    for key, value in user_properties.items():
        if key.startswith(prefix) and not is_reserved(key):
            target[key[len(prefix):]] = value


def global_properties(
    default_properties: Mapping[str, str],
    user_properties: Mapping[str, str],
) -> dict[str, str]:
    """Defaults with the default group's user overrides applied, prefixes stripped."""
    merged: dict[str, str] = {}
    for key, value in default_properties.items():
        if not is_reserved(key):
            merged[strip_group(key)] = value

    _overlay(merged, user_properties, DEFAULT_GROUP_NAME)
    return merged


def grouped_properties(
    group: str,
    global_props: Mapping[str, str],
    user_properties: Mapping[str, str],
) -> dict[str, str]:
    """Global properties with one group's user overrides applied."""
    merged = dict(global_props)
    _overlay(merged, user_properties, group)

    logger.debug(f"The group '{group}' is initialized and contains {len(merged)} properties")
    return merged


def locale_resolver(
    default_properties: Mapping[str, str],
    user_properties: Mapping[str, str],
) -> str | None:
    """Value of the reserved locale resolver key, user value first."""
    user_key = f"{DEFAULT_GROUP_NAME}.{LOCALE_RESOLVER_KEY}"
    for candidate in (user_properties.get(user_key), user_properties.get(LOCALE_RESOLVER_KEY)):
        if candidate and candidate.strip():
            return candidate.strip()

    for key, value in default_properties.items():
        if is_reserved(key) and value.strip():
            return value.strip()
    return None
