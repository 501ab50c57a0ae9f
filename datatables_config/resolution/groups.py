"""
Group Resolution

User property keys are prefixed with the group they configure:

    global.feature.info=false      -> group "global"
    myTables.feature.info=true     -> group "myTables"

The default group is always part of the result, even without user keys.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from datatables_config.types.configuration import DEFAULT_GROUP_NAME, LOCALE_RESOLVER_KEY

logger = logging.getLogger(__name__)


def group_of(key: str) -> str | None:
    """Group prefix of a property key, or None when the key has none."""
    index = key.find(".")
    if index <= 0:
        return None
    return key[:index]


def strip_group(key: str) -> str:
    """Property key without its group prefix."""
    return key.partition(".")[2] if "." in key else key


def is_reserved(key: str) -> bool:
    """Whether a (prefixed or bare) key is the reserved locale resolver key."""
    return key == LOCALE_RESOLVER_KEY or strip_group(key) == LOCALE_RESOLVER_KEY


def resolve_groups(user_properties: Mapping[str, str]) -> set[str]:
    """
    Collect the group names declared by user properties.

    Args:
        user_properties: Flat user properties, keys prefixed with their group

    Returns:
        Distinct group names, always including the default group
    """
    groups: set[str] = set()

    for key in user_properties:
        if is_reserved(key):
            continue
        group = group_of(key)
        if group is None:
            logger.warning(f"The property '{key}' has no group prefix and is ignored")
            continue
        groups.add(group)

    # The default group is always added
    groups.add(DEFAULT_GROUP_NAME)

    logger.debug(f"{len(groups)} groups resolved ({sorted(groups)})")
    return groups
