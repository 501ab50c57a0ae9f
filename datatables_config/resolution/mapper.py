"""Turns a group's merged properties into a TableConfiguration."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from datatables_config.types.configuration import ConfigurationKey
from datatables_config.types.table import TableConfiguration

logger = logging.getLogger(__name__)


def map_configuration(
    properties: Mapping[str, str],
    group: str,
    request: Any = None,
) -> TableConfiguration:
    """
    Map merged properties onto configuration keys.

    Unknown keys are skipped with a warning so that properties files written
    for other versions still load.
    """
    staging: dict[ConfigurationKey, str] = {}

    for name, value in properties.items():
        key = ConfigurationKey.find_by_name(name)
        if key is None:
            logger.warning(f"The property '{name}' (inside the '{group}' group) doesn't exist")
            continue
        staging[key] = str(value)

    return TableConfiguration(options=staging, request=request)
