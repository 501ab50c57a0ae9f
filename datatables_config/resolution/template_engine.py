"""
Template Engine Integration

When the JSP/JSTL integration is deployed, tables get its message resolver
unless the user configured one. The caller states whether the integration
is present; nothing here probes the environment.
"""

from __future__ import annotations

import logging

from datatables_config.types.configuration import DEFAULT_GROUP_NAME, ConfigurationKey

logger = logging.getLogger(__name__)

JSTL_MESSAGE_RESOLVER = "datatables.jsp.i18n.JstlMessageResolver"


def apply_template_engine_defaults(
    user_properties: dict[str, str] | None,
    *,
    jstl_present: bool,
) -> dict[str, str] | None:
    """
    Fill in the JSTL message resolver, in place.

    Every blank message resolver entry is set to the JSTL resolver. Empty
    user properties receive a default group entry instead. Nothing changes
    when the integration is absent or there are no user properties.

    Returns:
        The same mapping, for chaining
    """
    if not jstl_present or user_properties is None:
        return user_properties

    resolver_name = ConfigurationKey.INTERNAL_MESSAGE_RESOLVER.value

    if not user_properties:
        user_properties[f"{DEFAULT_GROUP_NAME}.{resolver_name}"] = JSTL_MESSAGE_RESOLVER
        logger.debug("JSTL message resolver set for the default group")
        return user_properties

    for key, value in list(user_properties.items()):
        if resolver_name in key and not value.strip():
            user_properties[key] = JSTL_MESSAGE_RESOLVER
            logger.debug(f"JSTL message resolver set for '{key}'")

    return user_properties
