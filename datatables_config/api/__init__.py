"""
Public API

Modules:
    convenience: One-call resolution helpers
"""

from datatables_config.api.convenience import get_table_configuration, resolve_configurations

__all__ = ["get_table_configuration", "resolve_configurations"]
