"""
Configuration System

Settings controlling where table configurations are read from.

Settings Priority (highest to lowest):
    1. Programmatic (passed to DatatablesSettings())
    2. Environment variables (DATATABLES_* prefix)
    3. Config file (DatatablesSettings.from_file)
    4. Built-in defaults

Modules:
    settings: DatatablesSettings class
"""

from datatables_config.config.settings import DatatablesSettings

__all__ = ["DatatablesSettings"]
