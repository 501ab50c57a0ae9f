"""
Locale-aware Bundle Lookup

Finds and merges properties bundles following resource bundle rules:

    datatables_fr_FR.properties   (most specific, wins)
    datatables_fr.properties
    datatables.properties         (base bundle, least specific)

Every existing candidate of the chain contributes; values from more
specific files override values from less specific ones.
"""

from __future__ import annotations

import logging
from pathlib import Path

from datatables_config.loading.properties import read_properties

logger = logging.getLogger(__name__)

BUNDLE_EXTENSION = ".properties"


def normalize_locale(locale: str | None) -> tuple[str, ...]:
    """
    Split a locale tag into (language, COUNTRY, variant) parts.

    Accepts "fr", "fr_FR", "fr-fr" or "en_US_POSIX". Empty trailing parts
    are dropped, so None and "" give an empty tuple.
    """
    if not locale:
        return ()
    parts = locale.strip().replace("-", "_").split("_", 2)
    normalized = [parts[0].lower()]
    if len(parts) > 1:
        normalized.append(parts[1].upper())
    if len(parts) > 2:
        normalized.append(parts[2])
    while normalized and not normalized[-1]:
        normalized.pop()
    return tuple(normalized)


def candidate_suffixes(locale: str | None) -> list[str]:
    """Locale suffixes to try, most specific first, excluding the base bundle."""
    parts = normalize_locale(locale)
    return ["_".join(parts[:size]) for size in range(len(parts), 0, -1)]


def _locate(file_name: str, directories: list[Path]) -> Path | None:
    for directory in directories:
        candidate = directory / file_name
        if candidate.is_file():
            return candidate
    return None


def _find_candidates(base_name: str, locale: str | None, directories: list[Path]) -> list[Path]:
    found = []
    for suffix in candidate_suffixes(locale):
        path = _locate(f"{base_name}_{suffix}{BUNDLE_EXTENSION}", directories)
        if path is not None:
            found.append(path)
    return found


def bundle_files(
    base_name: str,
    locale: str | None,
    directories: list[Path],
    default_locale: str | None = None,
) -> list[Path]:
    """
    Files making up the bundle for a locale, least specific first.

    When no file matches the requested locale, the default locale's chain is
    tried before falling back to the base bundle alone.
    """
    found = _find_candidates(base_name, locale, directories)
    if not found and default_locale and normalize_locale(default_locale) != normalize_locale(locale):
        found = _find_candidates(base_name, default_locale, directories)

    files = list(reversed(found))
    base = _locate(f"{base_name}{BUNDLE_EXTENSION}", directories)
    if base is not None:
        files.insert(0, base)
    return files


def load_bundle(
    base_name: str,
    locale: str | None,
    directories: list[Path],
    default_locale: str | None = None,
) -> dict[str, str] | None:
    """
    Load and flatten the bundle for a locale.

    Returns:
        Merged properties, or None when no bundle file exists in directories
    """
    files = bundle_files(base_name, locale, directories, default_locale)
    if not files:
        return None

    properties: dict[str, str] = {}
    for path in files:
        logger.debug(f"Reading bundle file {path}")
        properties.update(read_properties(path))
    return properties
