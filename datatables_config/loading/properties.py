"""Java-style .properties files, read with jproperties."""

from __future__ import annotations

from pathlib import Path

from jproperties import ParseError, Properties


def parse_properties(text: str | bytes) -> dict[str, str]:
    """
    Parse properties text into a dict.

    Raises:
        ValueError: On malformed input, such as a bad \\uXXXX escape
    """
    if isinstance(text, str):
        text = text.encode("utf-8")

    props = Properties()
    try:
        props.load(text, "utf-8")
    except (ParseError, ValueError) as e:
        raise ValueError(f"Malformed properties: {e}") from e
    return {key: value.data for key, value in props.items()}


def read_properties(path: Path) -> dict[str, str]:
    """Read a UTF-8 properties file."""
    with path.open("rb") as handle:
        return parse_properties(handle.read())
