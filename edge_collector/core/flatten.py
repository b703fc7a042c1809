# ==============================================================================
# Metadata Flattener
# ==============================================================================
"""
Flatten a nested client-metadata tree into a single-level mapping.

    >>> flatten({"browser": {"name": "Chrome", "major": "120"}, "ua": "..."})
    {'browser_name': 'Chrome', 'browser_major': '120', 'ua': '...'}

Only mappings are recursed into. Lists, None and scalars are leaves and
keep their original value.
"""

from collections.abc import Mapping
from typing import Any

SEPARATOR = "_"


def flatten(
    tree: Mapping[str, Any],
    parent_key: str = "",
    separator: str = SEPARATOR,
) -> dict[str, Any]:
    """
    Flatten a nested mapping using compound keys.

    Args:
        tree: Nested mapping of metadata values
        parent_key: Prefix accumulated from enclosing levels
        separator: String joining path segments

    Returns:
        New dict with one key per leaf. On key collision the last write wins.
    """
    flat: dict[str, Any] = {}
    for key, value in tree.items():
        compound_key = f"{parent_key}{separator}{key}" if parent_key else key
        if isinstance(value, Mapping):
            flat.update(flatten(value, compound_key, separator))
        else:
            flat[compound_key] = value
    return flat
