from __future__ import annotations

"""
Identifier Naming Helpers.

Pure string transformations used when turning asset and folder names
into Swift identifiers.
"""


def lowercase_first_letter(name: str) -> str:
    """Lowercase only the first character: 'HomeIcon' -> 'homeIcon'."""
    return name[:1].lower() + name[1:]


def type_name(name: str) -> str:
    """Swift type name used for a folder: the fully lowercased folder name."""
    return name.lower()
