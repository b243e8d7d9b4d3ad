from __future__ import annotations

"""
Domain Constants.

Fixed naming rules of the Xcode asset catalog layout and the generated
Swift surface.
"""

from typing import Tuple

# -----------------------------------------------------------------------------
# CATALOG LAYOUT
# -----------------------------------------------------------------------------

CATALOG_DIR_NAME = "Assets.xcassets"
IMAGES_DIR_NAME = "Images"
COLORS_DIR_NAME = "Colors"

IMAGESET_SUFFIX = ".imageset"
COLORSET_SUFFIX = ".colorset"
ASSET_SUFFIXES: Tuple[str, ...] = (IMAGESET_SUFFIX, COLORSET_SUFFIX)

# Both suffixes share the same length, the leaf name drops exactly this many chars
ASSET_SUFFIX_LENGTH = 9

IDENTIFIER_PATTERN = r"^[a-zA-Z0-9_]+$"

# -----------------------------------------------------------------------------
# GENERATED SURFACE
# -----------------------------------------------------------------------------

DEFAULT_NAMESPACE = "app"
IMAGES_STRUCT_NAME = "Images"
COLOR_CARRIERS: Tuple[str, ...] = ("Color", "UIColor")
DEFAULT_OUTPUT_PATH = "./Assets.swift"
DEFAULT_SHELL = "/bin/sh"
