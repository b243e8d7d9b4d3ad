from __future__ import annotations

"""
Configuration Domain Management.

Defines the default runtime configuration that drives a generation run.
Values are overridden by the CLI layer and normalized by the validator.
"""

from typing import Any, Dict

from assetgen.domain.constants import (
    CATALOG_DIR_NAME,
    COLOR_CARRIERS,
    COLORS_DIR_NAME,
    DEFAULT_NAMESPACE,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_SHELL,
    IDENTIFIER_PATTERN,
    IMAGES_DIR_NAME,
)

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration (Session State).
    This dictionary drives the behavior of the Pipeline.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "input_path": "",
        "output_path": DEFAULT_OUTPUT_PATH,

        # Discovery
        "shell_path": DEFAULT_SHELL,
        "catalog_name": CATALOG_DIR_NAME,

        # Catalog Layout
        "images_dir": IMAGES_DIR_NAME,
        "colors_dir": COLORS_DIR_NAME,
        "allowed_names": IDENTIFIER_PATTERN,

        # Generated Surface
        "namespace_name": DEFAULT_NAMESPACE,
        "color_carriers": list(COLOR_CARRIERS),
    }
