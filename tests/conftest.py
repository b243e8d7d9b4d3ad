from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for configuration dictionaries and sample catalogs.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, Iterable

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------
def make_asset_sets(parent: Path, names: Iterable[str]) -> None:
    """Create asset-set folders (with their Contents.json) under parent."""
    parent.mkdir(parents=True, exist_ok=True)
    for name in names:
        asset_dir = parent / name
        asset_dir.mkdir()
        (asset_dir / "Contents.json").write_text("{}", encoding="utf-8")


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """
    Create a project holding a minimal asset catalog.

    Structure:
    /project
      /App
        /Assets.xcassets
          Contents.json
          /Images
            /Icons
              home.imageset
              back.imageset
          /Colors
            /Brand
              primary.colorset
    """
    project = tmp_path / "project"
    catalog = project / "App" / "Assets.xcassets"
    catalog.mkdir(parents=True)
    (catalog / "Contents.json").write_text("{}", encoding="utf-8")

    make_asset_sets(catalog / "Images" / "Icons", ["home.imageset", "back.imageset"])
    make_asset_sets(catalog / "Colors" / "Brand", ["primary.colorset"])

    return project


@pytest.fixture
def mock_config_dict(sample_project: Path, tmp_path: Path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Mirrors the structure defined in 'assetgen.domain.config'.
    """
    return {
        "input_path": str(sample_project),
        "output_path": str(tmp_path / "out" / "Assets.swift"),
        "shell_path": "/bin/sh",
        "catalog_name": "Assets.xcassets",
        "images_dir": "Images",
        "colors_dir": "Colors",
        "allowed_names": r"^[a-zA-Z0-9_]+$",
        "namespace_name": "app",
        "color_carriers": ["Color", "UIColor"],
    }


@pytest.fixture
def asset_sets():
    """Expose make_asset_sets to tests that lay out their own catalogs."""
    return make_asset_sets
