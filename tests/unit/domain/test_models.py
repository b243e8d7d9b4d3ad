from __future__ import annotations

"""
Unit tests for Domain Models.

Verifies:
1. Data integrity of GenerationResult factories (Success/Error).
2. Immutability of frozen dataclasses.
3. Child filtering helpers on AssetNode.
"""

import dataclasses

import pytest

from assetgen.domain.config import get_default_config
from assetgen.domain.pipeline_models import (
    ERROR_STRUCTURAL,
    GenerationResult,
    create_error_result,
    create_success_result,
)
from assetgen.domain.tree_models import AssetNode, NodeKind


def test_create_success_result_populates_fields(mock_config_dict):
    result = create_success_result(
        cfg=mock_config_dict,
        input_path="/tmp/project",
        assets_path="/tmp/project/Assets.xcassets",
        output_path="/tmp/Assets.swift",
        image_count=2,
        color_count=1,
        source="import SwiftUI\n",
    )

    assert isinstance(result, GenerationResult)
    assert result.ok is True
    assert result.error == ""
    assert result.error_kind == ""
    assert result.namespace_name == "app"
    assert result.image_count == 2
    assert result.color_count == 1
    assert result.dry_run is False
    assert result.summary == {}


def test_create_error_result_handles_defaults(mock_config_dict):
    result = create_error_result("No assets found.", ERROR_STRUCTURAL, mock_config_dict)

    assert result.ok is False
    assert result.error == "No assets found."
    assert result.error_kind == ERROR_STRUCTURAL
    assert result.input_path == ""
    assert result.source == ""
    assert result.output_path == mock_config_dict["output_path"]


def test_result_is_immutable(mock_config_dict):
    result = create_error_result("x", ERROR_STRUCTURAL, mock_config_dict)

    with pytest.raises(dataclasses.FrozenInstanceError):
        result.ok = True  # type: ignore[misc]


def test_asset_node_child_filters_preserve_order():
    node = AssetNode(NodeKind.CONTAINER, "Images", (
        AssetNode(NodeKind.CONTAINER, "Z"),
        AssetNode(NodeKind.CONTENT, "b"),
        AssetNode(NodeKind.CONTAINER, "A"),
        AssetNode(NodeKind.CONTENT, "a"),
    ))

    assert node.is_container
    assert [c.name for c in node.content_children()] == ["b", "a"]
    assert [c.name for c in node.container_children()] == ["Z", "A"]


def test_leaf_child_filters_are_empty():
    leaf = AssetNode(NodeKind.CONTENT, "home")

    assert not leaf.is_container
    assert leaf.content_children() == ()
    assert leaf.container_children() == ()


def test_default_config_values():
    cfg = get_default_config()

    assert cfg["input_path"] == ""
    assert cfg["output_path"] == "./Assets.swift"
    assert cfg["allowed_names"] == r"^[a-zA-Z0-9_]+$"
    assert cfg["namespace_name"] == "app"
    assert cfg["images_dir"] == "Images"
    assert cfg["colors_dir"] == "Colors"
    assert cfg["color_carriers"] == ["Color", "UIColor"]
    assert cfg["shell_path"] == "/bin/sh"
