from __future__ import annotations

"""
Core orchestration pipeline.

This module coordinates the entire generation workflow:
1. Validates configuration and the search root.
2. Locates the asset catalog.
3. Builds the image and color trees.
4. Renders images once and colors once per carrier type.
5. Assembles the Swift source and writes it.

Nothing is written unless both trees are valid.
"""

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from assetgen.core.analysis.policies import ColorsPolicy, ImagesPolicy
from assetgen.core.analysis.source_template import compose_source
from assetgen.core.analysis.tree_generator import build_asset_tree, count_assets
from assetgen.core.analysis.tree_renderer import render_asset_tree
from assetgen.core.pipeline.components.writer import write_source_file
from assetgen.core.pipeline.stages.validator import validate_config
from assetgen.domain.pipeline_models import (
    ERROR_CONFIGURATION,
    ERROR_DISCOVERY,
    ERROR_STRUCTURAL,
    ERROR_WRITE,
    GenerationResult,
    create_error_result,
    create_success_result,
)
from assetgen.domain.tree_models import AssetNode
from assetgen.infra.fs import ListDir, list_directory, locate_assets_root, normalize_path

logger = logging.getLogger(__name__)


def run_pipeline(
        config: Optional[Dict[str, Any]],
        *,
        dry_run: bool = False,
        list_dir: ListDir = list_directory,
) -> GenerationResult:
    """
    Execute the full generation pipeline.

    Args:
        config: The configuration dictionary (raw or partial).
        dry_run: If True, render the source without writing it.
        list_dir: Directory listing capability used by the tree builder.

    Returns:
        GenerationResult: Object containing status, counts, and summary.
    """
    logger.info("Asset generation started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)

    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    if not cfg["input_path"]:
        msg = "Search directory has not been defined."
        logger.error(msg)
        return create_error_result(msg, ERROR_CONFIGURATION, cfg)

    input_path = normalize_path(cfg["input_path"], os.getcwd())
    if not os.path.isdir(input_path):
        msg = f"Invalid search directory: {input_path}"
        logger.error(msg)
        return create_error_result(msg, ERROR_CONFIGURATION, cfg, input_path)

    output_path = normalize_path(cfg["output_path"], os.getcwd())

    # -------------------------------------------------------------------------
    # 2) Catalog Discovery
    # -------------------------------------------------------------------------
    try:
        assets_path = locate_assets_root(input_path, cfg["catalog_name"], cfg["shell_path"])
    except OSError as e:
        msg = f"Cannot execute shell '{cfg['shell_path']}': {e}"
        logger.error(msg)
        return create_error_result(msg, ERROR_DISCOVERY, cfg, input_path)

    if not assets_path:
        msg = f"Assets directory not found under {input_path}."
        logger.warning(msg)
        return create_error_result(msg, ERROR_DISCOVERY, cfg, input_path)

    logger.info(f"Asset catalog: {assets_path}")

    # -------------------------------------------------------------------------
    # 3) Tree Construction
    # -------------------------------------------------------------------------
    images_root, error = _build_root(cfg["images_dir"], assets_path, cfg, list_dir)
    if images_root is None:
        logger.warning(error)
        return create_error_result(error, ERROR_STRUCTURAL, cfg, input_path, assets_path)

    colors_root, error = _build_root(cfg["colors_dir"], assets_path, cfg, list_dir)
    if colors_root is None:
        logger.warning(error)
        return create_error_result(error, ERROR_STRUCTURAL, cfg, input_path, assets_path)

    image_count = count_assets(images_root)
    color_count = count_assets(colors_root)
    logger.debug(f"Found {image_count} image set(s) and {color_count} color set(s).")

    # -------------------------------------------------------------------------
    # 4) Rendering & Assembly
    # -------------------------------------------------------------------------
    namespace = cfg["namespace_name"]
    images_code = render_asset_tree(images_root, ImagesPolicy(), namespace)
    colors_code: List[Tuple[str, str]] = [
        (carrier, render_asset_tree(colors_root, ColorsPolicy(carrier), namespace))
        for carrier in cfg["color_carriers"]
    ]
    source = compose_source(images_code, colors_code)

    # -------------------------------------------------------------------------
    # 5) Persistence
    # -------------------------------------------------------------------------
    if dry_run:
        logger.info("Dry run: skipping write.")
    else:
        try:
            write_source_file(output_path, source)
        except (OSError, UnicodeEncodeError) as e:
            msg = f"Failed to write generated source to {output_path}: {e}"
            logger.error(msg)
            return create_error_result(msg, ERROR_WRITE, cfg, input_path, assets_path)
        logger.info(f"Generated source written to {output_path}")

    summary = {
        "assets_path": assets_path,
        "output_path": output_path,
        "images": image_count,
        "colors": color_count,
        "color_carriers": list(cfg["color_carriers"]),
        "lines": source.count("\n"),
        "dry_run": dry_run,
    }

    return create_success_result(
        cfg, input_path, assets_path, output_path,
        image_count, color_count, source, dry_run, summary
    )

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _build_root(
        dir_name: str,
        assets_path: str,
        cfg: Dict[str, Any],
        list_dir: ListDir,
) -> Tuple[Optional[AssetNode], str]:
    """
    Build one asset-kind tree, reporting why it is unusable when it is.

    Returns:
        Tuple[Optional[AssetNode], str]: The tree (or None) and an error message.
    """
    try:
        root = build_asset_tree(
            dir_name,
            assets_path,
            list_dir,
            identifier_pattern=cfg["allowed_names"],
            strict=True,
        )
    except OSError as e:
        return None, f"{dir_name} directory is missing or unreadable in {assets_path}: {e}"

    if root is None or not root.is_container:
        return None, f"No assets found in {os.path.join(assets_path, dir_name)}."

    return root, ""
