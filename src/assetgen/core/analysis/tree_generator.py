from __future__ import annotations

"""
Asset Tree Generator.

Builds the hierarchical asset representation from directory listings.
Every entry is classified as a grouping folder, an asset leaf or noise;
folders that end up without any asset beneath them are pruned while
the tree is being built.
"""

import logging
import os
import re
from typing import Optional, Union

from assetgen.domain.constants import (
    ASSET_SUFFIX_LENGTH,
    ASSET_SUFFIXES,
    IDENTIFIER_PATTERN,
)
from assetgen.domain.tree_models import AssetNode, EntryClass, EntryKind, NodeKind
from assetgen.infra.fs import ListDir, list_directory

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def classify_entry(
        name: str,
        identifier_pattern: Union[str, re.Pattern[str]] = IDENTIFIER_PATTERN,
) -> EntryClass:
    """
    Decide what a directory entry represents.

    The identifier check runs first: a plain identifier is a grouping folder.
    Names carrying an asset-set suffix become leaves named after the entry
    minus the suffix. Anything else (hidden files, Contents.json, other
    extensions) is ignored.

    Args:
        name: Entry name as returned by the directory listing.
        identifier_pattern: Regex a folder name must match to become a container.

    Returns:
        EntryClass: Tagged classification result.
    """
    if re.search(identifier_pattern, name):
        return EntryClass(EntryKind.CONTAINER)

    if any(suffix in name for suffix in ASSET_SUFFIXES):
        return EntryClass(EntryKind.CONTENT, asset_name=name[:-ASSET_SUFFIX_LENGTH])

    return EntryClass(EntryKind.IGNORED)


def build_asset_tree(
        name: str,
        base_path: str,
        list_dir: ListDir = list_directory,
        *,
        identifier_pattern: Union[str, re.Pattern[str]] = IDENTIFIER_PATTERN,
        strict: bool = False,
) -> Optional[AssetNode]:
    """
    Recursively build the asset tree rooted at `base_path/name`.

    Listing failures below the root degrade to an empty listing, which
    prunes the folder. Sibling order follows the listing verbatim.

    Args:
        name: Entry being classified at this recursion step.
        base_path: Directory containing the entry.
        list_dir: Capability returning the entry names of a directory.
        identifier_pattern: Regex a folder name must match to become a container.
        strict: Propagate an OSError raised while listing this entry instead
                of treating it as empty. Only applies to the current level.

    Returns:
        Optional[AssetNode]: The built node, or None if the entry is ignored
                             or holds no asset.

    Raises:
        OSError: If strict is set and the entry cannot be listed.
    """
    pattern = re.compile(identifier_pattern)
    return _build_node(name, base_path, list_dir, pattern, strict)


def count_assets(node: Optional[AssetNode]) -> int:
    """Count the content leaves beneath (and including) a node."""
    if node is None:
        return 0
    if node.kind is NodeKind.CONTENT:
        return 1
    return sum(count_assets(child) for child in node.children or ())

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _build_node(
        name: str,
        base_path: str,
        list_dir: ListDir,
        pattern: re.Pattern[str],
        strict: bool,
) -> Optional[AssetNode]:
    """Classify one entry and expand it if it is a container."""
    entry = classify_entry(name, pattern)

    if entry.kind is EntryKind.CONTENT:
        return AssetNode(NodeKind.CONTENT, entry.asset_name)

    if entry.kind is EntryKind.IGNORED:
        return None

    path = os.path.join(base_path, name)
    try:
        entries = list_dir(path)
    except OSError as e:
        if strict:
            raise
        logger.debug(f"Skipping unreadable directory '{path}': {e}")
        entries = []

    children = tuple(
        child for child in (
            _build_node(entry_name, path, list_dir, pattern, strict=False)
            for entry_name in entries
        )
        if child is not None
    )

    # Prune folders that hold no asset
    if not children:
        return None

    return AssetNode(NodeKind.CONTAINER, name, children)
