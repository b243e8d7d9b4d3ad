from __future__ import annotations

"""
Asset Tree Renderer.

Converts an asset tree into nested Swift type declarations. The depth-first
walk, indentation and spacing rules are shared by every asset kind; the
leaf policy supplies the kind-specific lines.
"""

import dataclasses
from typing import List

from assetgen.core.analysis.policies import LeafPolicy
from assetgen.domain.constants import DEFAULT_NAMESPACE
from assetgen.domain.tree_models import AssetNode
from assetgen.utils.naming import type_name

INDENT = "\t"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_asset_tree(
        tree: AssetNode,
        policy: LeafPolicy,
        namespace_name: str = DEFAULT_NAMESPACE,
) -> str:
    """
    Render a built asset tree into Swift source text.

    The root folder name (e.g. 'Images') is replaced by the namespace name.
    Output order mirrors the tree order at every level, depth-first.

    Args:
        tree: Root container returned by the tree builder.
        policy: Leaf emission rules for the asset kind.
        namespace_name: Name given to the outermost type.

    Returns:
        str: Newline-terminated Swift declarations, root block at one tab.
    """
    root = dataclasses.replace(tree, name=namespace_name)
    lines: List[str] = []
    _render_block(root, policy, depth=1, lines=lines)
    return "".join(lines)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _render_block(
        node: AssetNode,
        policy: LeafPolicy,
        depth: int,
        lines: List[str],
) -> None:
    """Append the type block of one container, nested blocks included."""
    indent = INDENT * depth
    member_indent = INDENT * (depth + 1)

    lines.append(f"{indent}{policy.open_block(type_name(node.name))}\n")

    for leaf in node.content_children():
        lines.append(f"{member_indent}{policy.render_leaf(leaf.name)}\n")

    nested = node.container_children()
    if nested:
        lines.append("\n")
        for child in nested:
            _render_block(child, policy, depth + 1, lines)

    lines.append(f"{indent}}}\n")
