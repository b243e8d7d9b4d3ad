from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result structure and factory functions used to communicate
generation outcomes between the pipeline engine and the CLI layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

# -----------------------------------------------------------------------------
# ERROR TAXONOMY
# -----------------------------------------------------------------------------

ERROR_CONFIGURATION = "configuration"
ERROR_DISCOVERY = "discovery"
ERROR_STRUCTURAL = "structural"
ERROR_WRITE = "write"

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class GenerationResult:
    """
    Unified result object of a complete generation run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        error_kind: Failure category (configuration/discovery/structural/write).
        input_path: Normalized search root.
        assets_path: Located asset catalog directory.
        output_path: Destination of the generated source.
        namespace_name: Name substituted for the tree roots.
        image_count: Number of image leaves rendered.
        color_count: Number of color leaves rendered.
        source: Generated Swift source (kept for dry runs and reporting).
        dry_run: Whether persistence was skipped.
        summary: Technical execution summary.
    """
    ok: bool
    error: str
    error_kind: str

    input_path: str
    assets_path: str
    output_path: str
    namespace_name: str

    image_count: int = 0
    color_count: int = 0
    source: str = ""
    dry_run: bool = False

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        error_kind: str,
        cfg: Dict[str, Any],
        input_path: str = "",
        assets_path: str = "",
        summary_extra: Optional[Dict[str, Any]] = None
) -> GenerationResult:
    """
    Create a failed generation result instance.

    Args:
        error: Detailed error description.
        error_kind: One of the ERROR_* categories.
        cfg: The configuration used during the failed run.
        input_path: The search root (if resolved).
        assets_path: The located catalog (if resolved).
        summary_extra: Additional metadata for the summary payload.

    Returns:
        GenerationResult: An immutable error result object.
    """
    return GenerationResult(
        ok=False,
        error=error,
        error_kind=error_kind,
        input_path=input_path,
        assets_path=assets_path,
        output_path=cfg.get("output_path", ""),
        namespace_name=cfg.get("namespace_name", ""),
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        input_path: str,
        assets_path: str,
        output_path: str,
        image_count: int,
        color_count: int,
        source: str,
        dry_run: bool = False,
        summary_extra: Optional[Dict[str, Any]] = None
) -> GenerationResult:
    """
    Create a successful generation result instance.

    Returns:
        GenerationResult: An immutable success result object.
    """
    return GenerationResult(
        ok=True,
        error="",
        error_kind="",
        input_path=input_path,
        assets_path=assets_path,
        output_path=output_path,
        namespace_name=cfg.get("namespace_name", ""),
        image_count=image_count,
        color_count=color_count,
        source=source,
        dry_run=dry_run,
        summary=summary_extra or {},
    )
