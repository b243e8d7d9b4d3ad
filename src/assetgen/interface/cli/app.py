from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: initialization of logging, merging of
defaults with CLI overrides, pipeline execution, and result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from assetgen.core.pipeline.engine import run_pipeline
from assetgen.core.pipeline.stages.validator import validate_config
from assetgen.domain.config import get_default_config
from assetgen.domain.pipeline_models import ERROR_CONFIGURATION, GenerationResult
from assetgen.infra.logging import LoggingConfig, configure_logging, get_logger
from assetgen.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 generation failure,
             2 configuration error, 130 interrupted).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration...")

    # 3. Merge command-line overrides over defaults
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(get_default_config(), overrides)

    if args.dump_config:
        clean_conf, _ = validate_config(raw_conf, strict=False)
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 4. Pipeline execution phase
    try:
        result = run_pipeline(raw_conf, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130
    except Exception as e:
        logger.critical(f"Generation failed unexpectedly: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    # 5. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    elif args.dry_run and result.ok:
        sys.stdout.write(result.source)
    else:
        _print_human_summary(result)

    if result.ok:
        return 0
    return 2 if result.error_kind == ERROR_CONFIGURATION else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only known keys with a value are merged.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in base and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: GenerationResult) -> None:
    """Format and print the execution result to the terminal."""
    if not result.ok:
        print(f"ERROR ({result.error_kind}): {result.error}", file=sys.stderr)
        return

    print("Assets generated successfully.")
    print(f"Catalog: {result.assets_path}")
    print(f"Output:  {result.output_path}")
    print(f"Images:  {result.image_count}")
    print(f"Colors:  {result.color_count}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
