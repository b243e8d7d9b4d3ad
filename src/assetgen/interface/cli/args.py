from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the raw argparse
namespace into configuration overrides understood by the pipeline.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the assetgen CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="assetgen",
        description=(
            "Generate type-safe Swift accessors for the image and color sets "
            "of an Xcode asset catalog."
        ),
    )

    # --- Path Management ---
    p.add_argument(
        "-d", "--dir",
        dest="input_path",
        default=None,
        help="Directory searched for the asset catalog (required).",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help="Destination of the generated Swift file (default: ./Assets.swift).",
    )

    # --- Catalog Layout ---
    p.add_argument(
        "--names",
        dest="allowed_names",
        default=None,
        help="Regex a folder name must match to become a nested type.",
    )
    p.add_argument(
        "--images-dir",
        dest="images_dir",
        default=None,
        help="Catalog folder holding image sets (default: Images).",
    )
    p.add_argument(
        "--colors-dir",
        dest="colors_dir",
        default=None,
        help="Catalog folder holding color sets (default: Colors).",
    )
    p.add_argument(
        "--namespace",
        dest="namespace_name",
        default=None,
        help="Name of the outermost generated type (default: app).",
    )

    # --- Discovery ---
    p.add_argument(
        "--shell",
        dest="shell_path",
        default=None,
        help="Shell used to search for the asset catalog (default: /bin/sh).",
    )

    # --- Runtime Constraints ---
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the generated source instead of writing it.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run result as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset. Unset options are None.
    """
    return {
        "input_path": args.input_path,
        "output_path": args.output_path,
        "allowed_names": args.allowed_names,
        "images_dir": args.images_dir,
        "colors_dir": args.colors_dir,
        "namespace_name": args.namespace_name,
        "shell_path": args.shell_path,
    }
