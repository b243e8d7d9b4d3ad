from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. Handling of boolean flags (store_true).
3. Unset options mapping to None.
"""

from assetgen.interface.cli.app import _merge_config
from assetgen.interface.cli.args import args_to_overrides, build_parser
from assetgen.domain.config import get_default_config


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_path_arguments():
    args = parse_args([
        "-d", "/project",
        "-o", "/project/Generated/Assets.swift",
    ])

    overrides = args_to_overrides(args)

    assert overrides["input_path"] == "/project"
    assert overrides["output_path"] == "/project/Generated/Assets.swift"


def test_cli_long_flags_mapping():
    args = parse_args([
        "--dir", "/p",
        "--output", "out.swift",
        "--names", "^[A-Z]+$",
        "--shell", "/bin/zsh",
        "--images-dir", "Pictures",
        "--colors-dir", "Palette",
        "--namespace", "Shop",
    ])

    overrides = args_to_overrides(args)

    assert overrides == {
        "input_path": "/p",
        "output_path": "out.swift",
        "allowed_names": "^[A-Z]+$",
        "shell_path": "/bin/zsh",
        "images_dir": "Pictures",
        "colors_dir": "Palette",
        "namespace_name": "Shop",
    }


def test_cli_simple_flags():
    args = parse_args(["--dry-run", "--debug", "--json", "--dump-config", "--log-file", "x.log"])

    assert args.dry_run is True
    assert args.debug is True
    assert args.json_output is True
    assert args.dump_config is True
    assert args.log_file == "x.log"


def test_cli_defaults_are_explicit_in_overrides():
    args = parse_args([])
    overrides = args_to_overrides(args)

    assert overrides["input_path"] is None
    assert all(v is None for v in overrides.values())
    assert args.dry_run is False


def test_merge_config_ignores_unset_and_unknown_keys():
    base = get_default_config()
    merged = _merge_config(base, {"input_path": "/p", "output_path": None, "bogus": 1})

    assert merged["input_path"] == "/p"
    assert merged["output_path"] == base["output_path"]
    assert "bogus" not in merged
