from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script via subprocess and validates exit codes,
stream output and the generated file.
"""

import json
import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import List

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "assetgen" / "main.py"

pytestmark = pytest.mark.skipif(
    not (os.path.exists("/bin/sh") and shutil.which("find") and shutil.which("grep")),
    reason="catalog discovery requires /bin/sh with find and grep",
)


def run_cli(args: List[str], cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process with 'src' on PYTHONPATH.

    Args:
        args: Command line arguments (excluding interpreter and script path).
        cwd: Optional working directory for the subprocess.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_cli_happy_path_execution(tmp_path: Path, sample_project: Path) -> None:
    output = tmp_path / "Generated" / "Assets.swift"

    result = run_cli(["--dir", str(sample_project), "--output", str(output)])

    assert result.returncode == 0, f"CLI failed with stderr: {result.stderr}"
    assert output.exists()
    source = output.read_text(encoding="utf-8")
    assert source.startswith("import SwiftUI")
    assert "\t\tenum icons: String {" in source
    assert 'static var primary: UIColor { UIColor("primary") }' in source
    assert "Images:  2" in result.stdout


def test_cli_default_output_in_working_directory(tmp_path: Path, sample_project: Path) -> None:
    result = run_cli(["-d", str(sample_project)], cwd=tmp_path)

    assert result.returncode == 0, result.stderr
    assert (tmp_path / "Assets.swift").exists()


def test_cli_dry_run_prints_source(tmp_path: Path, sample_project: Path) -> None:
    output = tmp_path / "Assets.swift"

    result = run_cli(["-d", str(sample_project), "-o", str(output), "--dry-run", "--namespace", "Shop"])

    assert result.returncode == 0, result.stderr
    assert not output.exists()
    assert "\tenum shop: String {" in result.stdout


def test_cli_json_output(tmp_path: Path, sample_project: Path) -> None:
    result = run_cli(["-d", str(sample_project), "-o", str(tmp_path / "A.swift"), "--json"])

    payload = json.loads(result.stdout)
    assert payload["ok"] is True
    assert payload["image_count"] == 2
    assert payload["color_count"] == 1


def test_cli_dump_config(sample_project: Path) -> None:
    result = run_cli(["-d", str(sample_project), "--names", "^[A-Z]\\w*$", "--dump-config"])

    assert result.returncode == 0
    cfg = json.loads(result.stdout)
    assert cfg["input_path"] == str(sample_project)
    assert cfg["allowed_names"] == "^[A-Z]\\w*$"


def test_cli_missing_dir_flag_fails_with_config_error(tmp_path: Path) -> None:
    result = run_cli(["-o", str(tmp_path / "Assets.swift")])

    assert result.returncode == 2
    assert "ERROR (configuration)" in result.stderr
    assert not (tmp_path / "Assets.swift").exists()


def test_cli_catalog_not_found(tmp_path: Path) -> None:
    search = tmp_path / "empty"
    search.mkdir()
    output = tmp_path / "Assets.swift"

    result = run_cli(["-d", str(search), "-o", str(output)])

    assert result.returncode == 1
    assert "Assets directory not found" in result.stderr
    assert not output.exists()


def test_cli_structural_error_writes_nothing(tmp_path: Path, sample_project: Path) -> None:
    shutil.rmtree(sample_project / "App" / "Assets.xcassets" / "Colors")
    output = tmp_path / "Assets.swift"

    result = run_cli(["-d", str(sample_project), "-o", str(output)])

    assert result.returncode == 1
    assert "ERROR (structural)" in result.stderr
    assert not output.exists()
