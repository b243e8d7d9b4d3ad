from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides directory listing, asset catalog discovery and path normalization.
Acts as the boundary between the pure tree/render logic and the host
filesystem or shell.
"""

import logging
import os
import shlex
import subprocess
from typing import Callable, List, Optional

from assetgen.domain.constants import CATALOG_DIR_NAME, DEFAULT_SHELL

logger = logging.getLogger(__name__)

ListDir = Callable[[str], List[str]]

# -----------------------------------------------------------------------------
# DIRECTORY LISTING API
# -----------------------------------------------------------------------------

def list_directory(path: str) -> List[str]:
    """
    List the immediate entry names of a directory.

    Order is the one reported by the operating system and is preserved
    verbatim by the tree builder.

    Args:
        path: Directory to inspect.

    Returns:
        List[str]: Entry names (not full paths).

    Raises:
        OSError: If the path does not exist or cannot be read.
    """
    return os.listdir(path)

# -----------------------------------------------------------------------------
# CATALOG DISCOVERY API
# -----------------------------------------------------------------------------

def locate_assets_root(
        search_root: str,
        catalog_name: str = CATALOG_DIR_NAME,
        shell: str = DEFAULT_SHELL,
) -> str:
    """
    Find the first directory beneath the search root whose path mentions the catalog name.

    Delegates the walk to `find` through the configured shell, keeping the
    first line that contains the catalog name.

    Args:
        search_root: Directory to search from.
        catalog_name: Catalog folder name (e.g. 'Assets.xcassets').
        shell: Shell executable used to run the search.

    Returns:
        str: Path of the catalog directory, or an empty string if none was found.

    Raises:
        OSError: If the shell cannot be executed.
    """
    command = (
        f"find {shlex.quote(search_root)} -type d "
        f"| grep -m 1 -F {shlex.quote(catalog_name)}"
    )
    logger.debug(f"Locating asset catalog with: {shell} -c {command!r}")

    completed = subprocess.run(
        [shell, "-c", command],
        stdin=subprocess.DEVNULL,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
    )
    if completed.stderr:
        logger.debug(f"Catalog search stderr: {completed.stderr.strip()}")

    return completed.stdout.replace("\n", "")

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))
