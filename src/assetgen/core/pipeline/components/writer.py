from __future__ import annotations

"""
Output Persistence.

Writes the generated Swift source to its destination in a single call,
so a failed run never leaves a partially written file behind.
"""

import logging
import os
import stat
import tempfile

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# FILE OUTPUT MANAGEMENT
# -----------------------------------------------------------------------------

def write_source_file(output_path: str, source: str) -> None:
    """
    Encode and persist the generated source as UTF-8.

    The text is encoded before anything touches the disk, then written to a
    sibling temporary file that replaces the destination atomically. The
    result keeps the permission bits of the file it replaces, or the ones
    the process umask grants to a newly created file.

    Args:
        output_path: Target file path. Parent directories are created.
        source: Complete generated source text.

    Raises:
        UnicodeEncodeError: If the text cannot be encoded.
        OSError: If filesystem write permissions are denied.
    """
    data = source.encode("utf-8")

    out_dir = os.path.dirname(os.path.abspath(output_path))
    os.makedirs(out_dir, exist_ok=True)
    mode = _target_mode(output_path)

    fd, tmp_path = tempfile.mkstemp(prefix=".assetgen-", suffix=".tmp", dir=out_dir)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, output_path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise

    logger.debug(f"Wrote {len(data)} bytes to {output_path}")

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _target_mode(output_path: str) -> int:
    """Permission bits the written file should end up with."""
    try:
        return stat.S_IMODE(os.stat(output_path).st_mode)
    except FileNotFoundError:
        # umask can only be read by setting it
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
