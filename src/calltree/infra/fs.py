from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization and atomic document persistence. A failed
write never leaves a partially written output file behind.
"""

import logging
import os
import tempfile
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

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
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)

# -----------------------------------------------------------------------------
# PERSISTENCE API
# -----------------------------------------------------------------------------

def write_text_atomic(path: str, text: str) -> None:
    """
    Write a text document in one step.

    The content goes to a temporary file in the destination directory which
    then replaces the target. On failure the temporary file is removed and
    the error propagates.

    Args:
        path: Absolute destination path.
        text: Full document content.

    Raises:
        OSError: If the directory cannot be created or the file written.
    """
    out_dir = os.path.dirname(os.path.abspath(path))
    ok, err = safe_mkdir(out_dir)
    if not ok:
        raise OSError(f"Cannot create output directory '{out_dir}': {err}")

    fd, tmp_path = tempfile.mkstemp(prefix=".calltree-", suffix=".tmp", dir=out_dir)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp_path, path)
    except BaseException:
        try:
            os.remove(tmp_path)
        except OSError:
            pass
        raise

    logger.debug(f"Wrote {len(text)} characters to {path}")
