"""Workspace root resolution."""

import logging
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


def resolve_workspace_root(folders: Sequence[Path]) -> Path | None:
    """Return the first open workspace folder, if any.

    Only the first folder is ever considered. A folder that no longer
    exists on disk counts as no workspace.

    Args:
        folders: Workspace folders in the order the host reports them

    Returns:
        Absolute path to the workspace root, or None
    """
    if not folders:
        return None
    root = folders[0].expanduser().resolve()
    if not root.is_dir():
        logger.debug(f"Workspace folder {root} is not a directory; running without workspace")
        return None
    return root
