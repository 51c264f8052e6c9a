"""Document-kind detection from a file's path segments."""

from __future__ import annotations

import logging
from pathlib import PurePath

from playnav.ast.nodes import DocKind

logger = logging.getLogger("playnav.navigator")


def split_path(file_path: str | PurePath) -> list[str]:
    """Directory segments of ``file_path`` followed by its file name.

    Root, drive and ``.`` segments are dropped.
    """
    path = PurePath(file_path)
    return [part for part in path.parts if part not in (path.anchor, ".")]


def detect_doc_kind(file_path: str | PurePath) -> DocKind:
    """Classify a file as a role task list, a playbook, or neither.

    ``.../roles/<name>/tasks/<file>`` is a role document; otherwise any file
    below a ``playbooks`` directory is a playbook.
    """
    dirs = split_path(file_path)
    count = len(dirs)
    logger.debug("Doc dir parts: %s", dirs)

    if count >= 4 and dirs[count - 4] == "roles" and dirs[count - 2] == "tasks":
        return DocKind.ROLE
    if "playbooks" in dirs[: count - 1]:
        return DocKind.PLAYBOOK
    return DocKind.UNKNOWN
