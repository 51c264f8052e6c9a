"""Reference resolution: turns a reference into an existing file or directory path."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from playnav.ast.nodes import Reference, ReferenceType

logger = logging.getLogger("playnav.navigator")

DEFAULT_ROLES_DIR = "roles"
DEFAULT_ROLE_ENTRY_FILE = "main.yml"


def _join(base: Path, *parts: str) -> Path:
    """Concatenate ``parts`` under ``base``; absolute parts do not replace it."""
    return Path(os.path.normpath(os.path.join(base, *(part.lstrip(os.sep) for part in parts))))


def _role_candidate(base: Path, value: str, roles_dir: str, entry_file: str) -> Path | None:
    """``roles/<value>/tasks/<entry>``, else ``roles/<value>``, with symlinks resolved.

    A relative ``base`` gives a result relative to the working directory,
    matching how file references come back.
    """
    role_root = _join(base, roles_dir, value)
    candidate = role_root / "tasks" / entry_file
    if not candidate.exists():
        candidate = role_root
    try:
        resolved = candidate.resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        logger.debug("cannot resolve role path %s: %s", candidate, exc)
        return None
    if base.is_absolute():
        return resolved
    return Path(os.path.relpath(resolved))


def resolve_reference(
    file_path: str | Path,
    ref: Reference,
    *,
    roles_dir: str = DEFAULT_ROLES_DIR,
    role_entry_file: str = DEFAULT_ROLE_ENTRY_FILE,
) -> Path | None:
    """Map ``ref`` to a path relative to the directory of ``file_path``.

    Playbook and task references are joined onto the including file's
    directory. Role references point at the role's entry task file, falling
    back to the role directory itself. Returns ``None`` unless the final
    path exists.
    """
    base = Path(file_path).parent
    candidate: Path | None
    match ref.type:
        case ReferenceType.PLAYBOOK | ReferenceType.TASK:
            candidate = _join(base, ref.value)
        case ReferenceType.ROLE:
            candidate = _role_candidate(base, ref.value, roles_dir, role_entry_file)
        case _:
            raise ValueError(f"unknown reference type: {ref.type}")

    if candidate is None or not candidate.exists():
        logger.debug("reference %s(%s) does not resolve to an existing path", ref.type, ref.value)
        return None
    return candidate
