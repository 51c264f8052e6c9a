"""Navigation request/result models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field

from playnav.ast.nodes import AstNode, DocKind, Reference


class NavigationRequest(BaseModel):
    """A cursor position in a file. ``row`` is 1-based, like editor line numbers."""

    file: Path
    row: int = Field(ge=1)
    column: int = Field(default=0, ge=0)


@dataclass(frozen=True)
class NavigationResult:
    """What a navigation found. Any stage may come up empty."""

    doc_kind: DocKind
    node: AstNode | None = None
    reference: Reference | None = None
    resolved: Path | None = None

    @property
    def target(self) -> str:
        """The resolved path as printed by the CLI, or ``""``."""
        return str(self.resolved) if self.resolved is not None else ""
