"""Error types with YAML source position tracking."""

from __future__ import annotations

from pydantic import BaseModel


class SourceSpan(BaseModel):
    """Points to exact location in YAML source for error reporting."""

    file: str
    line: int
    column: int
    end_line: int | None = None
    end_column: int | None = None

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"


class NavigatorError(Exception):
    """Base class for every failure raised while navigating a document."""


class DocumentReadError(NavigatorError, OSError):
    """The input file is missing or cannot be read."""


class DocumentParseError(NavigatorError):
    """The document is not valid YAML, or its root is neither a list nor a mapping."""

    def __init__(self, message: str, span: SourceSpan | None = None) -> None:
        super().__init__(f"{span}: {message}" if span else message)
        self.span = span


class ShapeError(NavigatorError):
    """The document's top-level shape does not match what its kind requires.

    Fatal to classification of the whole document; no partial tree is
    returned.
    """

    def __init__(self, message: str, span: SourceSpan | None = None) -> None:
        super().__init__(f"{span}: {message}" if span else message)
        self.span = span
