"""Error types and request/result models for playnav."""

from playnav.models.errors import (
    DocumentParseError,
    DocumentReadError,
    NavigatorError,
    ShapeError,
    SourceSpan,
)
from playnav.models.request import NavigationRequest, NavigationResult

__all__ = [
    "DocumentParseError",
    "DocumentReadError",
    "NavigationRequest",
    "NavigationResult",
    "NavigatorError",
    "ShapeError",
    "SourceSpan",
]
