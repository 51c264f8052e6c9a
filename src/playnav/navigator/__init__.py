"""Position lookup and reference resolution."""

from playnav.navigator.doc_kind import detect_doc_kind
from playnav.navigator.locator import locate
from playnav.navigator.pipeline import Navigator
from playnav.navigator.resolver import resolve_reference

__all__ = [
    "Navigator",
    "detect_doc_kind",
    "locate",
    "resolve_reference",
]
