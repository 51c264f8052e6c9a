"""Orchestrates one navigation: read -> parse -> classify -> locate -> resolve."""

from __future__ import annotations

import logging

from playnav.ast.classifier import StructuralClassifier
from playnav.ast.nodes import DocKind, reference_of
from playnav.ast.visitor import describe
from playnav.models.errors import DocumentReadError
from playnav.models.request import NavigationRequest, NavigationResult
from playnav.navigator.doc_kind import detect_doc_kind
from playnav.navigator.locator import locate
from playnav.navigator.resolver import resolve_reference
from playnav.parser.loader import TrackedLoader
from playnav.settings import Settings

logger = logging.getLogger("playnav.navigator")


class Navigator:
    """Finds the file referenced at a position in a playbook or role task list.

    Holds no state between calls; each ``navigate`` parses its file afresh.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or Settings()
        self._loader = TrackedLoader()

    def navigate(self, request: NavigationRequest) -> NavigationResult:
        """Run the full pipeline for ``request``.

        Raises ``DocumentReadError`` if the file is missing or unreadable,
        ``DocumentParseError`` / ``ShapeError`` if it cannot be classified.
        Anything that merely finds nothing yields a result with empty fields.
        """
        path = request.file
        if not path.is_file():
            raise DocumentReadError(f"cannot stat file {path}: no such file")

        doc_kind = detect_doc_kind(path)
        if doc_kind is DocKind.UNKNOWN:
            logger.debug("Unknown document type: %s", path)
            return NavigationResult(doc_kind=doc_kind)

        document = self._loader.load(path)
        root = StructuralClassifier(str(path)).classify(document.root, doc_kind)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Parsed %s document:\n%s", doc_kind, describe(root))

        node = locate(root, request.row)
        if node is None:
            logger.debug("Could not find node that matches location %d", request.row)
            return NavigationResult(doc_kind=doc_kind)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Located node:\n%s", describe(node))

        reference = reference_of(node)
        if reference is None:
            return NavigationResult(doc_kind=doc_kind, node=node)

        resolved = resolve_reference(
            path,
            reference,
            roles_dir=self._settings.roles_dir,
            role_entry_file=self._settings.role_entry_file,
        )
        return NavigationResult(
            doc_kind=doc_kind, node=node, reference=reference, resolved=resolved
        )
