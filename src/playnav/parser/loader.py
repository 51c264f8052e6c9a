"""YAML loader that composes a position-tracked generic node tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from ruamel.yaml.events import (
    AliasEvent,
    DocumentEndEvent,
    DocumentStartEvent,
    MappingEndEvent,
    MappingStartEvent,
    ScalarEvent,
    SequenceEndEvent,
    SequenceStartEvent,
)

from playnav.models.errors import DocumentParseError, DocumentReadError, SourceSpan
from playnav.parser.nodes import (
    AliasNode,
    DocumentNode,
    GenericNode,
    MappingNode,
    ScalarNode,
    SequenceNode,
)

# ---------------------------------------------------------------------------
# Safety limits
# ---------------------------------------------------------------------------

_MAX_DOCUMENT_SIZE = 5_000_000  # 5M characters
_MAX_NODE_COUNT = 50_000
_MAX_DEPTH = 200

_NULL_SCALARS = frozenset({"", "~", "null", "Null", "NULL"})


class YAMLSafetyError(DocumentParseError):
    """Raised when YAML input violates safety constraints.

    Distinct from syntax errors: these indicate oversized or pathological
    input (huge documents, excessive nesting, too many nodes).
    """


class RootShape(StrEnum):
    """Whether a document parses as a list or as a mapping."""

    LIST = "list"
    MAP = "map"


@dataclass(frozen=True)
class LoadedDocument:
    """A parsed YAML document: the generic tree plus its detected root shape."""

    filename: str
    root: DocumentNode
    shape: RootShape


def _span(filename: str, mark: Any) -> SourceSpan:
    return SourceSpan(file=filename, line=mark.line + 1, column=mark.column + 1)


class TrackedLoader:
    """YAML loader that keeps line/column info on every node.

    Builds the generic tree directly from ruamel.yaml's parse events, so
    aliases remain ``AliasNode`` leaves where they are written and anchors
    are never expanded.
    """

    def __init__(self) -> None:
        self._yaml = YAML()

    # -- safety checks -------------------------------------------------------

    @staticmethod
    def _check_yaml_safety(content: str, filename: str) -> None:
        if len(content) > _MAX_DOCUMENT_SIZE:
            raise YAMLSafetyError(
                f"YAML document {filename} exceeds maximum size "
                f"({len(content):,} chars > {_MAX_DOCUMENT_SIZE:,} limit)"
            )

    # -- public loading API --------------------------------------------------

    def load(self, path: Path) -> LoadedDocument:
        """Load a YAML file and return its generic node tree."""
        try:
            with path.open("r", encoding="utf-8") as handle:
                content = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentReadError(f"cannot read file {path}: {exc}") from exc
        return self.load_string(content, str(path))

    def load_string(self, content: str, filename: str = "<string>") -> LoadedDocument:
        """Load YAML from a string.

        Only the first document of a multi-document stream is used. An empty
        document counts as a list, matching how an empty file unmarshals.
        """
        self._check_yaml_safety(content, filename)
        events = self._yaml.parse(content)
        try:
            root = self._compose(events, filename)
        except YAMLError as exc:
            mark = getattr(exc, "problem_mark", None)
            span = _span(filename, mark) if mark is not None else None
            problem = getattr(exc, "problem", None) or str(exc)
            raise DocumentParseError(problem, span) from exc
        finally:
            events.close()

        if not root.children:
            return LoadedDocument(filename=filename, root=root, shape=RootShape.LIST)
        match root.children[0]:
            case SequenceNode():
                shape = RootShape.LIST
            case MappingNode():
                shape = RootShape.MAP
            case other:
                raise DocumentParseError(
                    f"document root must be a list or a mapping, got {other.kind}",
                    SourceSpan(file=filename, line=other.line, column=other.column),
                )
        return LoadedDocument(filename=filename, root=root, shape=shape)

    # -- composition ---------------------------------------------------------

    def _compose(self, events: Iterator[Any], filename: str) -> DocumentNode:
        """Fold the event stream of the first document into a node tree."""
        stack: list[tuple[Any, list[GenericNode]]] = []
        count = 0
        for event in events:
            if isinstance(event, DocumentStartEvent):
                stack.append((event, []))
                continue
            if isinstance(event, DocumentEndEvent):
                start, children = stack.pop()
                return DocumentNode(
                    line=start.start_mark.line + 1,
                    column=start.start_mark.column + 1,
                    children=tuple(self._drop_null_root(children)),
                )
            if not stack:
                continue

            if isinstance(event, (MappingStartEvent, SequenceStartEvent)):
                if len(stack) > _MAX_DEPTH:
                    raise YAMLSafetyError(
                        f"YAML document {filename} exceeds maximum nesting depth ({_MAX_DEPTH})"
                    )
                stack.append((event, []))
                continue

            node: GenericNode
            line = event.start_mark.line + 1
            column = event.start_mark.column + 1
            if isinstance(event, ScalarEvent):
                node = ScalarNode(line=line, column=column, value=event.value)
            elif isinstance(event, AliasEvent):
                node = AliasNode(line=line, column=column, anchor=event.anchor)
            elif isinstance(event, (MappingEndEvent, SequenceEndEvent)):
                start, children = stack.pop()
                node_cls = MappingNode if isinstance(start, MappingStartEvent) else SequenceNode
                node = node_cls(
                    line=start.start_mark.line + 1,
                    column=start.start_mark.column + 1,
                    children=tuple(children),
                )
            else:
                continue

            count += 1
            if count > _MAX_NODE_COUNT:
                raise YAMLSafetyError(
                    f"YAML document {filename} exceeds maximum node count ({_MAX_NODE_COUNT:,})"
                )
            stack[-1][1].append(node)

        # Stream without any document (empty or comment-only file)
        return DocumentNode(line=1, column=1)

    @staticmethod
    def _drop_null_root(children: list[GenericNode]) -> list[GenericNode]:
        """An explicit but empty document (``---``) holds a single null scalar."""
        if len(children) == 1:
            only = children[0]
            if isinstance(only, ScalarNode) and only.value in _NULL_SCALARS:
                return []
        return children
