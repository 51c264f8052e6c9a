"""Human-readable dumps of generic YAML node trees, for debugging the loader."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

from playnav.models.errors import DocumentParseError, DocumentReadError
from playnav.parser.loader import TrackedLoader
from playnav.parser.nodes import GenericNode

YAML_SUFFIXES = (".yaml", ".yml")


def describe_node(node: GenericNode, indent: str = "") -> Iterator[str]:
    """Yield ``kind(line,col): value`` lines, one space of indent per level."""
    if node.value:
        yield f"{indent}{node.kind}({node.line},{node.column}): {node.value}"
    else:
        yield f"{indent}{node.kind}({node.line},{node.column})"
    for child in node.children:
        yield from describe_node(child, indent + " ")


def iter_yaml_files(root: Path) -> Iterator[Path]:
    """All ``.yaml``/``.yml`` files below ``root`` in lexical order, skipping ``.git``."""
    if root.is_file():
        if root.name.endswith(YAML_SUFFIXES):
            yield root
        return
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d != ".git")
        for filename in sorted(filenames):
            if filename.endswith(YAML_SUFFIXES):
                yield Path(dirpath) / filename


def dump_file(path: Path, loader: TrackedLoader | None = None) -> list[str]:
    """Header ``<path> => list|map|error|cannotread`` followed by the node tree."""
    loader = loader or TrackedLoader()
    try:
        document = loader.load(path)
    except DocumentReadError:
        return [f"{path} => cannotread"]
    except DocumentParseError:
        return [f"{path} => error"]
    return [f"{path} => {document.shape}", *describe_node(document.root)]


def dump_tree(root: Path) -> Iterator[str]:
    loader = TrackedLoader()
    for path in iter_yaml_files(root):
        yield from dump_file(path, loader)
