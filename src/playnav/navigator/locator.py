"""Innermost-node lookup by row."""

from __future__ import annotations

from playnav.ast.nodes import AstNode, children_of


def in_range(row: int, node: AstNode) -> bool:
    return node.start_line <= row <= node.end_line


def locate(root: AstNode, row: int) -> AstNode | None:
    """Return the deepest node whose line range contains ``row``.

    Descends into the first child (in source order) covering ``row`` at each
    level; returns ``None`` when ``row`` falls outside ``root`` entirely.
    """
    if not in_range(row, root):
        return None
    for child in children_of(root):
        found = locate(child, row)
        if found is not None:
            return found
    return root
