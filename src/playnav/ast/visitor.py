"""Visitor pattern for AST traversal, plus the debug tree describer."""

from __future__ import annotations

from typing import Any

from playnav.ast.nodes import AstNode, Reference, children_of, node_type, reference_of


class ASTVisitor:
    """Base visitor for Ansible AST traversal.

    Override specific visit_* methods (``visit_playbook``, ``visit_role``,
    ...) to customize behavior. The default implementation visits every
    child in source order.
    """

    def visit(self, node: AstNode) -> Any:
        """Dispatch to the appropriate visit_* method."""
        method_name = f"visit_{type(node).__name__.lower()}"
        method = getattr(self, method_name, self.generic_visit)
        return method(node)

    def generic_visit(self, node: AstNode) -> Any:
        for child in children_of(node):
            self.visit(child)
        return node


def format_reference(ref: Reference) -> str:
    return f"{ref.type.name.title()}({ref.value})"


class TreeDescriber(ASTVisitor):
    """Renders a tree as indented ``[start-end] Type --> Ref(value)`` lines."""

    def __init__(self, indent: str = "  ") -> None:
        self._indent = indent
        self._depth = 0
        self.lines: list[str] = []

    def generic_visit(self, node: AstNode) -> Any:
        line = f"{self._indent * self._depth}[{node.start_line}-{node.end_line}] {node_type(node)}"
        ref = reference_of(node)
        if ref is not None:
            line += f" --> {format_reference(ref)}"
        self.lines.append(line)
        self._depth += 1
        try:
            super().generic_visit(node)
        finally:
            self._depth -= 1
        return node


def describe(node: AstNode) -> str:
    """Multi-line description of ``node`` and its descendants."""
    describer = TreeDescriber()
    describer.visit(node)
    return "\n".join(describer.lines)
