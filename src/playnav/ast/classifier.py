"""Structural classification: generic YAML tree -> typed Ansible AST.

Top-level shape mismatches raise ``ShapeError``. Inside a document, any task,
role or list whose shape is not recognized is skipped without error so that
unknown or irrelevant constructs never block navigation.
"""

from __future__ import annotations

import logging

from playnav.ast.nodes import (
    AstNode,
    DocKind,
    ImportPlaybook,
    ImportRole,
    IncludeTasks,
    Play,
    Playbook,
    Reference,
    ReferenceType,
    Role,
    RoleList,
    TaskList,
)
from playnav.models.errors import ShapeError, SourceSpan
from playnav.parser.nodes import (
    DocumentNode,
    GenericNode,
    MappingNode,
    NodeKind,
    ScalarNode,
    SequenceNode,
)

logger = logging.getLogger("playnav.classifier")

# Task lists of a play, in the order their nodes are emitted.
_TASK_LIST_KEYS = ("tasks", "pre_tasks", "post_tasks")


# ---------------------------------------------------------------------------
# Generic tree helpers
# ---------------------------------------------------------------------------


def map_key_value(node: GenericNode | None, key: str) -> GenericNode | None:
    """Return the value paired with the scalar key ``key`` in a mapping node."""
    if not isinstance(node, MappingNode):
        return None
    for key_node, value_node in node.pairs():
        if isinstance(key_node, ScalarNode) and key_node.value == key:
            return value_node
    return None


def map_keys(node: GenericNode | None) -> set[str]:
    """Scalar keys of a mapping node (empty for any other node)."""
    if not isinstance(node, MappingNode):
        return set()
    return {key.value for key, _ in node.pairs() if isinstance(key, ScalarNode)}


def last_line(node: GenericNode) -> int:
    """Last line visually occupied by ``node``.

    A scalar claims one line per newline-separated segment of its value; a
    composite node ends on the last line of its deepest-reaching child.
    """
    if isinstance(node, ScalarNode):
        return node.line + len(node.value.split("\n")) - 1
    line = node.line
    for child in node.children:
        line = max(line, last_line(child))
    return line


# ---------------------------------------------------------------------------
# Classifier
# ---------------------------------------------------------------------------


class StructuralClassifier:
    """Turns a generic YAML document into a playbook or task-list AST."""

    def __init__(self, filename: str = "<string>") -> None:
        self._filename = filename

    def classify(self, document: GenericNode, kind: DocKind) -> AstNode:
        """Build the AST for ``document`` according to its document kind."""
        match kind:
            case DocKind.PLAYBOOK:
                return self._playbook(document)
            case DocKind.ROLE:
                task_list = self._task_list(self._root_sequence(document))
                assert task_list is not None
                return task_list
        raise ShapeError(f"invalid document type: {kind}")

    # -- top level -----------------------------------------------------------

    def _span(self, node: GenericNode) -> SourceSpan:
        return SourceSpan(file=self._filename, line=node.line, column=node.column)

    def _expect(self, node: GenericNode, kind: NodeKind) -> None:
        if node.kind != kind:
            raise ShapeError(
                f"unexpected node kind. Expected: {kind}, Got: {node.kind}", self._span(node)
            )

    def _root_sequence(self, document: GenericNode) -> SequenceNode:
        self._expect(document, NodeKind.DOCUMENT)
        if len(document.children) != 1:
            raise ShapeError(
                f"unexpected child count. Expected: 1, Got: {len(document.children)}",
                self._span(document),
            )
        root = document.children[0]
        self._expect(root, NodeKind.SEQUENCE)
        assert isinstance(root, SequenceNode)
        return root

    def _playbook(self, document: GenericNode) -> Playbook:
        sequence = self._root_sequence(document)
        start_line = sequence.line
        end_line = start_line
        children: list[AstNode] = []
        for item in sequence.children:
            self._expect(item, NodeKind.MAPPING)
            child: AstNode
            if "import_playbook" in map_keys(item):
                child = self._import_playbook(item)
            else:
                child = self._play(item)
            children.append(child)
            end_line = max(end_line, child.end_line)
        return Playbook(start_line=start_line, end_line=end_line, children=tuple(children))

    def _import_playbook(self, node: GenericNode) -> ImportPlaybook:
        target = map_key_value(node, "import_playbook")
        assert target is not None
        self._expect(target, NodeKind.SCALAR)
        return ImportPlaybook(
            start_line=node.line,
            end_line=last_line(node),
            reference=Reference(type=ReferenceType.PLAYBOOK, value=target.value),
        )

    def _play(self, node: GenericNode) -> Play:
        keys = map_keys(node)
        children: list[AstNode] = []
        for key in _TASK_LIST_KEYS:
            if key not in keys:
                continue
            task_list = self._task_list(map_key_value(node, key))
            if task_list is not None:
                children.append(task_list)
        if "roles" in keys:
            role_list = self._role_list(map_key_value(node, "roles"))
            if role_list is not None:
                children.append(role_list)
        return Play(start_line=node.line, end_line=last_line(node), children=tuple(children))

    # -- tasks ---------------------------------------------------------------

    def _task_list(self, node: GenericNode | None) -> TaskList | None:
        if not isinstance(node, SequenceNode):
            self._skip("task list", node)
            return None
        tasks = [task for task in map(self._task, node.children) if task is not None]
        return TaskList(start_line=node.line, end_line=last_line(node), children=tuple(tasks))

    def _task(self, node: GenericNode) -> AstNode | None:
        keys = map_keys(node)
        if "block" in keys:
            return self._task_list(map_key_value(node, "block"))
        if "import_role" in keys:
            return self._import_role(map_key_value(node, "import_role"))
        if "include_role" in keys:
            return self._import_role(map_key_value(node, "include_role"))
        if "include_tasks" in keys:
            return self._include_tasks(map_key_value(node, "include_tasks"))
        # Tasks that reference nothing
        return None

    def _import_role(self, node: GenericNode | None) -> ImportRole | None:
        name = map_key_value(node, "name")
        if node is None or not isinstance(name, ScalarNode):
            self._skip("role import", node)
            return None
        role_ref = name.value
        if "tasks_from" in map_keys(node):
            tasks_from = map_key_value(node, "tasks_from")
            if not isinstance(tasks_from, ScalarNode):
                self._skip("tasks_from", tasks_from)
                return None
            role_ref = f"{role_ref}/tasks/{tasks_from.value}"
        return ImportRole(
            start_line=node.line,
            end_line=last_line(node),
            reference=Reference(type=ReferenceType.ROLE, value=role_ref),
        )

    def _include_tasks(self, node: GenericNode | None) -> IncludeTasks | None:
        if not isinstance(node, ScalarNode):
            self._skip("include_tasks", node)
            return None
        return IncludeTasks(
            start_line=node.line,
            end_line=last_line(node),
            reference=Reference(type=ReferenceType.TASK, value=node.value),
        )

    # -- roles ---------------------------------------------------------------

    def _role_list(self, node: GenericNode | None) -> RoleList | None:
        if not isinstance(node, SequenceNode):
            self._skip("role list", node)
            return None
        roles = [role for role in map(self._role, node.children) if role is not None]
        return RoleList(start_line=node.line, end_line=last_line(node), children=tuple(roles))

    def _role(self, node: GenericNode) -> Role | None:
        match node:
            case ScalarNode(value=value):
                role_name = value
            case MappingNode():
                role_node = map_key_value(node, "role")
                if not isinstance(role_node, ScalarNode):
                    self._skip("role", node)
                    return None
                role_name = role_node.value
            case _:
                self._skip("role", node)
                return None
        return Role(
            start_line=node.line,
            end_line=last_line(node),
            reference=Reference(type=ReferenceType.ROLE, value=role_name),
        )

    def _skip(self, construct: str, node: GenericNode | None) -> None:
        if node is None:
            logger.debug("skipping %s: missing value", construct)
        else:
            logger.debug(
                "skipping unrecognized %s at %s (%s)", construct, self._span(node), node.kind
            )


def classify(document: GenericNode, kind: DocKind, filename: str = "<string>") -> AstNode:
    """Classify ``document`` as a document of ``kind``; see ``StructuralClassifier``."""
    return StructuralClassifier(filename).classify(document, kind)
