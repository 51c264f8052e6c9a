"""Immutable Ansible AST nodes, one variant per recognized construct.

Every node spans the inclusive line range ``[start_line, end_line]`` of its
definition, descendants included. Only ``ImportPlaybook``, ``ImportRole``,
``Role`` and ``IncludeTasks`` carry a reference; the container variants
carry children instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class DocKind(StrEnum):
    PLAYBOOK = "playbook"
    ROLE = "role"
    UNKNOWN = "unknown"


class ReferenceType(StrEnum):
    PLAYBOOK = "playbook"
    ROLE = "role"
    TASK = "task"


@dataclass(frozen=True)
class Reference:
    """Pointer to another file or role, exactly as written in the source."""

    type: ReferenceType
    value: str


# -- containers ---------------------------------------------------------------


@dataclass(frozen=True)
class Playbook:
    """Top-level sequence of plays and playbook imports."""

    start_line: int
    end_line: int
    children: tuple[AstNode, ...] = ()


@dataclass(frozen=True)
class Play:
    """One play: its task lists (tasks, pre_tasks, post_tasks) then its role list."""

    start_line: int
    end_line: int
    children: tuple[AstNode, ...] = ()


@dataclass(frozen=True)
class TaskList:
    """A sequence of tasks, or the body of a ``block``."""

    start_line: int
    end_line: int
    children: tuple[AstNode, ...] = ()


@dataclass(frozen=True)
class RoleList:
    """The ``roles:`` sequence of a play."""

    start_line: int
    end_line: int
    children: tuple[AstNode, ...] = ()


@dataclass(frozen=True)
class Task:
    """A plain task. Part of the closed node set; tasks that reference nothing are not emitted."""

    start_line: int
    end_line: int
    children: tuple[AstNode, ...] = ()


# -- reference carriers -------------------------------------------------------


@dataclass(frozen=True)
class ImportPlaybook:
    """``- import_playbook: other.yml``"""

    start_line: int
    end_line: int
    reference: Reference


@dataclass(frozen=True)
class ImportRole:
    """``import_role`` / ``include_role`` with ``name`` and optional ``tasks_from``."""

    start_line: int
    end_line: int
    reference: Reference


@dataclass(frozen=True)
class Role:
    """One entry of a play's ``roles:`` list."""

    start_line: int
    end_line: int
    reference: Reference


@dataclass(frozen=True)
class IncludeTasks:
    """``include_tasks: file.yml`` with a bare file name."""

    start_line: int
    end_line: int
    reference: Reference


# The union of all AST node types.
AstNode = (
    Playbook
    | ImportPlaybook
    | Play
    | TaskList
    | Task
    | ImportRole
    | RoleList
    | Role
    | IncludeTasks
)


def children_of(node: AstNode) -> tuple[AstNode, ...]:
    """Return the child nodes of ``node`` (empty for reference carriers)."""
    match node:
        case Playbook(children=children) | Play(children=children) | TaskList(
            children=children
        ) | RoleList(children=children) | Task(children=children):
            return children
        case ImportPlaybook() | ImportRole() | Role() | IncludeTasks():
            return ()
    raise TypeError(f"not an AST node: {node!r}")


def reference_of(node: AstNode) -> Reference | None:
    """Return the reference carried by ``node``, if its type carries one."""
    match node:
        case ImportPlaybook(reference=ref) | ImportRole(reference=ref) | Role(
            reference=ref
        ) | IncludeTasks(reference=ref):
            return ref
        case Playbook() | Play() | TaskList() | RoleList() | Task():
            return None
    raise TypeError(f"not an AST node: {node!r}")


def node_type(node: AstNode) -> str:
    """Display name of the node's type, e.g. ``"ImportRole"``."""
    return type(node).__name__
