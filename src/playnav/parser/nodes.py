"""Immutable generic YAML nodes, one variant per node kind.

Lines and columns are 1-based. Mapping children alternate key and value
nodes in document order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class NodeKind(StrEnum):
    DOCUMENT = "document"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"
    ALIAS = "alias"


@dataclass(frozen=True)
class ScalarNode:
    """A plain, quoted or block scalar. ``value`` is the scalar text as parsed."""

    line: int
    column: int
    value: str

    kind = NodeKind.SCALAR

    @property
    def children(self) -> tuple[GenericNode, ...]:
        return ()


@dataclass(frozen=True)
class AliasNode:
    """``*anchor`` reference, kept unexpanded at the position it is written."""

    line: int
    column: int
    anchor: str

    kind = NodeKind.ALIAS
    value = ""

    @property
    def children(self) -> tuple[GenericNode, ...]:
        return ()


@dataclass(frozen=True)
class MappingNode:
    """Block or flow mapping; children are ``key, value, key, value, ...``."""

    line: int
    column: int
    children: tuple[GenericNode, ...] = ()

    kind = NodeKind.MAPPING
    value = ""

    def pairs(self) -> list[tuple[GenericNode, GenericNode]]:
        return list(zip(self.children[0::2], self.children[1::2]))


@dataclass(frozen=True)
class SequenceNode:
    """Block or flow sequence."""

    line: int
    column: int
    children: tuple[GenericNode, ...] = ()

    kind = NodeKind.SEQUENCE
    value = ""


@dataclass(frozen=True)
class DocumentNode:
    """A YAML document. Holds the root node, or nothing for an empty document."""

    line: int
    column: int
    children: tuple[GenericNode, ...] = ()

    kind = NodeKind.DOCUMENT
    value = ""


GenericNode = ScalarNode | AliasNode | MappingNode | SequenceNode | DocumentNode
