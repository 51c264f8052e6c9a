"""YAML parsing with line fidelity for playnav."""

from playnav.parser.loader import LoadedDocument, RootShape, TrackedLoader, YAMLSafetyError
from playnav.parser.nodes import (
    AliasNode,
    DocumentNode,
    GenericNode,
    MappingNode,
    NodeKind,
    ScalarNode,
    SequenceNode,
)

__all__ = [
    "AliasNode",
    "DocumentNode",
    "GenericNode",
    "LoadedDocument",
    "MappingNode",
    "NodeKind",
    "RootShape",
    "ScalarNode",
    "SequenceNode",
    "TrackedLoader",
    "YAMLSafetyError",
]
