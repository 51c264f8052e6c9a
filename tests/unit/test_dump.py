"""Tests for the generic node tree dump."""

from __future__ import annotations

from pathlib import Path

from playnav.parser.dump import describe_node, dump_file, dump_tree, iter_yaml_files
from playnav.parser.nodes import AliasNode, DocumentNode, MappingNode, ScalarNode
from tests.conftest import write


class TestDescribeNode:
    def test_values_printed_only_when_present(self) -> None:
        tree = DocumentNode(
            1,
            1,
            (
                MappingNode(
                    1,
                    1,
                    (ScalarNode(1, 1, "base"), AliasNode(1, 7, "anchor")),
                ),
            ),
        )
        assert list(describe_node(tree)) == [
            "document(1,1)",
            " mapping(1,1)",
            "  scalar(1,1): base",
            "  alias(1,7)",
        ]


class TestWalk:
    def test_yaml_files_in_order_skipping_git(self, tmp_path: Path) -> None:
        write(tmp_path / "b.yml")
        write(tmp_path / "a.yaml")
        write(tmp_path / "notes.txt")
        write(tmp_path / "roles" / "web" / "tasks" / "main.yml")
        write(tmp_path / ".git" / "hooks.yml")
        assert [p.relative_to(tmp_path).as_posix() for p in iter_yaml_files(tmp_path)] == [
            "a.yaml",
            "b.yml",
            "roles/web/tasks/main.yml",
        ]

    def test_single_file(self, tmp_path: Path) -> None:
        path = write(tmp_path / "site.yml")
        assert list(iter_yaml_files(path)) == [path]
        other = write(tmp_path / "notes.txt")
        assert list(iter_yaml_files(other)) == []


class TestDumpFile:
    def test_map(self, tmp_path: Path) -> None:
        path = write(tmp_path / "vars.yml", "key: value\n")
        assert dump_file(path)[0] == f"{path} => map"

    def test_error(self, tmp_path: Path) -> None:
        path = write(tmp_path / "bad.yml", "key: [unclosed\n")
        assert dump_file(path) == [f"{path} => error"]

    def test_cannot_read(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.yml"
        assert dump_file(path) == [f"{path} => cannotread"]

    def test_dump_tree(self, tmp_path: Path) -> None:
        write(tmp_path / "a.yml", "- x\n")
        write(tmp_path / "b.yml", "")
        assert list(dump_tree(tmp_path)) == [
            f"{tmp_path / 'a.yml'} => list",
            "document(1,1)",
            " sequence(1,1)",
            "  scalar(1,3): x",
            f"{tmp_path / 'b.yml'} => list",
            "document(1,1)",
        ]
