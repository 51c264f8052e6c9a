"""Tests for the end-to-end navigation pipeline."""

from __future__ import annotations

from pathlib import Path

import pytest

from playnav.ast.nodes import DocKind, Play, Reference, ReferenceType, Role
from playnav.models.errors import DocumentParseError, DocumentReadError, ShapeError
from playnav.models.request import NavigationRequest
from playnav.navigator.pipeline import Navigator
from playnav.settings import Settings
from tests.conftest import write


@pytest.fixture
def navigator() -> Navigator:
    return Navigator(Settings())


def request(path: Path, row: int, column: int = 5) -> NavigationRequest:
    return NavigationRequest(file=path, row=row, column=column)


class TestNavigator:
    def test_scenario_role(self, navigator: Navigator, project: Path) -> None:
        result = navigator.navigate(request(project / "playbooks" / "scenario.yml", 3))
        assert result.doc_kind is DocKind.PLAYBOOK
        assert isinstance(result.node, Role)
        assert result.reference == Reference(ReferenceType.ROLE, "myrole")
        expected = project / "playbooks" / "roles" / "myrole" / "tasks" / "main.yml"
        assert result.resolved == expected.resolve()
        assert result.target == str(expected.resolve())

    def test_import_playbook(self, navigator: Navigator, project: Path) -> None:
        result = navigator.navigate(request(project / "playbooks" / "site.yml", 1))
        assert result.resolved == project / "playbooks" / "common.yml"

    def test_include_tasks(self, navigator: Navigator, project: Path) -> None:
        result = navigator.navigate(request(project / "playbooks" / "site.yml", 14))
        assert result.resolved == project / "playbooks" / "setup.yml"

    def test_role_document(self, navigator: Navigator, project: Path) -> None:
        main = project / "playbooks" / "roles" / "web" / "tasks" / "main.yml"
        result = navigator.navigate(request(main, 5))
        assert result.doc_kind is DocKind.ROLE
        assert result.resolved == main.parent / "configure.yml"

    def test_reference_without_target(self, navigator: Navigator, project: Path) -> None:
        result = navigator.navigate(request(project / "playbooks" / "site.yml", 21))
        assert result.reference == Reference(ReferenceType.ROLE, "monitoring")
        assert result.resolved is None
        assert result.target == ""

    def test_node_without_reference(self, navigator: Navigator, project: Path) -> None:
        result = navigator.navigate(request(project / "playbooks" / "site.yml", 3))
        assert isinstance(result.node, Play)
        assert result.reference is None
        assert result.target == ""

    def test_row_outside_document(self, navigator: Navigator, project: Path) -> None:
        result = navigator.navigate(request(project / "playbooks" / "site.yml", 500))
        assert result.node is None
        assert result.target == ""

    def test_unknown_document_kind(self, navigator: Navigator, tmp_path: Path) -> None:
        path = write(tmp_path / "site.yml", "- import_playbook: other.yml\n")
        write(tmp_path / "other.yml")
        result = navigator.navigate(request(path, 1))
        assert result.doc_kind is DocKind.UNKNOWN
        assert result.node is None
        assert result.target == ""

    def test_missing_file(self, navigator: Navigator, tmp_path: Path) -> None:
        with pytest.raises(DocumentReadError, match="cannot stat"):
            navigator.navigate(request(tmp_path / "playbooks" / "nope.yml", 1))

    def test_directory_is_not_a_file(self, navigator: Navigator, tmp_path: Path) -> None:
        (tmp_path / "playbooks" / "dir.yml").mkdir(parents=True)
        with pytest.raises(DocumentReadError):
            navigator.navigate(request(tmp_path / "playbooks" / "dir.yml", 1))

    def test_shape_error_propagates(self, navigator: Navigator, tmp_path: Path) -> None:
        path = write(tmp_path / "playbooks" / "vars.yml", "key: value\n")
        with pytest.raises(ShapeError):
            navigator.navigate(request(path, 1))

    def test_parse_error_propagates(self, navigator: Navigator, tmp_path: Path) -> None:
        path = write(tmp_path / "playbooks" / "bad.yml", "- hosts: [all\n")
        with pytest.raises(DocumentParseError):
            navigator.navigate(request(path, 1))

    def test_settings_role_layout(self, tmp_path: Path) -> None:
        site = write(tmp_path / "playbooks" / "site.yml", "- hosts: all\n  roles:\n    - web\n")
        entry = write(tmp_path / "playbooks" / "galaxy" / "web" / "tasks" / "site.yml")
        navigator = Navigator(Settings(roles_dir="galaxy", role_entry_file="site.yml"))
        result = navigator.navigate(request(site, 3))
        assert result.resolved == entry.resolve()

    def test_navigator_is_reusable(self, navigator: Navigator, project: Path) -> None:
        site = project / "playbooks" / "site.yml"
        first = navigator.navigate(request(site, 9))
        second = navigator.navigate(request(site, 9))
        assert first == second
