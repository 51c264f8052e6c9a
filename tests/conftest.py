"""Shared test fixtures for playnav."""

from __future__ import annotations

from pathlib import Path

import pytest

from playnav.ast.classifier import StructuralClassifier
from playnav.ast.nodes import AstNode, DocKind
from playnav.parser.loader import TrackedLoader


@pytest.fixture
def loader() -> TrackedLoader:
    return TrackedLoader()


@pytest.fixture
def classifier() -> StructuralClassifier:
    return StructuralClassifier()


def parse(content: str, kind: DocKind) -> AstNode:
    """Load ``content`` and classify it as ``kind``."""
    document = TrackedLoader().load_string(content)
    return StructuralClassifier().classify(document.root, kind)


def write(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


SAMPLE_PLAYBOOK_YAML = """\
- import_playbook: common.yml

- hosts: webservers
  pre_tasks:
    - name: update cache
      apt:
        update_cache: true
  roles:
    - nginx
    - role: app
      vars:
        port: 8080
  tasks:
    - include_tasks: setup.yml
    - name: import the db role
      import_role:
        name: db
        tasks_from: install
    - block:
        - include_role:
            name: monitoring
        - debug:
            msg: done
  post_tasks:
    - include_tasks:
        file: cleanup.yml
    - include_tasks: finish.yml
"""

SAMPLE_ROLE_YAML = """\
---
- name: install packages
  package:
    name: nginx
- include_tasks: configure.yml
- import_role:
    name: common
- include_tasks: "{{ item }}.yml"
"""

SCENARIO_PLAYBOOK_YAML = """\
- hosts: all
  roles:
    - myrole
"""


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A small Ansible project tree on disk.

    Layout::

        playbooks/site.yml              (SAMPLE_PLAYBOOK_YAML)
        playbooks/common.yml
        playbooks/setup.yml
        playbooks/finish.yml
        playbooks/scenario.yml          (SCENARIO_PLAYBOOK_YAML)
        playbooks/roles/nginx/tasks/main.yml
        playbooks/roles/app/            (no tasks/main.yml)
        playbooks/roles/db/tasks/install
        playbooks/roles/myrole/tasks/main.yml
        playbooks/roles/web/tasks/main.yml      (SAMPLE_ROLE_YAML)
        playbooks/roles/web/tasks/configure.yml
    """
    playbooks = tmp_path / "playbooks"
    write(playbooks / "site.yml", SAMPLE_PLAYBOOK_YAML)
    write(playbooks / "common.yml", "- hosts: all\n")
    write(playbooks / "setup.yml", "- debug: msg=setup\n")
    write(playbooks / "finish.yml", "- debug: msg=finish\n")
    write(playbooks / "scenario.yml", SCENARIO_PLAYBOOK_YAML)
    write(playbooks / "roles" / "nginx" / "tasks" / "main.yml", "- debug: msg=nginx\n")
    (playbooks / "roles" / "app").mkdir(parents=True)
    write(playbooks / "roles" / "db" / "tasks" / "install", "- debug: msg=db\n")
    write(playbooks / "roles" / "myrole" / "tasks" / "main.yml", "- debug: msg=myrole\n")
    write(playbooks / "roles" / "web" / "tasks" / "main.yml", SAMPLE_ROLE_YAML)
    write(playbooks / "roles" / "web" / "tasks" / "configure.yml", "- debug: msg=configure\n")
    return tmp_path
