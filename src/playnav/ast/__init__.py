"""Typed Ansible AST: node variants, classifier and traversal."""
