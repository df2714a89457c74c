"""Test data factories for deterministic test data generation."""

from tests.factories.translations import (
    make_group,
    make_leaf,
    make_source_tree,
    make_translator,
    make_tree,
    write_toml,
    write_yaml,
)

__all__ = [
    "make_group",
    "make_leaf",
    "make_source_tree",
    "make_translator",
    "make_tree",
    "write_toml",
    "write_yaml",
]
