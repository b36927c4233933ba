"""
Pytest configuration and shared fixtures for gitvercmp tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from gitvercmp.logging import get_global_logger, set_global_logger
from gitvercmp.versioning import AliasTable, GitVersionComparator


@pytest.fixture
def tmp_test_dir(tmp_path: Path) -> Path:
    """
    Provide a temporary directory for test artifacts.

    Automatically cleaned up after test completion.
    """
    return tmp_path


@pytest.fixture
def create_yaml_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("aliases.yaml", {"aliases": {...}})
    """
    def _create(filename: str, data: Any) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _create


@pytest.fixture
def comparator() -> GitVersionComparator:
    """Provide a comparator with its own, empty cache."""
    return GitVersionComparator(AliasTable())


@pytest.fixture(autouse=True)
def restore_global_logger():
    """Reset the global logger after tests that configure it (e.g. the CLI)."""
    previous = get_global_logger()
    yield
    set_global_logger(previous)


@pytest.fixture
def git_versions() -> list[str]:
    """
    Provide version strings covering every accepted format.

    Stable, maintenance, RC, both dev styles, tag names, `git --version`
    output, platform suffixes and legacy lettered releases.
    """
    return [
        "1.6.0",
        "2.7.1",
        "1.8.5.6",
        "1.6.0.rc2",
        "1.7.1.209.gd60ad81",
        "1.8.5.1.21.gb2a0afd",
        "2.3.0.rc0.36.g63a0e83",
        "1.3.GIT",
        "v1.7.1",
        "v1.0.0b",
        "git version 1.7.0.2",
        "1.7.0.2.msysgit.0",
        "0.99.9h",
        "1.0.rc1",
        "1.0.0a",
        "1.0rc2",
        "0.99.7",
    ]
