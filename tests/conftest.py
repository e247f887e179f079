"""Shared fixtures for sqrunner tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from sqrunner.jar import RUNNER_JAR_DIR, RUNNER_JAR_NAME


@pytest.fixture
def plugin_root(tmp_path: Path) -> Path:
    """A plugin installation with the runner jar in place."""
    root = tmp_path / "plugin"
    lib = root / RUNNER_JAR_DIR
    lib.mkdir(parents=True)
    (lib / RUNNER_JAR_NAME).write_bytes(b"PK")
    return root


@pytest.fixture
def java_home(tmp_path: Path) -> Path:
    """A runtime home with a java executable."""
    home = tmp_path / "jdk"
    (home / "bin").mkdir(parents=True)
    java = home / "bin" / "java"
    java.write_text("#!/bin/sh\n")
    java.chmod(0o755)
    return home
