"""Locate and validate the bundled SonarQube Runner jar."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .errors import JarMissingError, JarNotFileError, JarUnreadableError

logger = logging.getLogger(__name__)

RUNNER_JAR_NAME = "sonar-runner-dist-2.3.jar"
RUNNER_JAR_DIR = Path("sonar-qube-runner", "lib")


def runner_jar_path(plugin_root: str | Path) -> Path:
    """Return the expected location of the runner jar below the plugin root."""
    return Path(plugin_root) / RUNNER_JAR_DIR / RUNNER_JAR_NAME


def locate_runner_jar(plugin_root: str | Path) -> str:
    """Return the absolute path of the runner jar, raising if it is not usable."""
    jar = runner_jar_path(plugin_root).absolute()
    path = str(jar)
    if not jar.exists():
        raise JarMissingError(f"SonarQube Runner jar doesn't exist on path: {path}", path)
    if not jar.is_file():
        raise JarNotFileError(f"SonarQube Runner jar is not a file on path: {path}", path)
    if not os.access(jar, os.R_OK):
        raise JarUnreadableError(f"Cannot read SonarQube Runner jar on path: {path}", path)
    logger.debug("Using runner jar '%s'", path)
    return path
