"""Build-configuration errors reported back to the agent host."""

from __future__ import annotations


class RunBuildError(Exception):
    """The build step cannot be started with the current configuration."""


class JavaHomeError(RunBuildError):
    """The Java runtime home could not be resolved."""


class RunnerJarError(RunBuildError):
    """The bundled SonarQube Runner jar is not usable."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class JarMissingError(RunnerJarError):
    """The runner jar does not exist."""


class JarNotFileError(RunnerJarError):
    """The runner jar path is not a regular file."""


class JarUnreadableError(RunnerJarError):
    """The runner jar cannot be read."""
