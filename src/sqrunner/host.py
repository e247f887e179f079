"""Contracts between the agent host and build services."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Protocol

from .cmdline import ProgramCommandLine
from .context import AgentBuild, RunnerContext
from .errors import RunBuildError

logger = logging.getLogger(__name__)


class ReportCollector(Protocol):
    """Anything that exposes report paths gathered during the build."""

    @property
    def collected_reports(self) -> set[str]: ...


class CommandLineBuildService(ABC):
    """Base class for build steps that run as an external process.

    The host calls ``initialize`` once per build step and then asks for the
    command line to launch.
    """

    def __init__(self) -> None:
        self._build: AgentBuild | None = None
        self._runner_context: RunnerContext | None = None

    def initialize(self, build: AgentBuild, runner_context: RunnerContext) -> None:
        """Bind the service to the current build step."""
        logger.debug("Initializing %s", type(self).__name__)
        self._build = build
        self._runner_context = runner_context

    @property
    def build(self) -> AgentBuild:
        if self._build is None:
            raise RunBuildError(f"{type(self).__name__} is not initialized")
        return self._build

    @property
    def runner_context(self) -> RunnerContext:
        if self._runner_context is None:
            raise RunBuildError(f"{type(self).__name__} is not initialized")
        return self._runner_context

    @abstractmethod
    def make_program_command_line(self) -> ProgramCommandLine:
        """Return the command line the host should launch."""
