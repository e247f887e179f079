"""Java command-line assembly for the host's process launcher."""

from __future__ import annotations

import logging
import os
import shlex
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field

from .errors import JavaHomeError
from .params import JVM_ARGS

logger = logging.getLogger(__name__)


class ProgramCommandLine(BaseModel):
    """A fully assembled Java command line handed back to the host."""

    model_config = {"frozen": True}

    java_home: str
    executable_path: str
    working_directory: str
    classpath: str
    main_class: str
    jvm_args: list[str] = Field(default_factory=list)
    system_properties: dict[str, str] = Field(default_factory=dict)
    environment: dict[str, str] = Field(default_factory=dict)
    program_args: list[str] = Field(default_factory=list)

    @property
    def arguments(self) -> list[str]:
        """Arguments following the executable, in launch order."""
        args = list(self.jvm_args)
        args.extend(f"-D{key}={value}" for key, value in self.system_properties.items())
        args.extend(["-classpath", self.classpath, self.main_class])
        args.extend(self.program_args)
        return args

    def __str__(self) -> str:
        return shlex.join([self.executable_path, *self.arguments])


def extract_jvm_args(runner_parameters: Mapping[str, str | None]) -> list[str]:
    """Split the JVM arguments runner parameter using shell quoting rules."""
    value = runner_parameters.get(JVM_ARGS)
    if not value:
        return []
    return shlex.split(value)


def java_executable(java_home: str | Path | None) -> Path:
    """Resolve the ``java`` executable below a runtime home."""
    if not java_home:
        raise JavaHomeError("Java home is not specified")
    home = Path(java_home)
    if not home.exists():
        raise JavaHomeError(f"Java home doesn't exist on path: {home.absolute()}")
    if not home.is_dir():
        raise JavaHomeError(f"Java home is not a directory on path: {home.absolute()}")
    name = "java.exe" if os.name == "nt" else "java"
    executable = home / "bin" / name
    if not executable.is_file():
        raise JavaHomeError(f"Java executable not found on path: {executable.absolute()}")
    return executable.absolute()


class JavaCommandLineBuilder:
    """Accumulates the parts of a Java command line."""

    def __init__(self) -> None:
        self.java_home: str | None = None
        self.working_dir: str | None = None
        self.jvm_args: list[str] = []
        self.system_properties: dict[str, str] = {}
        self.env_variables: dict[str, str] = {}
        self.classpath: str = ""
        self.main_class: str = ""
        self.program_args: list[str] = []

    def build(self) -> ProgramCommandLine:
        """Assemble the command line; raises JavaHomeError if the runtime is unusable."""
        if not self.main_class:
            raise ValueError("Main class is not set")
        executable = java_executable(self.java_home)
        working_dir = self.working_dir or os.getcwd()
        logger.debug("Assembling command line for %s in '%s'", self.main_class, working_dir)
        return ProgramCommandLine(
            java_home=str(Path(self.java_home or "").absolute()),
            executable_path=str(executable),
            working_directory=working_dir,
            classpath=self.classpath,
            main_class=self.main_class,
            jvm_args=list(self.jvm_args),
            system_properties=dict(self.system_properties),
            environment=dict(self.env_variables),
            program_args=list(self.program_args),
        )
