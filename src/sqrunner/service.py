"""SonarQube Runner build service."""

from __future__ import annotations

import logging

from .args import compose_args
from .cmdline import JavaCommandLineBuilder, ProgramCommandLine, extract_jvm_args
from .context import PluginDescriptor
from .host import CommandLineBuildService, ReportCollector
from .jar import locate_runner_jar
from .params import ENV_JAVA_HOME, TARGET_JDK_HOME

logger = logging.getLogger(__name__)

MAIN_CLASS = "org.sonar.runner.Main"

_SECRET_ARGS = ("-Dsonar.jdbc.password=",)


def _mask(arg: str) -> str:
    for prefix in _SECRET_ARGS:
        if arg.startswith(prefix):
            return prefix + "*******"
    return arg


class SonarRunnerBuildService(CommandLineBuildService):
    """Runs the SonarQube Runner as a separate Java process."""

    def __init__(self, plugin_descriptor: PluginDescriptor, listener: ReportCollector) -> None:
        super().__init__()
        self.plugin_descriptor = plugin_descriptor
        self.listener = listener

    def java_home(self) -> str | None:
        """Runtime home from the runner parameters, else the agent's JAVA_HOME."""
        java_home = self.runner_context.runner_parameters.get(TARGET_JDK_HOME)
        if java_home:
            return java_home
        return self.build.shared_config_parameters.get(ENV_JAVA_HOME)

    def working_directory(self) -> str:
        working_dir = self.runner_context.working_directory or self.build.checkout_directory
        return str(working_dir.absolute())

    def classpath(self) -> str:
        return locate_runner_jar(self.plugin_descriptor.plugin_root)

    def compose_args(self) -> list[str]:
        return compose_args(
            self.runner_context.runner_parameters,
            self.build.shared_config_parameters,
            self.listener.collected_reports,
        )

    def make_program_command_line(self) -> ProgramCommandLine:
        builder = JavaCommandLineBuilder()
        builder.java_home = self.java_home()
        builder.working_dir = self.working_directory()
        builder.jvm_args = extract_jvm_args(self.runner_context.runner_parameters)
        builder.classpath = self.classpath()
        builder.main_class = MAIN_CLASS
        builder.program_args = self.compose_args()

        cmd = builder.build()

        logger.info("Starting SQR")
        for arg in cmd.arguments:
            logger.info("%s", _mask(arg))

        return cmd
