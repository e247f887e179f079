"""sqrunner - A build-agent plugin that launches the SonarQube Runner as a Java process."""

from .args import compose_args as compose_args
from .cmdline import JavaCommandLineBuilder as JavaCommandLineBuilder
from .cmdline import ProgramCommandLine as ProgramCommandLine
from .context import AgentBuild as AgentBuild
from .context import PluginDescriptor as PluginDescriptor
from .context import RunnerContext as RunnerContext
from .errors import JarMissingError as JarMissingError
from .errors import JarNotFileError as JarNotFileError
from .errors import JarUnreadableError as JarUnreadableError
from .errors import JavaHomeError as JavaHomeError
from .errors import RunBuildError as RunBuildError
from .errors import RunnerJarError as RunnerJarError
from .host import CommandLineBuildService as CommandLineBuildService
from .jar import locate_runner_jar as locate_runner_jar
from .listener import SonarProcessListener as SonarProcessListener
from .params import SonarParameters as SonarParameters
from .service import SonarRunnerBuildService as SonarRunnerBuildService
