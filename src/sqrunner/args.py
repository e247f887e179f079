"""Compose SonarQube Runner program arguments."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from pathlib import Path

from .params import COVERAGE_DATA_FILE, SonarParameters

logger = logging.getLogger(__name__)

# Field name -> runner property, in emission order.
SONAR_ARGS: tuple[tuple[str, str], ...] = (
    ("host_url", "-Dsonar.host.url"),
    ("jdbc_url", "-Dsonar.jdbc.url"),
    ("jdbc_username", "-Dsonar.jdbc.username"),
    ("jdbc_password", "-Dsonar.jdbc.password"),
    ("project_key", "-Dsonar.projectKey"),
    ("project_name", "-Dsonar.projectName"),
    ("project_version", "-Dsonar.projectVersion"),
    ("sources", "-Dsonar.sources"),
    ("tests", "-Dsonar.tests"),
    ("binaries", "-Dsonar.binaries"),
    ("modules", "-Dsonar.modules"),
)

DYNAMIC_ANALYSIS = "-Dsonar.dynamicAnalysis"
JUNIT_REPORTS_PATH = "-Dsonar.junit.reportsPath"
COVERAGE_PLUGIN = "-Dsonar.java.coveragePlugin"
JACOCO_REPORT_PATH = "-Dsonar.jacoco.reportPath"


def add_arg(args: list[str], key: str, value: str | None) -> None:
    """Append ``key=value`` only if the value is present."""
    if value is not None:
        args.append(f"{key}={value}")


def join_reports(reports: Iterable[str]) -> str:
    """Join report paths with commas in lexical order."""
    return ",".join(sorted(reports))


def split_lines(text: str) -> list[str]:
    """Split free text on newlines, dropping trailing empty lines.

    An empty value yields no lines rather than a single empty argument.
    """
    lines = text.split("\n")
    while lines and lines[-1] == "":
        lines.pop()
    return lines


def _is_readable_file(path: str) -> bool:
    return Path(path).is_file() and os.access(path, os.R_OK)


def compose_args(
    runner_parameters: Mapping[str, str | None] | SonarParameters,
    shared_config_parameters: Mapping[str, str | None],
    collected_reports: Iterable[str] = (),
) -> list[str]:
    """Compose the program arguments passed to the SonarQube Runner."""
    if isinstance(runner_parameters, SonarParameters):
        params = runner_parameters
    else:
        params = SonarParameters.from_mapping(runner_parameters)

    args: list[str] = []
    for field, key in SONAR_ARGS:
        if params.is_present(field):
            add_arg(args, key, getattr(params, field))

    if params.is_present("additional_parameters"):
        extra = split_lines(params.additional_parameters or "")
        logger.debug("Adding %d additional parameter(s)", len(extra))
        args.extend(extra)

    reports = set(collected_reports)
    if reports:
        logger.debug("Reusing %d collected report(s)", len(reports))
        add_arg(args, DYNAMIC_ANALYSIS, "reuseReports")
        add_arg(args, JUNIT_REPORTS_PATH, join_reports(reports))

    coverage_file = shared_config_parameters.get(COVERAGE_DATA_FILE)
    if coverage_file is not None:
        if _is_readable_file(coverage_file):
            add_arg(args, COVERAGE_PLUGIN, "jacoco")
            add_arg(args, JACOCO_REPORT_PATH, coverage_file)
        else:
            logger.warning("Skipping coverage data; '%s' is not a readable file", coverage_file)

    return args
