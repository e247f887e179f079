"""Runner parameter keys and the typed view over them."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# -- Runner parameter keys --

HOST_URL = "sonarServer.hostUrl"
JDBC_URL = "sonarServer.jdbcUrl"
JDBC_USERNAME = "sonarServer.jdbcUsername"
JDBC_PASSWORD = "secure:sonarServer.jdbcPassword"
PROJECT_KEY = "sonarProjectKey"
PROJECT_NAME = "sonarProjectName"
PROJECT_VERSION = "sonarProjectVersion"
PROJECT_SOURCES = "sonarProjectSources"
PROJECT_TESTS = "sonarProjectTests"
PROJECT_BINARIES = "sonarProjectBinaries"
PROJECT_MODULES = "sonarProjectModules"
ADDITIONAL_PARAMETERS = "sonarServer.additionalParameters"
TARGET_JDK_HOME = "target.jdk.home"
JVM_ARGS = "jvmArgs"

# -- Shared config keys --

COVERAGE_DATA_FILE = "teamcity.jacoco.coverage.datafile"
ENV_JAVA_HOME = "env.JAVA_HOME"


class SonarParameters(BaseModel):
    """Runner parameters understood by the SonarQube Runner step.

    Fields are populated either by their runner parameter key (as the host
    supplies them) or by field name (as configuration files declare them).
    """

    model_config = {"populate_by_name": True, "extra": "ignore", "frozen": True}

    host_url: str | None = Field(default=None, alias=HOST_URL)
    jdbc_url: str | None = Field(default=None, alias=JDBC_URL)
    jdbc_username: str | None = Field(default=None, alias=JDBC_USERNAME)
    jdbc_password: str | None = Field(default=None, alias=JDBC_PASSWORD)
    project_key: str | None = Field(default=None, alias=PROJECT_KEY)
    project_name: str | None = Field(default=None, alias=PROJECT_NAME)
    project_version: str | None = Field(default=None, alias=PROJECT_VERSION)
    sources: str | None = Field(default=None, alias=PROJECT_SOURCES)
    tests: str | None = Field(default=None, alias=PROJECT_TESTS)
    binaries: str | None = Field(default=None, alias=PROJECT_BINARIES)
    modules: str | None = Field(default=None, alias=PROJECT_MODULES)
    additional_parameters: str | None = Field(default=None, alias=ADDITIONAL_PARAMETERS)
    target_jdk_home: str | None = Field(default=None, alias=TARGET_JDK_HOME)
    jvm_args: str | None = Field(default=None, alias=JVM_ARGS)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str | None]) -> SonarParameters:
        """Read parameters from a host mapping; unset and unknown keys are ignored."""
        data = {key: value for key, value in mapping.items() if value is not None}
        params = cls.model_validate(data)
        logger.debug("Read %d runner parameter(s)", len(params.model_fields_set))
        return params

    def is_present(self, field: str) -> bool:
        """Return True if the named field was supplied."""
        if field not in type(self).model_fields:
            raise ValueError(f"Unknown runner parameter field: '{field}'")
        return field in self.model_fields_set and getattr(self, field) is not None

    def to_mapping(self) -> dict[str, str]:
        """Return the supplied fields keyed by runner parameter key."""
        return self.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)
