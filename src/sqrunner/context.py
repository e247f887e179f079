"""Per-build state supplied by the agent host."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class PluginDescriptor(BaseModel):
    """Where the plugin is installed on the agent."""

    plugin_root: Path


class RunnerContext(BaseModel):
    """Runner parameters and working directory of the current build step."""

    runner_parameters: dict[str, str] = Field(default_factory=dict)
    working_directory: Path | None = None


class AgentBuild(BaseModel):
    """Build-wide state shared across steps."""

    checkout_directory: Path
    shared_config_parameters: dict[str, str] = Field(default_factory=dict)
