"""Tests for sqrunner.jar."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from sqrunner.errors import (
    JarMissingError,
    JarNotFileError,
    JarUnreadableError,
    RunBuildError,
    RunnerJarError,
)
from sqrunner.jar import RUNNER_JAR_NAME, locate_runner_jar, runner_jar_path


class TestRunnerJarPath:
    def test_below_plugin_root(self, tmp_path):
        path = runner_jar_path(tmp_path)
        assert path == tmp_path / "sonar-qube-runner" / "lib" / RUNNER_JAR_NAME

    def test_accepts_string(self, tmp_path):
        assert runner_jar_path(str(tmp_path)) == runner_jar_path(tmp_path)


class TestLocateRunnerJar:
    def test_returns_absolute_path(self, plugin_root):
        path = locate_runner_jar(plugin_root)
        assert Path(path).is_absolute()
        assert path.endswith(RUNNER_JAR_NAME)

    def test_missing(self, tmp_path):
        with pytest.raises(JarMissingError, match="doesn't exist") as exc_info:
            locate_runner_jar(tmp_path)
        assert exc_info.value.path == str(runner_jar_path(tmp_path).absolute())

    def test_not_a_file(self, tmp_path):
        runner_jar_path(tmp_path).mkdir(parents=True)
        with pytest.raises(JarNotFileError, match="is not a file"):
            locate_runner_jar(tmp_path)

    def test_unreadable(self, plugin_root, monkeypatch):
        monkeypatch.setattr(os, "access", lambda path, mode: False)
        with pytest.raises(JarUnreadableError, match="Cannot read"):
            locate_runner_jar(plugin_root)

    def test_errors_are_distinct(self):
        assert not issubclass(JarMissingError, JarNotFileError)
        assert not issubclass(JarNotFileError, JarUnreadableError)
        assert not issubclass(JarUnreadableError, JarMissingError)

    def test_errors_are_build_errors(self, tmp_path):
        with pytest.raises(RunBuildError):
            locate_runner_jar(tmp_path)
        assert issubclass(JarUnreadableError, RunnerJarError)
