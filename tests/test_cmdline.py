"""Tests for sqrunner.cmdline."""

from __future__ import annotations

import pytest

from sqrunner.cmdline import (
    JavaCommandLineBuilder,
    ProgramCommandLine,
    extract_jvm_args,
    java_executable,
)
from sqrunner.errors import JavaHomeError
from sqrunner.params import JVM_ARGS


def _builder(java_home, tmp_path) -> JavaCommandLineBuilder:
    builder = JavaCommandLineBuilder()
    builder.java_home = str(java_home)
    builder.working_dir = str(tmp_path)
    builder.classpath = "/opt/runner.jar"
    builder.main_class = "org.example.Main"
    return builder


class TestExtractJvmArgs:
    def test_absent(self):
        assert extract_jvm_args({}) == []

    def test_empty(self):
        assert extract_jvm_args({JVM_ARGS: ""}) == []

    def test_whitespace_split(self):
        assert extract_jvm_args({JVM_ARGS: "-Xmx512m  -Xss2m"}) == ["-Xmx512m", "-Xss2m"]

    def test_quoted(self):
        assert extract_jvm_args({JVM_ARGS: '-Dname="a b"'}) == ["-Dname=a b"]


class TestJavaExecutable:
    def test_resolves(self, java_home):
        assert java_executable(java_home) == (java_home / "bin" / "java").absolute()

    def test_not_specified(self):
        with pytest.raises(JavaHomeError, match="not specified"):
            java_executable(None)

    def test_missing(self, tmp_path):
        with pytest.raises(JavaHomeError, match="doesn't exist"):
            java_executable(tmp_path / "nope")

    def test_not_directory(self, tmp_path):
        f = tmp_path / "file"
        f.write_text("")
        with pytest.raises(JavaHomeError, match="is not a directory"):
            java_executable(f)

    def test_no_executable(self, tmp_path):
        with pytest.raises(JavaHomeError, match="executable not found"):
            java_executable(tmp_path)


class TestJavaCommandLineBuilder:
    def test_build(self, java_home, tmp_path):
        builder = _builder(java_home, tmp_path)
        builder.jvm_args = ["-Xmx1g"]
        builder.program_args = ["-Dsonar.projectKey=app"]
        cmd = builder.build()
        assert isinstance(cmd, ProgramCommandLine)
        assert cmd.executable_path == str((java_home / "bin" / "java").absolute())
        assert cmd.working_directory == str(tmp_path)
        assert cmd.arguments == [
            "-Xmx1g",
            "-classpath",
            "/opt/runner.jar",
            "org.example.Main",
            "-Dsonar.projectKey=app",
        ]

    def test_environment_and_properties_default_empty(self, java_home, tmp_path):
        cmd = _builder(java_home, tmp_path).build()
        assert cmd.environment == {}
        assert cmd.system_properties == {}

    def test_system_properties_before_classpath(self, java_home, tmp_path):
        builder = _builder(java_home, tmp_path)
        builder.system_properties = {"file.encoding": "UTF-8"}
        cmd = builder.build()
        assert cmd.arguments[:2] == ["-Dfile.encoding=UTF-8", "-classpath"]

    def test_missing_main_class(self, java_home, tmp_path):
        builder = _builder(java_home, tmp_path)
        builder.main_class = ""
        with pytest.raises(ValueError, match="Main class"):
            builder.build()

    def test_bad_java_home(self, tmp_path):
        builder = _builder(tmp_path / "missing", tmp_path)
        with pytest.raises(JavaHomeError):
            builder.build()

    def test_builder_lists_copied(self, java_home, tmp_path):
        builder = _builder(java_home, tmp_path)
        cmd = builder.build()
        builder.program_args.append("-X")
        assert cmd.program_args == []

    def test_str_is_shell_quoted(self, java_home, tmp_path):
        builder = _builder(java_home, tmp_path)
        builder.program_args = ["-Dsonar.projectName=My App"]
        assert "'-Dsonar.projectName=My App'" in str(builder.build())
