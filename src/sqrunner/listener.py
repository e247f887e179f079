"""Build listener that gathers test report paths for reuse by the analysis."""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

REPORT_TYPES = frozenset({"junit", "surefire"})

_MESSAGE_PATTERN = re.compile(
    r"##teamcity\[(?P<name>[\w.]+)(?P<attrs>(?:\s+[\w.]+='(?:[^'|]|\|.)*')*)\s*\]"
)
_ATTR_PATTERN = re.compile(r"([\w.]+)='((?:[^'|]|\|.)*)'")
_ESCAPE_PATTERN = re.compile(r"\|(.)")

_ESCAPES = {
    "'": "'",
    "|": "|",
    "n": "\n",
    "r": "\r",
    "[": "[",
    "]": "]",
}


def unescape(value: str) -> str:
    """Decode a service message attribute value."""
    return _ESCAPE_PATTERN.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), value)


def parse_service_message(text: str) -> tuple[str, dict[str, str]] | None:
    """Return the name and attributes of the service message in text, if any."""
    match = _MESSAGE_PATTERN.search(text)
    if match is None:
        return None
    attrs = {key: unescape(value) for key, value in _ATTR_PATTERN.findall(match.group("attrs"))}
    return match.group("name"), attrs


class SonarProcessListener:
    """Collects test report paths announced through importData service messages."""

    def __init__(self) -> None:
        self._reports: dict[str, None] = {}

    @property
    def collected_reports(self) -> set[str]:
        return set(self._reports)

    def build_started(self) -> None:
        """Forget reports from a previous build."""
        self._reports.clear()

    def add_report(self, path: str) -> None:
        if path in self._reports:
            return
        logger.debug("Collected report '%s'", path)
        self._reports[path] = None

    def message_logged(self, text: str) -> None:
        """Inspect a build log message for imported test reports."""
        message = parse_service_message(text)
        if message is None:
            return
        name, attrs = message
        if name != "importData":
            return
        report_type = attrs.get("type")
        path = attrs.get("path")
        if report_type not in REPORT_TYPES:
            logger.debug("Ignoring importData of type '%s'", report_type)
            return
        if not path:
            logger.warning("importData message of type '%s' has no path", report_type)
            return
        self.add_report(path)
