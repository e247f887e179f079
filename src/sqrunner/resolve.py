"""Expand ${...} references in runner attribute values."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

_REF_PATTERN = re.compile(r"\$\$\{|\$\{\s*([^{}]+?)\s*\}")


class Resolver:
    """Resolve ${name} and ${scope.name} references against a variables mapping.

    Unset ${env.NAME} references expand to an empty string with a warning;
    any other undefined reference raises ValueError.

    ``$${`` produces a literal ``${``.
    """

    def __init__(self, variables: Mapping[str, Any] | None = None) -> None:
        self._variables = variables or {}

    def lookup(self, ref: str) -> str:
        """Return the stringified value of a dotted reference."""
        scope, _, name = ref.partition(".")
        env = self._variables.get("env") if scope == "env" else None
        if isinstance(env, Mapping) and name and name not in env:
            logger.warning("Environment variable '%s' is not set", name)
            return ""
        current: Any = self._variables
        for part in ref.split("."):
            if isinstance(current, Mapping) and part in current:
                current = current[part]
            elif hasattr(current, part) and not isinstance(current, Mapping):
                current = getattr(current, part)
            else:
                raise ValueError(f"undefined variable '{ref}'")
        if callable(current):
            current = current()
        return str(current)

    def expand(self, value: str) -> str:
        if "${" not in value:
            return value

        def _replace(match: re.Match) -> str:  # type: ignore[type-arg]
            if match.group(0) == "$${":
                return "${"
            return self.lookup(match.group(1))

        return _REF_PATTERN.sub(_replace, value)

    def resolve(self, attrs: Mapping[str, str]) -> dict[str, str]:
        """Expand references in every attribute value."""
        logger.debug("Resolving %d attribute(s)", len(attrs))
        return {key: self.expand(value) for key, value in attrs.items()}
