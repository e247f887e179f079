"""Declare runner parameters in .hcl files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import hcl2
import jinja2

from .params import SonarParameters
from .resolve import Resolver

logger = logging.getLogger(__name__)


def load(
    file: Path,
    *,
    context: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Load and parse a single HCL file, rendering Jinja2 templates with context."""
    text = file.read_text()
    ctx = context if context is not None else {}
    env = jinja2.Environment(
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
    )
    try:
        text = env.from_string(text).render(ctx)
    except jinja2.TemplateError as exc:
        raise ValueError(f"{file}: {exc}") from exc
    return hcl2.loads(text)


def _stringify(key: str, value: Any) -> str:
    """Flatten an HCL attribute value into a runner parameter string.

    Numbers must be quoted; an unquoted ``1.10`` would reach the runner as ``1.1``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        raise ValueError(f"attribute '{key}' must be a quoted string, got {value!r}")
    if isinstance(value, list):
        return ",".join(_stringify(key, item) for item in value)
    return str(value)


def _find_files(path: Path, recurse: bool) -> list[Path]:
    if path.is_file():
        return [path]
    pattern = "**/*.hcl" if recurse else "*.hcl"
    return sorted(path.glob(pattern))


def load_runners(
    path: str | Path,
    *,
    recurse: bool = False,
    context: dict[str, Any] | None = None,
    variables: dict[str, Any] | None = None,
) -> dict[str, SonarParameters]:
    """Read ``runner`` blocks from a file or directory of .hcl files.

    ``context`` feeds the Jinja2 pass; ``variables`` extends the ``env``
    scope available to ``${...}`` references.
    """
    path = Path(path)
    resolver = Resolver({"env": os.environ, **(variables or {})})
    runners: dict[str, SonarParameters] = {}

    for file in _find_files(path, recurse):
        logger.debug("Loading runners from '%s'", file)
        data = load(file, context=context)
        for block in data.get("runner", []):
            for name, attrs in block.items():
                if name in runners:
                    raise ValueError(f"{file}: duplicate runner '{name}'")
                try:
                    values = {key: _stringify(key, value) for key, value in attrs.items() if value is not None}
                    values = resolver.resolve(values)
                except ValueError as exc:
                    raise ValueError(f"{file}: runner '{name}': {exc}") from exc
                unknown = set(values) - set(SonarParameters.model_fields)
                if unknown:
                    logger.warning("Runner '%s' ignores unknown attribute(s): %s", name, ", ".join(sorted(unknown)))
                runners[name] = SonarParameters.model_validate(values)
                logger.debug("Found runner '%s'", name)

    logger.info("Loaded %d runner(s) from '%s'", len(runners), path)
    return runners
