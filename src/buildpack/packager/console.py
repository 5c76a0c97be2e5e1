"""Progress output for packaging runs."""

from typing import Any

import click
from pyvider.telemetry import logger

from .config import PackagerConfig

FIRST_LINE_PREFIX = "----->"
SUBSEQUENT_LINE_INDENT = " " * 7


class PackagerLogger:
    """Writes progress lines to stdout and debug diagnostics to stderr.

    Progress lines are always printed. Debug output is only emitted when the
    config enables it, which keeps stdout limited to progress lines.
    """

    def __init__(self, config: PackagerConfig | None = None) -> None:
        self.config = config or PackagerConfig()

    @property
    def debug_enabled(self) -> bool:
        return self.config.debug

    def first_line(self, message: str) -> None:
        click.echo(f"{click.style(FIRST_LINE_PREFIX, fg='red', bold=True)} {message}")

    def subsequent_line(self, message: str) -> None:
        click.echo(f"{SUBSEQUENT_LINE_INDENT}{message}")

    def pretty_version(self, item: Any) -> str:
        """Renders `name version` for anything carrying those attributes."""
        name = getattr(item, "name", "") or getattr(item, "id", "")
        version = getattr(item, "version", "")
        return f"{click.style(name, fg='blue', bold=True)} {click.style(version, fg='blue')}"

    def debug(self, message: str, **kwargs: Any) -> None:
        if self.debug_enabled:
            logger.debug(message, **kwargs)
