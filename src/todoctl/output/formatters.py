"""ServiceResult formatting for the three output modes.

``--json`` dumps the model, ``--quiet`` prints the bare minimum, and the
default goes through the Rich renderers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from todoctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from todoctl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output-mode flags pulled from the CLI settings."""

    json_output: bool = False
    quiet: bool = False
    width: int | None = None


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, width=settings.width)
