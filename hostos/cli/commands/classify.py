"""Classify command - map an arbitrary OS name to its family."""

from __future__ import annotations

import typer

from hostos.cli.context import make_console
from hostos.platform.profile import classify as classify_os_name


def classify(
    os_name: str = typer.Argument(..., help='OS name, e.g. "Windows 11" or "SunOS".'),
) -> None:
    """Print the family an OS name belongs to."""
    console = make_console()
    profile = classify_os_name(os_name)
    console.detail("family", str(profile))
    console.detail("family name", profile.family_name)
