"""Names command - derive platform file names from a base name."""

from __future__ import annotations

from pathlib import Path

import typer

from hostos.cli.commands._helpers import ARCH_OPTION, CONFIG_OPTION, OS_NAME_OPTION
from hostos.cli.context import build_context


def names(
    name: str = typer.Argument(..., help="Base name or path, e.g. 'foo' or 'lib/foo'."),
    os_name: str | None = OS_NAME_OPTION,
    arch: str | None = ARCH_OPTION,
    config: Path | None = CONFIG_OPTION,
) -> None:
    """Show script, executable and library names for NAME."""
    ctx = build_context(config_path=config, os_name=os_name, arch=arch)
    profile, console = ctx.profile, ctx.console

    console.header(f"{name} on {profile}")
    console.detail("script", profile.script_name(name))
    console.detail("executable", profile.executable_name(name))
    console.detail("shared library", profile.shared_library_name(name))
    console.detail("static library", profile.static_library_name(name))
