"""Options shared by the commands that inspect a profile."""

from __future__ import annotations

import typer

CONFIG_OPTION = typer.Option(
    None,
    "--config",
    help="TOML config file (defaults to $HOSTOS_CONFIG).",
    dir_okay=False,
)
OS_NAME_OPTION = typer.Option(
    None,
    "--os-name",
    help='Pretend the host reports this OS name (e.g. "Mac OS X").',
)
ARCH_OPTION = typer.Option(
    None,
    "--arch",
    help='Pretend the host reports this architecture (e.g. "x86_64").',
)
