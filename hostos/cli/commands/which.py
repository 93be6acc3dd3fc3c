"""Which command - locate an executable on the search path."""

from __future__ import annotations

from pathlib import Path

import typer

from hostos.cli.commands._helpers import CONFIG_OPTION
from hostos.cli.context import build_context
from hostos.core.errors import ErrorCode


def which(
    name: str = typer.Argument(..., help="Executable name, without platform suffix."),
    all_matches: bool = typer.Option(False, "--all", "-a", help="List every match."),
    os_name: str | None = typer.Option(
        None,
        "--os-name",
        help=(
            "Search with another OS's naming rules. The search path is read from that "
            "OS's path variable (Path on Windows) and split on the host separator, so "
            "set [search] path in the config file when that variable is not defined here."
        ),
    ),
    config: Path | None = CONFIG_OPTION,
) -> None:
    """Print the path of the executable NAME would run."""
    ctx = build_context(config_path=config, os_name=os_name)
    profile, env, console = ctx.profile, ctx.env, ctx.console

    exe_name = profile.executable_name(name)
    if not profile.search_path(env) and not any(sep in exe_name for sep in env.sep_chars):
        console.error(f"{exe_name}: {profile.path_var} is not set")
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    if all_matches:
        found = profile.find_all_in_path(name, env)
    else:
        first = profile.find_in_path(name, env)
        found = [first] if first is not None else []

    if not found:
        console.error(f"{exe_name}: not found in {profile.path_var}")
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    for path in found:
        console.print(str(path))
