"""Info command - show the profile the host (or an override) resolves to."""

from __future__ import annotations

from pathlib import Path

from hostos.cli.commands._helpers import ARCH_OPTION, CONFIG_OPTION, OS_NAME_OPTION
from hostos.cli.context import build_context
from hostos.output.console import Style


def info(
    os_name: str | None = OS_NAME_OPTION,
    arch: str | None = ARCH_OPTION,
    config: Path | None = CONFIG_OPTION,
) -> None:
    """Show the platform family, native prefix and search path."""
    ctx = build_context(config_path=config, os_name=os_name, arch=arch)
    profile, env, console = ctx.profile, ctx.env, ctx.console

    console.header(f"Platform: {profile}")
    console.detail("family name", profile.family_name)
    console.detail("os", profile.describe(env))
    console.detail("native prefix", profile.native_prefix(env))
    console.detail("path variable", profile.path_var)

    search_path = profile.search_path(env)
    if not search_path:
        console.warning(f"{profile.path_var} is not set")
        return
    console.detail("search path", f"{len(search_path)} entries")
    for directory in search_path:
        console.print(f"  {directory}", Style.DIM)
