from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from hostos.core.config import CONFIG_ENV_VAR, Config, load_config
from hostos.core.errors import ErrorCode
from hostos.core.result import Err, Ok
from hostos.output.console import ConsoleProtocol, RichConsole
from hostos.platform.environment import Environment, OverlayEnvironment, SystemEnvironment
from hostos.platform.profile import PlatformProfile, classify, current


@dataclass(frozen=True, slots=True)
class CLIContext:
    profile: PlatformProfile
    env: Environment
    config: Config
    console: ConsoleProtocol


def make_console() -> ConsoleProtocol:
    return RichConsole()


def _config_path(explicit: Path | None) -> Path | None:
    if explicit is not None:
        return explicit
    from_env = os.environ.get(CONFIG_ENV_VAR)
    if from_env:
        return Path(from_env).expanduser()
    return None


def apply_config(config: Config, base: Environment) -> Environment:
    """Layer the config overrides on top of ``base``.

    The search path override is stored under the path variable of the
    profile the (possibly overridden) OS name classifies to.
    """
    if config.is_empty:
        return base

    variables: dict[str, str] = {}
    if config.search.path is not None:
        os_name = config.platform.os_name
        if os_name is None:
            os_name = base.os_name()
        variables[classify(os_name).path_var] = config.search.path

    return OverlayEnvironment(
        base,
        name=config.platform.os_name,
        machine=config.platform.arch,
        variables=variables,
    )


def build_context(
    *,
    config_path: Path | None = None,
    os_name: str | None = None,
    arch: str | None = None,
    base: Environment | None = None,
    console: ConsoleProtocol | None = None,
) -> CLIContext:
    """Resolve config and overrides into the profile a command works on.

    Precedence: command-line flags, then the config file, then the host.
    """
    console = console or make_console()

    config = Config()
    path = _config_path(config_path)
    if path is not None:
        match load_config(path):
            case Ok(loaded):
                console.info(f"using config {path}")
                config = loaded
            case Err(error):
                console.error(error.message)
                raise typer.Exit(code=int(ErrorCode.IO_ERROR))

    config = config.with_overrides(os_name=os_name, arch=arch)
    env = apply_config(config, base or SystemEnvironment())

    return CLIContext(
        profile=current(env),
        env=env,
        config=config,
        console=console,
    )
