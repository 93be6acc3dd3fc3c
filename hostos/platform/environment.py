"""Access to the process environment used by platform profiles.

Every value a profile needs from the host (OS name, version, architecture,
environment variables, path separators and regular-file checks) is read
through an ``Environment``. ``SystemEnvironment`` reads the live process;
``StaticEnvironment`` is a fixed value for tests and explicit overrides;
``OverlayEnvironment`` replaces a few values of another environment.
"""

from __future__ import annotations

import os as _os
import platform as _platform
import sys as _sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

__all__ = [
    "Environment",
    "SystemEnvironment",
    "StaticEnvironment",
    "OverlayEnvironment",
]


class Environment(Protocol):
    """Read-only view of the host a profile runs on."""

    @property
    def path_separator(self) -> str:
        """Separator between entries of the path variable."""
        ...

    @property
    def sep_chars(self) -> tuple[str, ...]:
        """Characters that separate directories in a file path."""
        ...

    def os_name(self) -> str: ...

    def os_version(self) -> str: ...

    def arch(self) -> str: ...

    def getenv(self, name: str) -> str | None: ...

    def is_file(self, path: Path) -> bool: ...


def _is_windows_host() -> bool:
    return _sys.platform.lower().startswith(("win32", "cygwin", "msys"))


class SystemEnvironment:
    """Environment backed by the running interpreter."""

    @property
    def path_separator(self) -> str:
        return _os.pathsep

    @property
    def sep_chars(self) -> tuple[str, ...]:
        if _os.altsep:
            return (_os.sep, _os.altsep)
        return (_os.sep,)

    def os_name(self) -> str:
        # NOTE: avoid platform.system() on Windows, it may query WMI and hang.
        if _is_windows_host():
            return "Windows"
        return _platform.system()

    def os_version(self) -> str:
        if _sys.platform == "win32":
            winver = _sys.getwindowsversion()
            return f"{winver.major}.{winver.minor}"
        return _platform.release()

    def arch(self) -> str:
        if _is_windows_host():
            machine = (
                _os.environ.get("PROCESSOR_ARCHITEW6432")
                or _os.environ.get("PROCESSOR_ARCHITECTURE")
                or ""
            )
        else:
            machine = _platform.machine()
        return machine.lower()

    def getenv(self, name: str) -> str | None:
        return _os.environ.get(name)

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def __repr__(self) -> str:
        return "SystemEnvironment()"


def _no_variables() -> dict[str, str]:
    return {}


@dataclass(frozen=True, slots=True)
class StaticEnvironment:
    """Environment with every value given up front.

    ``files`` lists the paths that count as existing regular files. Leave it
    as None to check the real filesystem instead.

    Example:
        env = StaticEnvironment(
            name="Linux",
            machine="x86_64",
            variables={"PATH": "/usr/bin:/usr/local/bin"},
            files=frozenset({"/usr/local/bin/foo"}),
        )
    """

    name: str = ""
    version: str = ""
    machine: str = ""
    variables: Mapping[str, str] = field(default_factory=_no_variables)
    pathsep: str = ":"
    seps: tuple[str, ...] = ("/",)
    files: frozenset[str] | None = None

    @property
    def path_separator(self) -> str:
        return self.pathsep

    @property
    def sep_chars(self) -> tuple[str, ...]:
        return self.seps

    def os_name(self) -> str:
        return self.name

    def os_version(self) -> str:
        return self.version

    def arch(self) -> str:
        return self.machine

    def getenv(self, name: str) -> str | None:
        return self.variables.get(name)

    def is_file(self, path: Path) -> bool:
        if self.files is None:
            return path.is_file()
        return str(path) in self.files


@dataclass(frozen=True, slots=True)
class OverlayEnvironment:
    """Environment that replaces selected values of ``base``.

    None means "use the base value". ``variables`` entries shadow the
    base environment variables of the same name.
    """

    base: Environment
    name: str | None = None
    machine: str | None = None
    variables: Mapping[str, str] = field(default_factory=_no_variables)

    @property
    def path_separator(self) -> str:
        return self.base.path_separator

    @property
    def sep_chars(self) -> tuple[str, ...]:
        return self.base.sep_chars

    def os_name(self) -> str:
        return self.name if self.name is not None else self.base.os_name()

    def os_version(self) -> str:
        return self.base.os_version()

    def arch(self) -> str:
        return self.machine if self.machine is not None else self.base.arch()

    def getenv(self, name: str) -> str | None:
        if name in self.variables:
            return self.variables[name]
        return self.base.getenv(name)

    def is_file(self, path: Path) -> bool:
        return self.base.is_file(path)
