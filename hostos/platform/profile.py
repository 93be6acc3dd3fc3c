"""Platform families and their naming conventions.

A ``PlatformProfile`` knows how a family of operating systems names scripts,
executables and libraries, which tag identifies its native binaries, and how
to find an executable on the search path. There is one immutable profile per
``Family``; ``classify()`` picks one from an OS name and ``current()`` picks
the one for the running host.

Values that come from the host (OS name, architecture, environment variables,
file existence) are read through an ``Environment`` passed to each call, so
every rule here is a plain function of its inputs.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

from .environment import Environment, SystemEnvironment

__all__ = [
    "Family",
    "PlatformProfile",
    "classify",
    "current",
    "WINDOWS",
    "MACOS",
    "SOLARIS",
    "LINUX",
    "FREEBSD",
    "UNIX",
]

_SYSTEM = SystemEnvironment()


class Family(Enum):
    """Operating system family."""

    WINDOWS = auto()
    UNIX = auto()  # Unrecognized Unix-like system
    MACOS = auto()
    LINUX = auto()
    FREEBSD = auto()
    SOLARIS = auto()

    def __str__(self) -> str:
        return self.name.lower()


# Checked in order, first match wins.
_CLASSIFIERS: tuple[tuple[tuple[str, ...], Family], ...] = (
    (("windows",), Family.WINDOWS),
    (("mac os x", "darwin", "osx"), Family.MACOS),
    (("sunos", "solaris"), Family.SOLARIS),
    (("linux",), Family.LINUX),
    (("freebsd",), Family.FREEBSD),
)

_FAMILY_NAMES: dict[Family, str] = {
    Family.WINDOWS: "windows",
    Family.UNIX: "unknown",
    Family.MACOS: "os x",
    Family.LINUX: "linux",
    Family.FREEBSD: "unknown",
    Family.SOLARIS: "solaris",
}

_UNIX_ARCH_ALIASES = {"x86": "i386", "x86_64": "amd64", "powerpc": "ppc"}


def _resolve(env: Environment | None) -> Environment:
    return _SYSTEM if env is None else env


# -----------------------------------------------------------------------------
# Windows naming
# -----------------------------------------------------------------------------


def _strip_extension(path: str) -> str:
    """Drop the extension of the last path component, if it has one."""
    file_name_start = max(path.rfind("/"), path.rfind("\\"))
    extension_pos = path.rfind(".")
    if extension_pos > file_name_start:
        return path[:extension_pos]
    return path


def _with_extension(path: str, extension: str) -> str:
    if path.lower().endswith(extension):
        return path
    return _strip_extension(path) + extension


# -----------------------------------------------------------------------------
# Unix naming
# -----------------------------------------------------------------------------


def _library_name(name: str, suffix: str) -> str:
    if name.endswith(suffix):
        return name
    pos = name.rfind("/")
    if pos >= 0:
        return name[: pos + 1] + "lib" + name[pos + 1 :] + suffix
    return "lib" + name + suffix


def _unix_arch(arch: str) -> str:
    # Unknown values pass through unchanged.
    return _UNIX_ARCH_ALIASES.get(arch, arch)


def _os_prefix(os_name: str) -> str:
    """Lowercased OS name up to the first space."""
    return os_name.lower().split(" ", 1)[0]


def _windows_native_prefix(env: Environment) -> str:
    arch = env.arch()
    if arch == "i386":
        arch = "x86"
    return "win32-" + arch


def _unix_native_prefix(env: Environment) -> str:
    return f"{_os_prefix(env.os_name())}-{_unix_arch(env.arch())}"


def _macos_native_prefix(env: Environment) -> str:
    return "darwin"


def _solaris_native_prefix(env: Environment) -> str:
    arch = env.arch()
    if arch in ("i386", "x86"):
        return "sunos-x86"
    return "sunos-" + _unix_arch(arch)


_NATIVE_PREFIXES: dict[Family, Callable[[Environment], str]] = {
    Family.WINDOWS: _windows_native_prefix,
    Family.UNIX: _unix_native_prefix,
    Family.MACOS: _macos_native_prefix,
    Family.LINUX: _unix_native_prefix,
    Family.FREEBSD: _unix_native_prefix,
    Family.SOLARIS: _solaris_native_prefix,
}


@dataclass(frozen=True, slots=True)
class PlatformProfile:
    """Naming rules and executable lookup for one OS family.

    Use the module constants (``WINDOWS``, ``LINUX``, ...), ``classify()`` or
    ``current()`` rather than building instances directly.
    """

    family: Family

    @staticmethod
    def for_family(family: Family) -> PlatformProfile:
        """Get the shared profile for a family."""
        return _PROFILES[family]

    def __str__(self) -> str:
        return str(self.family)

    # -- classification ------------------------------------------------------

    @property
    def is_windows(self) -> bool:
        return self.family == Family.WINDOWS

    @property
    def is_unix(self) -> bool:
        """True for every family except Windows."""
        return self.family != Family.WINDOWS

    @property
    def is_macos(self) -> bool:
        return self.family == Family.MACOS

    @property
    def is_linux(self) -> bool:
        return self.family == Family.LINUX

    @property
    def family_name(self) -> str:
        return _FAMILY_NAMES[self.family]

    @property
    def path_var(self) -> str:
        """Name of the environment variable holding the search path."""
        return "Path" if self.is_windows else "PATH"

    # -- host values ---------------------------------------------------------

    def name(self, env: Environment | None = None) -> str:
        return _resolve(env).os_name()

    def version(self, env: Environment | None = None) -> str:
        return _resolve(env).os_version()

    def arch(self, env: Environment | None = None) -> str:
        return _resolve(env).arch()

    def describe(self, env: Environment | None = None) -> str:
        """Get "<os name> <os version> <arch>" for the host."""
        env = _resolve(env)
        return f"{env.os_name()} {env.os_version()} {env.arch()}"

    # -- naming --------------------------------------------------------------

    def script_name(self, script_path: str) -> str:
        """Example: script_name("gradlew") -> "gradlew.bat" on Windows."""
        if self.is_windows:
            return _with_extension(script_path, ".bat")
        return script_path

    def executable_name(self, executable_path: str) -> str:
        """Example: executable_name("javac") -> "javac.exe" on Windows."""
        if self.is_windows:
            return _with_extension(executable_path, ".exe")
        return executable_path

    def shared_library_name(self, library_name: str) -> str:
        """Example: shared_library_name("z") -> "libz.so" on Linux."""
        if self.is_windows:
            return _with_extension(library_name, ".dll")
        suffix = ".dylib" if self.is_macos else ".so"
        return _library_name(library_name, suffix)

    def static_library_name(self, library_name: str) -> str:
        if self.is_windows:
            return _with_extension(library_name, ".lib")
        return _library_name(library_name, ".a")

    def native_prefix(self, env: Environment | None = None) -> str:
        """Get the platform/architecture tag for native binaries.

        Examples: "win32-x86", "linux-amd64", "sunos-sparc", "darwin".
        """
        return _NATIVE_PREFIXES[self.family](_resolve(env))

    # -- executable lookup ---------------------------------------------------

    def search_path(self, env: Environment | None = None) -> list[Path]:
        """Get the directories listed in the path variable, in order.

        Empty entries are skipped. Returns an empty list if the variable is
        unset or empty.
        """
        env = _resolve(env)
        value = env.getenv(self.path_var)
        if not value:
            return []
        return [Path(entry) for entry in value.split(env.path_separator) if entry]

    def find_in_path(self, name: str, env: Environment | None = None) -> Path | None:
        """Locate an executable on the search path.

        A name containing a path separator is checked as-is and the search
        path is not consulted. Returns None if nothing is found.
        """
        env = _resolve(env)
        exe_name = self.executable_name(name)
        if _has_separator(exe_name, env):
            candidate = Path(exe_name)
            return candidate if env.is_file(candidate) else None
        for directory in self.search_path(env):
            candidate = directory / exe_name
            if env.is_file(candidate):
                return candidate
        return None

    def find_all_in_path(self, name: str, env: Environment | None = None) -> list[Path]:
        """Like find_in_path, but return every match in search order."""
        env = _resolve(env)
        exe_name = self.executable_name(name)
        if _has_separator(exe_name, env):
            candidate = Path(exe_name)
            return [candidate] if env.is_file(candidate) else []
        return [
            directory / exe_name
            for directory in self.search_path(env)
            if env.is_file(directory / exe_name)
        ]


def _has_separator(path: str, env: Environment) -> bool:
    return any(sep in path for sep in env.sep_chars)


WINDOWS = PlatformProfile(Family.WINDOWS)
MACOS = PlatformProfile(Family.MACOS)
SOLARIS = PlatformProfile(Family.SOLARIS)
LINUX = PlatformProfile(Family.LINUX)
FREEBSD = PlatformProfile(Family.FREEBSD)
UNIX = PlatformProfile(Family.UNIX)

_PROFILES: dict[Family, PlatformProfile] = {
    profile.family: profile for profile in (WINDOWS, MACOS, SOLARIS, LINUX, FREEBSD, UNIX)
}


def classify(os_name: str) -> PlatformProfile:
    """Get the profile for an OS name such as "Windows 11" or "Mac OS X".

    Matching is case-insensitive on substrings. Names that match no known
    family fall back to the generic Unix profile.
    """
    lowered = os_name.lower()
    for needles, family in _CLASSIFIERS:
        if any(needle in lowered for needle in needles):
            return _PROFILES[family]
    return UNIX


def current(env: Environment | None = None) -> PlatformProfile:
    """Get the profile for the host."""
    return classify(_resolve(env).os_name())
