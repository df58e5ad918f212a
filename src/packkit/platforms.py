from __future__ import annotations

"""
Host platform / architecture detection for picking prebuilt artifacts.

Only a few artifact variants are shipped, so the tables are coarse: every
unix-like OS collapses onto ``linux`` and every CPU onto ``arm64`` or ``x64``.
Keys use the common cross-runtime vocabulary (``win32``, ``x64``, ``ia32``);
``host_platform`` and ``host_arch`` translate what Python reports into it.
"""

import platform
import re
import sys
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


# --------------------------
# Lookup tables
# --------------------------

PLATFORM_TABLE: Mapping[str, str] = MappingProxyType({
    "aix": "linux",
    "alpine": "linux",
    "darwin": "darwin",
    "freebsd": "linux",
    "linux": "linux",
    "openbsd": "linux",
    "sunos": "linux",
    "win32": "win32",
})

ARCH_TABLE: Mapping[str, str] = MappingProxyType({
    "arm": "arm64",
    "armhf": "arm64",
    "arm64": "arm64",
    "ia32": "x64",
    "loong64": "arm64",
    "mips": "arm64",
    "mipsel": "arm64",
    "ppc": "x64",
    "ppc64": "x64",
    "riscv64": "arm64",
    "s390": "x64",
    "s390x": "x64",
    "x64": "x64",
})

# platform.machine() spellings -> table keys
_MACHINE_ALIASES: Mapping[str, str] = MappingProxyType({
    "x86_64": "x64",
    "amd64": "x64",
    "aarch64": "arm64",
    "aarch64_be": "arm64",
    "armv6l": "arm",
    "armv7l": "arm",
    "armv8l": "arm",
    "i386": "ia32",
    "i486": "ia32",
    "i586": "ia32",
    "i686": "ia32",
    "x86": "ia32",
    "i86pc": "x64",
    "ppc64le": "ppc64",
    "powerpc": "ppc",
    "loongarch64": "loong64",
    "mips64": "mips",
    "mips64el": "mipsel",
})


class UnsupportedPlatformError(ValueError):
    pass


# --------------------------
# Host identifiers
# --------------------------

def host_platform() -> str:
    plat = sys.platform
    if plat in PLATFORM_TABLE:
        return plat
    # freebsd14 -> freebsd, sunos5 -> sunos, aix7 -> aix
    return re.sub(r"\d+$", "", plat)


def host_arch() -> str:
    machine = (platform.machine() or "").lower()
    return _MACHINE_ALIASES.get(machine, machine)


# --------------------------
# Public API
# --------------------------

def autodetect_platform_and_arch(
    system: Optional[str] = None,
    machine: Optional[str] = None,
) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(platform, arch)``; either is None when not in its table."""
    raw_platform = host_platform() if system is None else system
    raw_arch = host_arch() if machine is None else machine
    return PLATFORM_TABLE.get(raw_platform), ARCH_TABLE.get(raw_arch)


def artifact_target(
    system: Optional[str] = None,
    machine: Optional[str] = None,
) -> str:
    raw_platform = host_platform() if system is None else system
    raw_arch = host_arch() if machine is None else machine
    plat, arch = autodetect_platform_and_arch(raw_platform, raw_arch)
    if plat is None or arch is None:
        raise UnsupportedPlatformError(
            f"No prebuilt artifact for platform={raw_platform!r} arch={raw_arch!r}"
        )
    return f"{plat}-{arch}"
