"""
Host platform detection — which binary does this machine need?

The manifest is keyed with Node.js ``os.platform()`` / ``os.arch()``
names (``linux``, ``darwin``, ``win32`` / ``x64``, ``arm64``, ``ia32``),
so the raw values from Python's :mod:`platform` module are normalized
to that vocabulary before the key is built.
"""

from __future__ import annotations

import platform

from pydantic import BaseModel, ConfigDict

# Product prefix of every manifest key
KEY_PREFIX = "mcp-digitalocean"

_OS_MAP = {
    "linux": "linux",
    "darwin": "darwin",
    "windows": "win32",
    "freebsd": "freebsd",
    "openbsd": "openbsd",
    "sunos": "sunos",
    "aix": "aix",
}

_ARCH_MAP = {
    "x86_64": "x64",
    "amd64": "x64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv8l": "arm64",
    "i386": "ia32",
    "i686": "ia32",
    "x86": "ia32",
    "armv6l": "arm",
    "armv7l": "arm",
    "arm": "arm",
    "ppc64le": "ppc64",
    "ppc64": "ppc64",
}


class HostPlatform(BaseModel):
    """Normalized OS and architecture of the running host."""

    model_config = ConfigDict(frozen=True)

    system: str
    arch: str

    @property
    def label(self) -> str:
        """``<os>-<arch>``, as shown in error messages."""
        return f"{self.system}-{self.arch}"

    @property
    def key(self) -> str:
        """Manifest key for this host."""
        return platform_key(self.system, self.arch)


def normalize_os(raw: str) -> str:
    """Map a ``platform.system()`` value to its manifest name."""
    lowered = raw.strip().lower()
    return _OS_MAP.get(lowered, lowered)


def normalize_arch(raw: str) -> str:
    """Map a ``platform.machine()`` value to its manifest name."""
    lowered = raw.strip().lower()
    return _ARCH_MAP.get(lowered, lowered)


def platform_key(system: str, arch: str) -> str:
    return f"{KEY_PREFIX}-{system}-{arch}"


def detect_host() -> HostPlatform:
    """Detect the current host platform."""
    return HostPlatform(
        system=normalize_os(platform.system()),
        arch=normalize_arch(platform.machine()),
    )
