"""
Manifest model — which binary ships for which platform.

The bundled manifest maps a platform key such as
``mcp-digitalocean-linux-x64`` to the filename of the pre-built server
executable that sits next to the launcher.
"""

from __future__ import annotations

from pathlib import PureWindowsPath

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Top-level key of the binaries table in the manifest document
BINARIES_KEY = "mcp-server-binaries"


class Manifest(BaseModel):
    """Platform key → executable filename, immutable once loaded."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    binaries: dict[str, str] = Field(alias=BINARIES_KEY)

    @field_validator("binaries")
    @classmethod
    def _bare_filenames(cls, value: dict[str, str]) -> dict[str, str]:
        for key, name in value.items():
            if not name.strip():
                raise ValueError(f"empty executable name for {key!r}")
            # Binaries are siblings of the launcher: no directories or drives
            if PureWindowsPath(name).name != name or name == "..":
                raise ValueError(f"executable name for {key!r} must be a bare filename: {name!r}")
        return value

    def lookup(self, platform_key: str) -> str | None:
        """Return the executable filename for a platform key, or None."""
        return self.binaries.get(platform_key)

    @property
    def platform_keys(self) -> list[str]:
        """All platform keys the manifest knows about."""
        return sorted(self.binaries)
