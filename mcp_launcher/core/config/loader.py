"""
Manifest loader — reads the bundled manifest into a Manifest model.

The manifest lives next to the launcher as ``manifest.yml``. It is
parsed with PyYAML, which also accepts the JSON ``package.json`` form
the npm distribution ships, and validated against the Pydantic model.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from mcp_launcher.core.models.manifest import BINARIES_KEY, Manifest

logger = logging.getLogger(__name__)

# Default manifest filename, relative to the install directory
MANIFEST_FILE = "manifest.yml"

# Environment override for the manifest location
MANIFEST_ENV = "MCP_LAUNCHER_MANIFEST"


class ManifestError(Exception):
    """Raised when the manifest is missing, unreadable or malformed."""


def install_dir() -> Path:
    """Directory the launcher is installed in; binaries live here too."""
    return Path(__file__).resolve().parents[2]


def find_manifest(base_dir: Path | None = None) -> Path:
    """Resolve the manifest path.

    ``MCP_LAUNCHER_MANIFEST`` wins when set; otherwise the manifest is
    ``manifest.yml`` inside ``base_dir`` (default: the install directory).
    """
    override = os.environ.get(MANIFEST_ENV)
    if override:
        return Path(override)
    return (base_dir or install_dir()) / MANIFEST_FILE


def load_manifest(path: Path | None = None) -> Manifest:
    """Load and validate the manifest.

    Args:
        path: Explicit manifest path. If None, uses find_manifest().

    Returns:
        Validated, immutable Manifest.

    Raises:
        ManifestError: If the file is missing or invalid.
    """
    if path is None:
        path = find_manifest()

    if not path.is_file():
        raise ManifestError(f"Manifest not found: {path}")

    logger.debug("Loading manifest from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ManifestError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ManifestError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ManifestError(f"Expected a mapping in {path}, got {type(data).__name__}")

    if BINARIES_KEY not in data:
        raise ManifestError(f"Missing '{BINARIES_KEY}' table in {path}")

    try:
        manifest = Manifest.model_validate({BINARIES_KEY: data[BINARIES_KEY]})
    except ValidationError as e:
        raise ManifestError(f"Invalid manifest {path}: {e}") from e

    logger.debug("Loaded %d platform entries", len(manifest.binaries))
    return manifest
