"""
Tests for manifest loading — manifest.yml parsing and validation.
"""

import json
import textwrap
from pathlib import Path

import pytest

from mcp_launcher.core.config.loader import (
    MANIFEST_FILE,
    ManifestError,
    find_manifest,
    install_dir,
    load_manifest,
)


class TestLoadManifest:
    def test_load_yaml(self, manifest_file: Path):
        manifest = load_manifest(manifest_file)
        assert manifest.lookup("mcp-digitalocean-linux-x64") == "server-linux-x64"
        assert manifest.lookup("mcp-digitalocean-darwin-arm64") is None
        assert len(manifest.platform_keys) == 3

    def test_load_package_json(self, tmp_path: Path):
        path = tmp_path / "package.json"
        path.write_text(json.dumps({
            "name": "@digitalocean/mcp",
            "version": "1.0.0",
            "mcp-server-binaries": {
                "mcp-digitalocean-linux-x64": "mcp-digitalocean-linux-amd64",
            },
        }))
        manifest = load_manifest(path)
        assert manifest.lookup("mcp-digitalocean-linux-x64") == "mcp-digitalocean-linux-amd64"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ManifestError, match="not found"):
            load_manifest(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "manifest.yml"
        path.write_text("mcp-server-binaries: [unclosed\n")
        with pytest.raises(ManifestError, match="Invalid YAML"):
            load_manifest(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "manifest.yml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ManifestError, match="Expected a mapping"):
            load_manifest(path)

    def test_missing_table(self, tmp_path: Path):
        path = tmp_path / "manifest.yml"
        path.write_text("name: something\n")
        with pytest.raises(ManifestError, match="mcp-server-binaries"):
            load_manifest(path)

    def test_table_wrong_type(self, tmp_path: Path):
        path = tmp_path / "manifest.yml"
        path.write_text("mcp-server-binaries: not-a-table\n")
        with pytest.raises(ManifestError, match="Invalid manifest"):
            load_manifest(path)

    def test_empty_filename(self, tmp_path: Path):
        path = tmp_path / "manifest.yml"
        path.write_text(textwrap.dedent("""\
            mcp-server-binaries:
              mcp-digitalocean-linux-x64: ""
        """))
        with pytest.raises(ManifestError, match="empty executable name"):
            load_manifest(path)


class TestFindManifest:
    def test_default_is_install_dir(self):
        assert find_manifest() == install_dir() / MANIFEST_FILE

    def test_base_dir(self, tmp_path: Path):
        assert find_manifest(tmp_path) == tmp_path / MANIFEST_FILE

    def test_env_override(self, tmp_path: Path, monkeypatch):
        target = tmp_path / "other.yml"
        monkeypatch.setenv("MCP_LAUNCHER_MANIFEST", str(target))
        assert find_manifest() == target


class TestBundledManifest:
    def test_install_dir_is_package(self):
        assert (install_dir() / "__init__.py").is_file()

    def test_bundled_manifest_loads(self):
        manifest = load_manifest()
        assert "mcp-digitalocean-linux-x64" in manifest.platform_keys
        for key in manifest.platform_keys:
            assert key.startswith("mcp-digitalocean-")
