"""
Shared test fixtures and configuration.
"""

import logging
import stat
import textwrap
from pathlib import Path

import pytest

from mcp_launcher.core.host import HostPlatform
from mcp_launcher.core.observability import logging_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep the caller's launcher settings out of the tests."""
    for var in (
        "MCP_LAUNCHER_LOG_LEVEL",
        "MCP_LAUNCHER_LOG_FILE",
        "MCP_LAUNCHER_LOG_FILE_LEVEL",
        "MCP_LAUNCHER_MANIFEST",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging():
    """setup_logging() rewires the root logger; put it back afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    raise_exceptions = logging.raiseExceptions
    yield
    for handler in logging_config._installed:
        handler.close()
    logging_config._installed.clear()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.raiseExceptions = raise_exceptions


@pytest.fixture
def linux_x64() -> HostPlatform:
    return HostPlatform(system="linux", arch="x64")


@pytest.fixture
def manifest_file(tmp_path: Path) -> Path:
    """A manifest with linux and darwin-x64 entries (no darwin-arm64)."""
    content = textwrap.dedent("""\
        mcp-server-binaries:
          mcp-digitalocean-linux-x64: server-linux-x64
          mcp-digitalocean-linux-arm64: server-linux-arm64
          mcp-digitalocean-darwin-x64: server-darwin-x64
    """)
    path = tmp_path / "manifest.yml"
    path.write_text(content)
    return path


@pytest.fixture
def make_binary(tmp_path: Path):
    """Factory writing a fake server binary (a shell script) into tmp_path."""

    def _make(name: str, body: str, executable: bool = True) -> Path:
        path = tmp_path / name
        path.write_text("#!/bin/sh\n" + textwrap.dedent(body))
        mode = path.stat().st_mode
        if executable:
            path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        else:
            path.chmod(mode & ~(stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH))
        return path

    return _make
