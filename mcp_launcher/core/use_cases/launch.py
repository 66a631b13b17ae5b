"""
Launch use case — resolve the platform binary and run it.

    run(args) → exit code

Every failure is reported on stderr and turned into exit code 1;
otherwise the child's own exit code is returned. ``run()`` never raises.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import click

from mcp_launcher.adapters.base import Adapter, ExecutionContext
from mcp_launcher.adapters.shell.process import ProcessAdapter
from mcp_launcher.core.config.loader import (
    ManifestError,
    find_manifest,
    install_dir,
    load_manifest,
)
from mcp_launcher.core.host import HostPlatform, detect_host
from mcp_launcher.core.models.action import Action
from mcp_launcher.core.observability.logging_config import setup_logging_from_env

logger = logging.getLogger(__name__)

VERBOSE_FLAG = "--verbose"

EXIT_FAILURE = 1


def split_verbose(args: Sequence[str]) -> tuple[bool, list[str]]:
    """Detect and strip every ``--verbose`` token, keeping order."""
    forwarded = [arg for arg in args if arg != VERBOSE_FLAG]
    return len(forwarded) != len(args), forwarded


def run(
    args: Sequence[str] | None = None,
    *,
    base_dir: Path | None = None,
    manifest_path: Path | None = None,
    adapter: Adapter | None = None,
    host: HostPlatform | None = None,
) -> int:
    """Run the platform-specific server binary.

    Args:
        args: Arguments for the binary; may contain ``--verbose``.
        base_dir: Directory holding the binaries and, unless
            manifest_path is given, manifest.yml (default: install dir).
        manifest_path: Explicit manifest path.
        adapter: Process adapter (default: ProcessAdapter).
        host: Host platform (default: detected).

    Returns:
        The child's exit code, or 1 if it could not be launched.
    """
    try:
        return _launch(
            list(args or []),
            base_dir=base_dir,
            manifest_path=manifest_path,
            adapter=adapter or ProcessAdapter(),
            host=host,
        )
    except Exception as e:
        logger.debug("Launch failed", exc_info=True)
        _report(f"Error running executable: {e}")
        return EXIT_FAILURE


def _launch(
    args: list[str],
    *,
    base_dir: Path | None,
    manifest_path: Path | None,
    adapter: Adapter,
    host: HostPlatform | None,
) -> int:
    verbose, child_args = split_verbose(args)
    if verbose:
        setup_logging_from_env(verbose=True)

    try:
        manifest = load_manifest(manifest_path or find_manifest(base_dir))
    except ManifestError as e:
        _report(f"Error loading manifest: {e}")
        return EXIT_FAILURE

    if host is None:
        host = detect_host()
    logger.info("Detected platform: %s", host.system)
    logger.info("Detected architecture: %s", host.arch)

    exec_name = manifest.lookup(host.key)
    if not exec_name:
        _report(f"No executable found for platform: {host.label}")
        return EXIT_FAILURE
    logger.info("Found executable in manifest: %s", exec_name)

    exec_path = (base_dir or install_dir()) / exec_name
    logger.info("Executable path: %s", exec_path)

    context = ExecutionContext(
        action=Action(
            id=host.key,
            adapter=adapter.name,
            executable=str(exec_path),
            args=child_args,
        ),
    )

    valid, error = adapter.validate(context)
    if not valid:
        _report(error)
        return EXIT_FAILURE

    logger.info("Starting %s", exec_path)
    receipt = adapter.execute(context)

    if receipt.failed:
        _report(f"Error executing package: {receipt.error}")
        return EXIT_FAILURE

    code = receipt.return_code
    logger.info("Process exited with code %s after %dms", code, receipt.duration_ms)

    # Killed by a signal: no exit code to relay
    if code is None or code < 0:
        return 0
    return code


def _report(message: str) -> None:
    click.secho(message, fg="red", err=True)
