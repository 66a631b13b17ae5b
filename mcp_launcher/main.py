"""
mcp-digitalocean launcher — CLI entrypoint.

Usage:
    mcp-digitalocean [--verbose] [args...]
    python -m mcp_launcher [--verbose] [args...]

Every argument except ``--verbose`` is handed to the server binary
untouched, including ``--help`` and ``--``.
"""

from __future__ import annotations

import click

from mcp_launcher.core.observability.logging_config import setup_logging_from_env
from mcp_launcher.core.use_cases.launch import run


class PassthroughCommand(click.Command):
    """A command that skips click's option parser entirely.

    The raw argument vector becomes the ``args`` parameter, so ``--``
    and unknown options reach the server exactly as typed.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.params["args"] = tuple(args)
        return []


@click.command(cls=PassthroughCommand, context_settings={"help_option_names": []})
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, args: tuple[str, ...]) -> None:
    """Run the mcp-digitalocean server binary for this platform."""
    # ── Logging setup (once, at process start) ──────────────────
    setup_logging_from_env()

    ctx.exit(run(list(args)))


def main() -> None:
    # No glob expansion on Windows: the server gets argv as typed
    cli.main(prog_name="mcp-digitalocean", windows_expand_args=False)


if __name__ == "__main__":
    main()
