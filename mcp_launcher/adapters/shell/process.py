"""
Process adapter — run the server binary in the foreground.

Unlike a capturing shell adapter, the child shares the launcher's
stdin, stdout and stderr: the MCP client talks to the server directly
over those streams, so nothing may be buffered or rewritten here.
"""

from __future__ import annotations

import logging
import subprocess
import time
from pathlib import Path

from mcp_launcher.adapters.base import Adapter, ExecutionContext
from mcp_launcher.core.models.action import Receipt

logger = logging.getLogger(__name__)


class ProcessAdapter(Adapter):
    """Spawn an executable with inherited stdio and wait for it.

    No shell, no timeout. The receipt's ``return_code`` is the raw
    value from :class:`subprocess.Popen`, negative when the child was
    killed by a signal.
    """

    @property
    def name(self) -> str:
        return "process"

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        executable = context.action.executable
        if not Path(executable).exists():
            return False, f'Executable "{executable}" not found.'
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        action = context.action
        argv = [action.executable, *action.args]

        logger.debug("Spawning: %s", argv)
        start = time.monotonic()

        try:
            child = subprocess.Popen(argv, shell=False)
        except OSError as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=action.id,
                error=str(e),
                metadata={"executable": action.executable},
            )

        return_code = _wait(child)
        elapsed_ms = int((time.monotonic() - start) * 1000)

        return Receipt.success(
            adapter=self.name,
            action_id=action.id,
            return_code=return_code,
            duration_ms=elapsed_ms,
            metadata={"executable": action.executable, "pid": child.pid},
        )


def _wait(child: subprocess.Popen) -> int:
    """Wait for the child, riding out Ctrl-C.

    SIGINT goes to the whole foreground process group, so the child
    gets it too and decides on its own when to exit.
    """
    while True:
        try:
            return child.wait()
        except KeyboardInterrupt:
            logger.debug("Interrupted, waiting for pid %d to exit", child.pid)
