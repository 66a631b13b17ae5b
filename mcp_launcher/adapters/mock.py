"""
Mock adapter — test double for the process boundary.

Records every execution context it receives and answers with a
configurable exit code or spawn failure, so launch behavior can be
checked without starting real processes.
"""

from __future__ import annotations

from pathlib import Path

from mcp_launcher.adapters.base import Adapter, ExecutionContext
from mcp_launcher.core.models.action import Receipt


class MockAdapter(Adapter):
    """Mock process adapter.

    By default the "child" exits with code 0 and validation only
    passes for executables that exist on disk, like the real adapter.
    """

    def __init__(
        self,
        adapter_name: str = "mock",
        return_code: int = 0,
        spawn_error: str | None = None,
        check_exists: bool = True,
    ):
        self._name = adapter_name
        self._return_code = return_code
        self._spawn_error = spawn_error
        self._check_exists = check_exists
        self._call_log: list[ExecutionContext] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[ExecutionContext]:
        """All execution contexts this mock has received."""
        return self._call_log

    @property
    def call_count(self) -> int:
        """Number of times execute has been called."""
        return len(self._call_log)

    def set_failure(self, error: str = "Mock failure") -> None:
        """Make the next executions fail to spawn."""
        self._spawn_error = error

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        if not self._check_exists:
            return True, ""
        executable = context.action.executable
        if not Path(executable).exists():
            return False, f'Executable "{executable}" not found.'
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        self._call_log.append(context)

        if self._spawn_error is not None:
            return Receipt.failure(
                adapter=self._name,
                action_id=context.action.id,
                error=self._spawn_error,
            )

        return Receipt.success(
            adapter=self._name,
            action_id=context.action.id,
            return_code=self._return_code,
            metadata={"mock": True},
        )
