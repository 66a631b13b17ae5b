"""
Action and Receipt models — the execution contract.

The launcher sends an Action to the process adapter and gets a Receipt
back. Adapters report failures in the Receipt, never as exceptions.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class Action(BaseModel):
    """A request to run one executable.

    ``executable`` is the absolute path of the binary, ``args`` the
    argument vector passed to it verbatim (without argv[0]).
    """

    id: str
    adapter: str
    executable: str
    args: list[str] = Field(default_factory=list)


class Receipt(BaseModel):
    """Result of an adapter execution."""

    adapter: str
    action_id: str
    status: Literal["ok", "failed"] = "ok"

    duration_ms: int = 0

    error: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Whether the action succeeded."""
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        """Whether the action failed."""
        return self.status == "failed"

    @property
    def return_code(self) -> int | None:
        """Exit code reported by the child, if it ran."""
        return self.metadata.get("return_code")

    @classmethod
    def success(
        cls,
        adapter: str,
        action_id: str,
        return_code: int,
        **kwargs: Any,
    ) -> Receipt:
        """Create a success receipt carrying the child's exit code."""
        metadata = kwargs.pop("metadata", {})
        metadata["return_code"] = return_code
        return cls(
            adapter=adapter,
            action_id=action_id,
            status="ok",
            metadata=metadata,
            **kwargs,
        )

    @classmethod
    def failure(
        cls,
        adapter: str,
        action_id: str,
        error: str,
        **kwargs: Any,
    ) -> Receipt:
        """Create a failure receipt."""
        return cls(
            adapter=adapter,
            action_id=action_id,
            status="failed",
            error=error,
            **kwargs,
        )
