"""
Adapters — the side-effect boundary of the launcher.

    from mcp_launcher.adapters import ProcessAdapter, MockAdapter
"""

from mcp_launcher.adapters.base import Adapter, ExecutionContext
from mcp_launcher.adapters.mock import MockAdapter
from mcp_launcher.adapters.shell.process import ProcessAdapter

__all__ = [
    "Adapter",
    "ExecutionContext",
    "MockAdapter",
    "ProcessAdapter",
]
