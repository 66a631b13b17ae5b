"""
Domain models — Pydantic types for the launcher.

    from mcp_launcher.core.models import Action, Receipt, Manifest
"""

from mcp_launcher.core.models.action import Action, Receipt
from mcp_launcher.core.models.manifest import BINARIES_KEY, Manifest

__all__ = [
    # action.py
    "Action",
    "Receipt",
    # manifest.py
    "BINARIES_KEY",
    "Manifest",
]
