"""mcp-digitalocean launcher: runs the platform-specific server binary."""

__version__ = "0.1.0"
