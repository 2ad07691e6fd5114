"""Core functionality for minds-mcp."""

from minds_mcp.core.config import MindsConfig

__all__ = ["MindsConfig"]
