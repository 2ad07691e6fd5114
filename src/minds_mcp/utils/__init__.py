"""Utility functions for minds-mcp."""

from minds_mcp.utils.exceptions import (
    MindsError,
    MindsAPIError,
    MindsConnectionError,
)

__all__ = ["MindsError", "MindsAPIError", "MindsConnectionError"]
