"""minds-mcp: the Minds data platform API as Model Context Protocol tools."""

__version__ = "1.0.0"
