"""Tool adapters for LangChain agents: a datetime tool and MCP tool servers."""

__version__ = "0.1.0"
