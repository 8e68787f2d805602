"""Launch descriptors for external MCP tool servers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal, Mapping

from mcp import StdioServerParameters

from agent_toolbox.config.settings import get_settings

logger = logging.getLogger(__name__)

BRAVE_SEARCH_SERVER_NAME = "brave-search"
BRAVE_SEARCH_PACKAGE = "@modelcontextprotocol/server-brave-search"


@dataclass(frozen=True)
class MCPServerConfig:
    """How to start one tool server that speaks MCP over stdio.

    Attributes:
        name: Unique server name, also used to prefix its tool names.
        command: Executable to launch.
        args: Ordered command-line arguments.
        env: Extra environment variables for the child process.
        transport: Only "stdio" is supported.
    """

    name: str
    command: str
    args: tuple[str, ...] = ()
    env: Mapping[str, str] = field(default_factory=dict)
    transport: Literal["stdio"] = "stdio"

    def __post_init__(self) -> None:
        # Freeze the containers so a shared config cannot be edited in place.
        object.__setattr__(self, "args", tuple(self.args))
        object.__setattr__(self, "env", MappingProxyType(dict(self.env)))

    def to_stdio_parameters(self) -> StdioServerParameters:
        return StdioServerParameters(
            command=self.command,
            args=list(self.args),
            env=dict(self.env),
        )


def build_brave_search_server(api_key: str | None = None) -> MCPServerConfig:
    if api_key is None:
        api_key = get_settings().brave_api_key
    if not api_key:
        logger.warning(
            "BRAVE_API_KEY is not set; the %s server will reject search calls.",
            BRAVE_SEARCH_SERVER_NAME,
        )
    return MCPServerConfig(
        name=BRAVE_SEARCH_SERVER_NAME,
        command="npx",
        args=("-y", BRAVE_SEARCH_PACKAGE),
        env={"BRAVE_API_KEY": api_key},
    )


def default_servers() -> list[MCPServerConfig]:
    return [build_brave_search_server()]
