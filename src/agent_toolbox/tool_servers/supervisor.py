"""Runs MCP tool servers and exposes their tools to LangChain agents."""

from __future__ import annotations

import logging
from contextlib import AsyncExitStack
from typing import Any, Iterable

from langchain_core.tools import StructuredTool, ToolException
from mcp import ClientSession
from mcp.client.stdio import stdio_client

from agent_toolbox.tool_servers.servers import MCPServerConfig

logger = logging.getLogger(__name__)

TOOL_NAME_SEPARATOR = "__"


def _content_to_text(content: Iterable[Any]) -> str:
    parts: list[str] = []
    for item in content:
        text = getattr(item, "text", None)
        parts.append(text if isinstance(text, str) else str(item))
    return "\n".join(parts)


class MCPServerSupervisor:
    """Owns the sessions of a fixed set of MCP servers.

    Servers are started when the supervisor is entered with ``async with``
    and stopped when it exits. The configs are passed in explicitly; the
    supervisor never builds them itself.
    """

    def __init__(
        self, servers: Iterable[MCPServerConfig], prefix_tool_names: bool = True
    ) -> None:
        self._servers: dict[str, MCPServerConfig] = {}
        for server in servers:
            if server.name in self._servers:
                raise ValueError(f"Duplicate MCP server name: {server.name}")
            self._servers[server.name] = server
        self.prefix_tool_names = prefix_tool_names
        self._sessions: dict[str, ClientSession] = {}
        self._stack: AsyncExitStack | None = None

    @property
    def running(self) -> bool:
        return self._stack is not None

    async def __aenter__(self) -> MCPServerSupervisor:
        if self._stack is not None:
            raise RuntimeError("MCP servers are already running")

        stack = AsyncExitStack()
        try:
            for server in self._servers.values():
                logger.info(
                    "Starting MCP server %s: %s %s",
                    server.name,
                    server.command,
                    " ".join(server.args),
                )
                read, write = await stack.enter_async_context(
                    stdio_client(server.to_stdio_parameters())
                )
                session = await stack.enter_async_context(ClientSession(read, write))
                await session.initialize()
                self._sessions[server.name] = session
        except BaseException:
            self._sessions.clear()
            await stack.aclose()
            raise

        self._stack = stack
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        stack, self._stack = self._stack, None
        self._sessions.clear()
        if stack is not None:
            logger.info("Stopping MCP servers: %s", ", ".join(self._servers))
            await stack.aclose()

    def session(self, name: str) -> ClientSession:
        if self._stack is None:
            raise RuntimeError("MCP servers are not running")
        if name not in self._servers:
            raise KeyError(f"Unknown MCP server: {name}")
        return self._sessions[name]

    async def list_remote_tools(self, name: str | None = None) -> dict[str, list[Any]]:
        names = [name] if name is not None else list(self._servers)
        remote: dict[str, list[Any]] = {}
        for server_name in names:
            result = await self.session(server_name).list_tools()
            remote[server_name] = list(result.tools)
        return remote

    def _tool_name(self, server_name: str, tool_name: str) -> str:
        if self.prefix_tool_names:
            return f"{server_name}{TOOL_NAME_SEPARATOR}{tool_name}"
        return tool_name

    def _build_remote_tool(self, server_name: str, remote_tool: Any) -> StructuredTool:
        session = self.session(server_name)
        remote_name = remote_tool.name

        async def _call(**arguments: Any) -> str:
            result = await session.call_tool(remote_name, arguments)
            text = _content_to_text(result.content)
            if result.isError:
                raise ToolException(text or f"{remote_name} failed on {server_name}")
            return text

        return StructuredTool(
            name=self._tool_name(server_name, remote_name),
            description=remote_tool.description or remote_name,
            args_schema=remote_tool.inputSchema,
            coroutine=_call,
        )

    async def get_tools(self) -> list[StructuredTool]:
        tools: list[StructuredTool] = []
        for server_name, remote_tools in (await self.list_remote_tools()).items():
            for remote_tool in remote_tools:
                tools.append(self._build_remote_tool(server_name, remote_tool))
        logger.info("Loaded %d tool(s) from %d MCP server(s)", len(tools), len(self._servers))
        return tools
