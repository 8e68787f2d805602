from __future__ import annotations

import argparse
import asyncio
import json
import logging

from agent_toolbox.config.settings import get_settings
from agent_toolbox.tools.core.datetime_models import (
    DATETIME_FORMATS,
    DEFAULT_FORMAT,
    DEFAULT_TIMEZONE,
)


def _configure_logging(level: str | None = None) -> None:
    level_name = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def _print_mcp_tools() -> None:
    from agent_toolbox.tool_servers.servers import default_servers
    from agent_toolbox.tool_servers.supervisor import MCPServerSupervisor

    settings = get_settings()
    supervisor = MCPServerSupervisor(
        default_servers(), prefix_tool_names=settings.mcp_prefix_tool_names
    )
    async with supervisor:
        for tool in await supervisor.get_tools():
            print(f"- {tool.name}: {tool.description}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Agent tool adapters")
    parser.add_argument("--list-tools", action="store_true", help="List local tools")
    parser.add_argument(
        "--list-tool-groups", action="store_true", help="List available tool groups"
    )
    parser.add_argument(
        "--list-mcp-servers",
        action="store_true",
        help="List configured MCP tool servers and their launch commands",
    )
    parser.add_argument(
        "--mcp-tools",
        action="store_true",
        help="Start the configured MCP servers and list their remote tools",
    )
    parser.add_argument(
        "--datetime",
        action="store_true",
        help="Print the current date and time as the datetime tool returns it",
    )
    parser.add_argument(
        "--timezone", default=DEFAULT_TIMEZONE, help="IANA timezone name"
    )
    parser.add_argument(
        "--format",
        choices=DATETIME_FORMATS,
        default=DEFAULT_FORMAT,
        help="Output format for --datetime",
    )
    parser.add_argument(
        "--no-timezone",
        action="store_true",
        help="Omit the timezone suffix from the --datetime message",
    )
    parser.add_argument("--log-level", help="Override LOG_LEVEL")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if args.list_tools:
        from agent_toolbox.tools.registry import ToolRegistry

        for spec in ToolRegistry.list_specs():
            print(f"- {spec.name}: {spec.intent}")
            if spec.schema_notes:
                print(f"    schema: {spec.schema_notes}")
            print(f"    status: {ToolRegistry.get_status_message(spec.name)}")
        return

    if args.list_tool_groups:
        from agent_toolbox.tools.registry import ToolRegistry

        for group_name, tools in ToolRegistry.list_groups().items():
            print(f"- {group_name}: {', '.join(tools)}")
        return

    if args.list_mcp_servers:
        from agent_toolbox.tool_servers.servers import default_servers

        for server in default_servers():
            print(f"- {server.name}: {server.command} {' '.join(server.args)}")
        return

    if args.mcp_tools:
        asyncio.run(_print_mcp_tools())
        return

    if args.datetime:
        from agent_toolbox.tools.core.datetime_format import get_current_datetime

        result = get_current_datetime(
            timezone_name=args.timezone,
            fmt=args.format,
            include_timezone=not args.no_timezone,
        )
        print(json.dumps(result.to_payload(), ensure_ascii=False, indent=2))
        return

    parser.print_help()


if __name__ == "__main__":
    main()
