import json

from agent_toolbox.main import build_parser, main
from agent_toolbox.tools.core.datetime_models import DateTimeInput


def test_datetime_command_prints_payload(capsys):
    main(["--datetime", "--timezone", "UTC", "--format", "iso", "--no-timezone"])

    payload = json.loads(capsys.readouterr().out)
    assert payload["success"] is True
    assert payload["data"]["timezone"] == "UTC"
    assert "(" not in payload["message"]


def test_list_tools_shows_schema_notes_and_status(capsys):
    main(["--list-tools"])

    out = capsys.readouterr().out
    assert "- datetime_tool:" in out
    assert "    schema: Optional 'timezone'" in out
    assert "    status: Checking the clock..." in out


def test_parser_defaults_match_input_schema():
    args = build_parser().parse_args([])
    schema = DateTimeInput()

    assert args.timezone == schema.timezone
    assert args.format == schema.format
    assert build_parser().parse_args(["--format", "locale"]).format == "locale"


def test_list_tool_groups(capsys):
    main(["--list-tool-groups"])

    out = capsys.readouterr().out
    assert "- core: datetime_tool" in out
    assert "- time: datetime_tool" in out


def test_list_mcp_servers(capsys, monkeypatch):
    monkeypatch.setenv("BRAVE_API_KEY", "k")

    main(["--list-mcp-servers"])

    out = capsys.readouterr().out
    assert "- brave-search: npx -y @modelcontextprotocol/server-brave-search" in out
