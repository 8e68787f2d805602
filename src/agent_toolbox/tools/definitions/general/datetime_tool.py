from langchain_core.tools import StructuredTool

from agent_toolbox.tools.core.datetime_format import get_current_datetime
from agent_toolbox.tools.core.datetime_models import (
    DEFAULT_FORMAT,
    DEFAULT_TIMEZONE,
    DateTimeFormat,
    DateTimeInput,
)
from agent_toolbox.tools.tool_models import ToolSpec


def build_datetime_tool() -> StructuredTool:
    def _run(
        timezone: str = DEFAULT_TIMEZONE,
        format: DateTimeFormat = DEFAULT_FORMAT,
        include_timezone: bool = True,
    ) -> dict:
        result = get_current_datetime(
            timezone_name=timezone, fmt=format, include_timezone=include_timezone
        )
        return result.to_payload()

    return StructuredTool.from_function(
        name="datetime_tool",
        description="現在の日付と時刻を取得します。デフォルトは日本時間（JST）です。",
        func=_run,
        args_schema=DateTimeInput,
    )


tool = ToolSpec(
    name="datetime_tool",
    builder=build_datetime_tool,
    intent="Report the current date and time in a requested timezone.",
    schema_notes=(
        "Optional 'timezone' (IANA name), 'format' (iso/locale/japanese) and "
        "'include_timezone'. Returns {success, data, message}."
    ),
    status_message="Checking the clock...",
    groups=["core", "time"],
)
