import re

import pytest
from pydantic import ValidationError

from agent_toolbox.tools.definitions.general.datetime_tool import (
    build_datetime_tool,
    tool,
)

JAPANESE_LONG = re.compile(r"\d+年\d+月\d+日 .曜日 \d{2}:\d{2}:\d{2}")


def test_defaults_use_tokyo_and_japanese_format():
    payload = build_datetime_tool().invoke({})

    assert payload["success"] is True
    assert payload["data"]["timezone"] == "JST"
    assert re.fullmatch(r"\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2}", payload["data"]["datetime"])
    assert JAPANESE_LONG.fullmatch(payload["data"]["formattedJapanese"])
    assert payload["message"].endswith("(JST)")


def test_iso_fields_come_from_one_instant():
    payload = build_datetime_tool().invoke({"timezone": "UTC", "format": "iso"})
    data = payload["data"]

    expected = (
        f"{data['year']:04d}-{data['month']:02d}-{data['day']:02d} "
        f"{data['hour']:02d}:{data['minute']:02d}:{data['second']:02d}"
    )
    assert data["datetime"] == expected
    assert data["iso"].replace("T", " ")[:19] == expected
    assert data["timezone"] == "UTC"


def test_include_timezone_flag_is_passed_through():
    payload = build_datetime_tool().invoke(
        {"timezone": "Asia/Seoul", "include_timezone": False}
    )

    assert "(" not in payload["message"]
    assert payload["data"]["timezone"] == "KST"


def test_unknown_timezone_does_not_raise():
    payload = build_datetime_tool().invoke({"timezone": "Mars/Base"})

    assert payload["success"] is True
    assert payload["data"]["timezone"] == "Mars/Base"


def test_invalid_format_is_rejected_by_schema():
    with pytest.raises(ValidationError):
        build_datetime_tool().invoke({"format": "rfc2822"})


def test_tool_spec_metadata():
    built = tool.builder()

    assert tool.name == built.name == "datetime_tool"
    assert set(built.args) == {"timezone", "format", "include_timezone"}
    assert "time" in tool.groups


def test_camel_case_include_timezone_key_is_accepted():
    payload = build_datetime_tool().invoke({"timezone": "UTC", "includeTimezone": False})

    assert payload["data"]["timezone"] == "UTC"
    assert not payload["message"].endswith("(UTC)")
    assert "(" not in payload["message"]


def test_directory_timezone_name_does_not_raise():
    payload = build_datetime_tool().invoke({"timezone": "America"})

    assert payload["success"] is True
    assert payload["data"]["timezone"] == "America"
