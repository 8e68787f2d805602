from __future__ import annotations

from typing import Literal, get_args

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

DateTimeFormat = Literal["iso", "locale", "japanese"]
DATETIME_FORMATS: tuple[str, ...] = get_args(DateTimeFormat)

DEFAULT_TIMEZONE = "Asia/Tokyo"
DEFAULT_FORMAT: DateTimeFormat = "japanese"


class DateTimeInput(BaseModel):
    timezone: str = Field(
        default=DEFAULT_TIMEZONE,
        description=(
            f"タイムゾーン（デフォルト: {DEFAULT_TIMEZONE}）。"
            "その他の例: America/New_York, Europe/London, UTC"
        ),
    )
    format: DateTimeFormat = Field(default=DEFAULT_FORMAT, description="出力フォーマット")
    include_timezone: bool = Field(
        default=True,
        validation_alias=AliasChoices("include_timezone", "includeTimezone"),
        description="タイムゾーン情報を含めるかどうか",
    )


class DateTimeData(BaseModel):
    # Serialized with camelCase keys so the payload matches what agents expect.
    model_config = ConfigDict(populate_by_name=True)

    datetime: str
    timezone: str
    timestamp: int
    iso: str
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    day_of_week: int = Field(alias="dayOfWeek")
    day_of_week_name: str = Field(alias="dayOfWeekName")
    formatted_japanese: str = Field(alias="formattedJapanese")


class DateTimeResult(BaseModel):
    success: bool = True
    data: DateTimeData
    message: str

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)
