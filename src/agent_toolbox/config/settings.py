from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Passed through to the Brave search MCP server. An empty key is not
    # rejected here; the server reports the failure when it is used.
    brave_api_key: str = Field(default="", alias="BRAVE_API_KEY")

    # MCP tool servers
    mcp_prefix_tool_names: bool = Field(default=True, alias="MCP_PREFIX_TOOL_NAMES")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")


@lru_cache
def get_settings() -> Settings:
    return Settings()
