"""Environment configuration for the Todoist MCP server."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from todoist_mcp.exceptions import TodoistConfigurationError

DEFAULT_BASE_URL = "https://api.todoist.com/rest/v2"

TOKEN_ENV_VAR = "TODOIST_API_TOKEN"
BASE_URL_ENV_VAR = "TODOIST_API_BASE_URL"
LOG_LEVEL_ENV_VAR = "TODOIST_MCP_LOG_LEVEL"


class Settings(BaseModel):
    """Process-wide settings, read once at startup."""

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    api_token: str = Field(..., description="Todoist API token used as a bearer credential", min_length=1)
    base_url: str = Field(default=DEFAULT_BASE_URL, description="Base URL of the Todoist REST API")
    log_level: str = Field(default="INFO", description="Logging level name")


def get_settings() -> Settings:
    """
    Load settings from the environment (and a ``.env`` file, if present).

    Raises:
        TodoistConfigurationError: If the API token is not set.
    """
    load_dotenv()

    token = os.getenv(TOKEN_ENV_VAR, "").strip()
    if not token:
        raise TodoistConfigurationError(f"{TOKEN_ENV_VAR} is not set in the environment variables")

    return Settings(
        api_token=token,
        base_url=os.getenv(BASE_URL_ENV_VAR) or DEFAULT_BASE_URL,
        log_level=os.getenv(LOG_LEVEL_ENV_VAR) or "INFO",
    )
