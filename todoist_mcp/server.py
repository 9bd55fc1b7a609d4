"""FastMCP server initialization for Todoist MCP."""

import logging
import os
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from mcp.server.fastmcp import FastMCP

from todoist_mcp.client import TodoistClient, get_client, set_client
from todoist_mcp.config import LOG_LEVEL_ENV_VAR, get_settings
from todoist_mcp.exceptions import TodoistConfigurationError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
    """Close the shared Todoist client when the server shuts down."""
    client = get_client()
    try:
        yield {"client": client}
    finally:
        await client.aclose()
        logger.info("Todoist client closed")


INSTRUCTIONS = (
    "Tools for a Todoist account: tasks, projects, sections, comments and labels. "
    "Every tool takes a single `params` object holding its camelCase fields, "
    'e.g. createTask with {"params": {"content": "Buy milk", "priority": 2}}.'
)

# Initialize the MCP server
mcp = FastMCP("todoist_mcp", instructions=INSTRUCTIONS, lifespan=lifespan)


def _configure_logging(level: str) -> None:
    # stdout carries the MCP protocol, so logs go to stderr
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def run() -> None:
    """Run the MCP server over stdio. Exits with status 1 if the API token is missing."""
    _configure_logging(os.getenv(LOG_LEVEL_ENV_VAR) or "INFO")

    try:
        settings = get_settings()
    except TodoistConfigurationError as e:
        logger.error("%s", e)
        sys.exit(1)

    logging.getLogger().setLevel(settings.log_level.upper())
    set_client(TodoistClient.from_settings(settings))
    logger.info("Todoist MCP server starting with stdio transport")
    mcp.run()
