"""Tool result envelopes."""

import json
from typing import Any

from mcp.types import CallToolResult, TextContent


def _json_response(data: dict[str, Any]) -> CallToolResult:
    """Wrap data in a single pretty-printed JSON text block."""
    return CallToolResult(content=[TextContent(type="text", text=json.dumps(data, indent=2))])


def _success_response() -> CallToolResult:
    """Envelope for calls that only report whether they worked."""
    return _json_response({"success": True})


def _error_response(message: str) -> CallToolResult:
    """Envelope flagged as an error, carrying a short human-readable message."""
    return CallToolResult(content=[TextContent(type="text", text=message)], isError=True)
