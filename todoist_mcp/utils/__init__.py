"""Utility functions for Todoist MCP."""

from todoist_mcp.utils.parsers import _dump, _parse_item, _parse_items
from todoist_mcp.utils.payloads import _apply_due_precedence, _build_payload
from todoist_mcp.utils.responses import _error_response, _json_response, _success_response

__all__ = [
    "_parse_item",
    "_parse_items",
    "_dump",
    "_build_payload",
    "_apply_due_precedence",
    "_json_response",
    "_success_response",
    "_error_response",
]
