"""Enums for Todoist MCP."""

from enum import Enum


class ViewStyle(str, Enum):
    """Project view style."""

    LIST = "list"
    BOARD = "board"
