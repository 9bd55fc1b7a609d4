"""Allow ``python -m todoist_mcp``."""

from todoist_mcp.server import run

if __name__ == "__main__":
    run()
