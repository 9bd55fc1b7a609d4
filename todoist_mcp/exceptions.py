"""Exception types raised by the Todoist client."""


class TodoistError(Exception):
    """Base class for all Todoist MCP errors."""


class TodoistConfigurationError(TodoistError):
    """Raised when required configuration is missing or invalid."""


class TodoistConnectionError(TodoistError):
    """Raised when the Todoist API could not be reached."""


class TodoistResponseError(TodoistError):
    """Raised when a response body cannot be decoded into the expected shape."""


class TodoistAPIError(TodoistError):
    """Raised when the Todoist API answers with a non-success status."""

    def __init__(self, status_code: int, reason: str, body: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"{status_code} {reason}".strip())


class TodoistRequestError(TodoistError):
    """Raised when a request cannot be built from the given arguments (e.g. an unusable ID)."""
