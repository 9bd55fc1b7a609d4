"""Parser helpers for Todoist API responses."""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from todoist_mcp.exceptions import TodoistResponseError

ModelT = TypeVar("ModelT", bound=BaseModel)


def _parse_item(model: type[ModelT], data: Any) -> ModelT:
    """
    Parse one JSON object from the API into a resource model.

    Args:
        model: Resource model class (Task, Project, ...)
        data: Decoded JSON body

    Returns:
        Validated model instance

    Raises:
        TodoistResponseError: If the body does not match the model
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise TodoistResponseError(f"Unexpected {model.__name__} payload: {e}") from e


def _parse_items(model: type[ModelT], data: Any) -> list[ModelT]:
    """Parse a JSON array from the API into a list of resource models."""
    if not isinstance(data, list):
        raise TodoistResponseError(f"Expected a list of {model.__name__} objects, got {type(data).__name__}")
    return [_parse_item(model, item) for item in data]


def _dump(item: BaseModel | list[BaseModel]) -> Any:
    """Convert parsed models back to JSON-ready data, keeping only fields the API sent."""
    if isinstance(item, list):
        return [i.model_dump(mode="json", exclude_unset=True) for i in item]
    return item.model_dump(mode="json", exclude_unset=True)
