"""Request payload builders."""

from typing import Any

from pydantic import BaseModel

# Mutually exclusive due fields, highest precedence first
DUE_FIELDS = ("due_string", "due_date", "due_datetime")


def _build_payload(
    params: BaseModel,
    *,
    exclude: set[str] | None = None,
    clearable: frozenset[str] = frozenset(),
) -> dict[str, Any]:
    """
    Build a request body from the fields the caller actually supplied.

    Fields left out of the tool call never appear in the payload, so an update
    cannot overwrite remote values by accident. A field explicitly set to null
    is dropped as well, unless it is listed in ``clearable``; those are sent as
    JSON null so the remote value gets cleared.

    Args:
        params: Validated tool input
        exclude: Field names to leave out (e.g. the ID that goes in the URL)
        clearable: Fields for which an explicit null is meaningful

    Returns:
        Dictionary keyed by the API's snake_case field names
    """
    supplied = params.model_dump(mode="json", exclude_unset=True, exclude=exclude)
    return {key: value for key, value in supplied.items() if value is not None or key in clearable}


def _apply_due_precedence(payload: dict[str, Any]) -> dict[str, Any]:
    """
    Keep only one due field: due_string, else due_date, else due_datetime.

    Modifies and returns ``payload``. ``due_lang`` is left alone.
    """
    chosen = next((name for name in DUE_FIELDS if name in payload), None)
    for name in DUE_FIELDS:
        if name != chosen:
            payload.pop(name, None)
    return payload
