"""Input coercion shared by the generation tools."""

from __future__ import annotations

from pydantic import BaseModel, ValidationError

from ..errors import InvalidInputError
from ..types import coerce_json_param


def _invalid(kind: str, exc: ValidationError) -> InvalidInputError:
    first = exc.errors()[0]
    loc = ".".join(str(p) for p in first["loc"])
    where = f" ({loc})" if loc else ""
    return InvalidInputError(f"Invalid {kind}{where}: {first['msg']}")


def load_entity(model: type[BaseModel], raw: dict | str, kind: str) -> BaseModel:
    """Validate one entity dict (camelCase or snake_case keys)."""
    raw = coerce_json_param(raw, dict)
    if not isinstance(raw, dict):
        raise InvalidInputError(f"{kind} must be an object")
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        raise _invalid(kind, exc) from exc


def load_entities(model: type[BaseModel], raw: list | str, kind: str) -> tuple:
    """Validate a list of entity dicts (camelCase or snake_case keys)."""
    raw = coerce_json_param(raw, list)
    if not isinstance(raw, list):
        raise InvalidInputError(f"{kind} must be a list of objects")
    try:
        return tuple(model.model_validate(item) for item in raw)
    except ValidationError as exc:
        raise _invalid(kind, exc) from exc
