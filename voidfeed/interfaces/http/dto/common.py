from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from voidfeed.shared.errors import ValidationError

RequestDTO = TypeVar("RequestDTO", bound=BaseModel)


def dump(model: BaseModel) -> dict[str, Any]:
    """JSON-ready dict using the camelCase wire names."""
    return model.model_dump(mode="json", by_alias=True)


def _field_name(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc) or "body"


def describe_errors(exc: PydanticValidationError) -> dict[str, Any]:
    """Reduce pydantic errors to the ``{"fields", "errors"}`` error context."""
    errors = [
        {"field": _field_name(err["loc"]), "type": err["type"]}
        for err in exc.errors(include_url=False, include_context=False, include_input=False)
    ]
    return {"fields": sorted({e["field"] for e in errors}), "errors": errors}


def parse_body(dto: type[RequestDTO], payload: Any) -> RequestDTO:
    """Validate a JSON request body; a missing or non-object body counts as ``{}``."""
    if not isinstance(payload, dict):
        payload = {}
    try:
        return dto.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(context=describe_errors(exc)) from exc
