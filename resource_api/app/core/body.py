"""
Request body parsing.

Handlers accept both JSON and URL-encoded bodies.  Parsing happens
here rather than through FastAPI's body parameters so that a missing
``name`` can be reported as a 400 with the service's own envelope.
"""

import json
from typing import Any, Dict, Type, TypeVar

from fastapi import Request, status
from pydantic import BaseModel, ValidationError

from .errors import ApiError

ModelT = TypeVar("ModelT", bound=BaseModel)

INVALID_BODY = "Invalid request body"


async def read_body(request: Request) -> Dict[str, Any]:
    """Return the request body as a dictionary.

    ``application/x-www-form-urlencoded`` bodies are read with
    ``Request.form()``; anything else that is non-empty is decoded as
    JSON.  An absent body yields an empty dict.
    """
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith("application/x-www-form-urlencoded"):
        form = await request.form()
        return {key: value for key, value in form.items()}

    raw = await request.body()
    if not raw.strip():
        return {}
    if "json" not in content_type:
        # Bodies of other types are not parsed, as if nothing was sent.
        return {}
    try:
        data = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ApiError(status.HTTP_400_BAD_REQUEST, INVALID_BODY, details=str(exc)) from exc
    if not isinstance(data, dict):
        raise ApiError(status.HTTP_400_BAD_REQUEST, INVALID_BODY, details="Body must be a JSON object")
    return data


def parse_payload(model: Type[ModelT], body: Dict[str, Any]) -> ModelT:
    """Validate ``body`` against ``model``, raising a 400 ``ApiError`` on failure."""
    try:
        return model.model_validate(body)
    except ValidationError as exc:
        raise ApiError(
            status.HTTP_400_BAD_REQUEST,
            INVALID_BODY,
            details=exc.errors(include_url=False, include_context=False),
        ) from exc
