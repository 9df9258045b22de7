"""Standardised error responses.

Every error leaving the API has the same body::

    {
        "type": "validation_error" | "client_error" | "server_error",
        "errors": [{"code": "...", "detail": "...", "attr": "field.path" | null}]
    }

``custom_exception_handler`` is wired as DRF's ``EXCEPTION_HANDLER``;
views build domain and payload errors with the helpers below.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from pydantic import ValidationError as PydanticValidationError
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)


def _error_type(status_code: int, validation: bool = False) -> str:
    if validation:
        return "validation_error"
    if status_code >= 500:
        return "server_error"
    return "client_error"


def error_response(
    status_code: int, code: str, detail: str, attr: Optional[str] = None
) -> Response:
    """Build a single-error response."""
    return Response(
        {
            "type": _error_type(status_code),
            "errors": [{"code": code, "detail": detail, "attr": attr}],
        },
        status=status_code,
    )


def validation_error_response(exc: PydanticValidationError) -> Response:
    """Translate a Pydantic DTO validation failure into a 400 response."""
    errors = [
        {
            "code": error["type"],
            "detail": error["msg"],
            "attr": ".".join(str(part) for part in error["loc"]) or None,
        }
        for error in exc.errors(include_url=False)
    ]
    return Response(
        {"type": _error_type(status.HTTP_400_BAD_REQUEST, validation=True), "errors": errors},
        status=status.HTTP_400_BAD_REQUEST,
    )


def _flatten(detail: Any, attr: Optional[str] = None) -> List[Dict[str, Any]]:
    if isinstance(detail, dict):
        flattened: List[Dict[str, Any]] = []
        for key, value in detail.items():
            if key == "non_field_errors":
                child = attr
            else:
                child = f"{attr}.{key}" if attr else str(key)
            flattened.extend(_flatten(value, child))
        return flattened
    if isinstance(detail, list):
        flattened = []
        for item in detail:
            flattened.extend(_flatten(item, attr))
        return flattened
    code = getattr(detail, "code", None) or "error"
    return [{"code": code, "detail": str(detail), "attr": attr}]


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    """Render DRF exceptions in the standard error format.

    Anything DRF does not handle itself is left to propagate.
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    errors = _flatten(getattr(exc, "detail", str(exc)))

    logger.info(
        "request.rejected",
        status_code=response.status_code,
        codes=[error["code"] for error in errors],
    )
    response.data = {
        "type": _error_type(
            response.status_code,
            validation=isinstance(exc, exceptions.ValidationError),
        ),
        "errors": errors,
    }
    return response
