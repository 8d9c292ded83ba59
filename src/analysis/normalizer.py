"""Turn a proxy response body into a validated AnalysisResult"""
from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from config import logger
from src.core import (
    AnalysisResult,
    MalformedPayloadError,
    RemoteError,
    SchemaViolationError,
)

def _raise_if_error(body: Mapping[str, Any]) -> None:
    error = body.get("error")
    if error:
        details = body.get("details")
        raise RemoteError(
            error=str(error),
            details=str(details) if details else None,
        )

def _violations(exc: ValidationError) -> list[dict[str, str]]:
    """Flatten pydantic errors into dotted wire paths"""
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]) or "<root>",
            "message": err["msg"],
        }
        for err in exc.errors()
    ]

def normalize(body: Any) -> AnalysisResult:
    """
    Decode and validate the body returned by POST /api/analyze

    A 200 body arrives as a JSON string holding the completion text, so a
    textual body is parsed exactly once more. A mapping is used as-is.

    Args:
        body: Decoded response body (str, bytes or mapping)

    Returns:
        AnalysisResult validated against the schema

    Raises:
        RemoteError: If the body carries an `error` field
        MalformedPayloadError: If a textual body is not valid JSON
        SchemaViolationError: If the decoded value does not match the schema
    """
    if isinstance(body, Mapping):
        _raise_if_error(body)
        payload: Any = body
    elif isinstance(body, (str, bytes, bytearray)):
        try:
            payload = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Analysis payload is not valid JSON: {e}")
            raise MalformedPayloadError() from e
        if isinstance(payload, Mapping):
            _raise_if_error(payload)
    else:
        payload = body

    if not isinstance(payload, Mapping):
        raise SchemaViolationError(
            violations=[{
                "field": "<root>",
                "message": f"expected a JSON object, got {type(payload).__name__}",
            }],
            message="The analysis result is not a JSON object",
        )

    try:
        result = AnalysisResult.model_validate(dict(payload))
    except ValidationError as e:
        violations = _violations(e)
        logger.warning(f"Analysis result failed validation: {violations}")
        raise SchemaViolationError(violations=violations) from e

    # explicit nulls count as absent sections
    if all(getattr(result, name) is None for name in AnalysisResult.model_fields):
        raise SchemaViolationError(
            violations=[{"field": "<root>", "message": "no analysis sections present"}],
            message="The analysis result contains no known sections",
        )
    return result
