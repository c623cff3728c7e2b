"""Pydantic DTOs (Data Transfer Objects) for the JSON record feature."""

import json
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from jsonstore.domain.exceptions import InvalidPayloadError


class JsonRecordWrite(BaseModel):
    """Body accepted by create and update.

    ``data`` is required but may hold any JSON value, ``null`` included.
    Other top-level keys are ignored.
    """

    data: Any = Field(..., examples=[{"background": "#C03232", "foreground": "#0A0A0A"}])


class JsonRecordResponse(BaseModel):
    """Full record returned by get, create and update."""

    id: str
    data: Any
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class JsonRecordSummaryResponse(BaseModel):
    """Entry of the record listing. The payload is never included."""

    id: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


def parse_record_write(raw: bytes) -> JsonRecordWrite:
    """Validate a raw request body, raising InvalidPayloadError on any problem.

    The parser tolerates NaN, Infinity and overflowing literals such as 1e400;
    none of them is JSON, so the payload must also survive a strict encode.
    """
    try:
        payload = JsonRecordWrite.model_validate_json(raw)
    except ValidationError as exc:
        if any(err["type"] == "json_invalid" for err in exc.errors()):
            raise InvalidPayloadError("Request body must be valid JSON") from exc
        raise InvalidPayloadError("Data field is required") from exc
    try:
        json.dumps(payload.data, allow_nan=False)
    except ValueError as exc:
        raise InvalidPayloadError("Request body must be valid JSON") from exc
    return payload
