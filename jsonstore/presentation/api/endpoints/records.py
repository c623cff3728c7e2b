"""JSON record CRUD endpoints.

Every method is served on both ``{prefix}`` and ``{prefix}/{rest:path}``;
the record id is the first non-empty segment after the prefix.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.exc import SQLAlchemyError

from jsonstore.application.schemas import (
    JsonRecordResponse,
    JsonRecordSummaryResponse,
    JsonRecordWrite,
    parse_record_write,
)
from jsonstore.application.services import JsonRecordService
from jsonstore.domain.entities import JsonRecord
from jsonstore.domain.exceptions import EntityNotFoundError, InvalidPayloadError
from jsonstore.infrastructure.dependencies import (
    ensure_mutations_enabled,
    get_json_record_service,
)
from jsonstore.presentation.api.routing import get_record_id

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Records"])

_NOT_FOUND = "Record not found"


# ── Helpers ──────────────────────────────────────────────────────────

@contextmanager
def _storage_errors(action: str) -> Iterator[None]:
    """Turn storage engine failures into a 500 for the given action."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.exception("Failed to %s", action)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to {action}: {e}",
        ) from e


async def _read_payload(request: Request) -> JsonRecordWrite:
    try:
        return parse_record_write(await request.body())
    except InvalidPayloadError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


def _to_response(record: JsonRecord) -> JsonRecordResponse:
    return JsonRecordResponse.model_validate(record, from_attributes=True)


# ── Routes ───────────────────────────────────────────────────────────

@router.get("", response_model=None)
@router.get("/{rest:path}", response_model=None)
async def read_records(
    record_id: str | None = Depends(get_record_id),
    service: JsonRecordService = Depends(get_json_record_service),
) -> JsonRecordResponse | list[JsonRecordSummaryResponse]:
    """List all records (no id) or retrieve a single record by id."""
    if record_id is None:
        with _storage_errors("list records"):
            records = await service.list_records()
        return [
            JsonRecordSummaryResponse.model_validate(r, from_attributes=True)
            for r in records
        ]

    try:
        with _storage_errors("retrieve record"):
            record = await service.get_record(record_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return _to_response(record)


@router.post("", response_model=None, dependencies=[Depends(ensure_mutations_enabled)])
@router.post("/{rest:path}", response_model=None, dependencies=[Depends(ensure_mutations_enabled)])
async def create_record(
    request: Request,
    service: JsonRecordService = Depends(get_json_record_service),
) -> JsonRecordResponse:
    """Create a new record. An id in the path is ignored."""
    payload = await _read_payload(request)
    with _storage_errors("create record"):
        record = await service.create_record(payload)
    return _to_response(record)


@router.put("", response_model=None, dependencies=[Depends(ensure_mutations_enabled)])
@router.put("/{rest:path}", response_model=None, dependencies=[Depends(ensure_mutations_enabled)])
async def update_record(
    request: Request,
    record_id: str | None = Depends(get_record_id),
    service: JsonRecordService = Depends(get_json_record_service),
) -> JsonRecordResponse:
    """Replace the data of an existing record."""
    if record_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="ID is required for update")
    payload = await _read_payload(request)
    try:
        with _storage_errors("update record"):
            record = await service.update_record(record_id, payload)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return _to_response(record)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(ensure_mutations_enabled)])
@router.delete("/{rest:path}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(ensure_mutations_enabled)])
async def delete_record(
    record_id: str | None = Depends(get_record_id),
    service: JsonRecordService = Depends(get_json_record_service),
) -> Response:
    """Delete a record by id."""
    if record_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="ID is required for delete")
    try:
        with _storage_errors("delete record"):
            await service.delete_record(record_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
