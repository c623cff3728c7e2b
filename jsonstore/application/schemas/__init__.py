from .json_record import (
    JsonRecordResponse,
    JsonRecordSummaryResponse,
    JsonRecordWrite,
    parse_record_write,
)

__all__ = [
    "JsonRecordResponse",
    "JsonRecordSummaryResponse",
    "JsonRecordWrite",
    "parse_record_write",
]
