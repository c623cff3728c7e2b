from .json_record import JsonRecord, JsonRecordSummary, generate_record_id

__all__ = [
    "JsonRecord",
    "JsonRecordSummary",
    "generate_record_id",
]
