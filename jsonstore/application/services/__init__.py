from .json_record_service import JsonRecordService

__all__ = [
    "JsonRecordService",
]
