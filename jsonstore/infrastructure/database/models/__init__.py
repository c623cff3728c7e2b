from .json_record import JsonRecordModel

__all__ = [
    "JsonRecordModel",
]
