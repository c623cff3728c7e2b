"""Record-id extraction from request paths."""

from fastapi import Request


def extract_record_id(path: str, prefix: str) -> str | None:
    """Return the record id addressed by ``path``, or None for the collection.

    The query string and the API prefix are stripped, the remainder is split
    on ``/`` with empty segments discarded, and the first segment is the id.
    Any further segments are ignored.
    """
    path = path.split("?", 1)[0]
    if prefix and path.startswith(prefix):
        path = path[len(prefix):]
    segments = [segment for segment in path.split("/") if segment]
    return segments[0] if segments else None


def get_record_id(request: Request) -> str | None:
    """FastAPI dependency — the record id of the current request, if any."""
    return extract_record_id(request.url.path, request.app.state.settings.api_prefix)
