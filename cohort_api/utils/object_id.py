"""
Document identifier helpers.

MongoDB generates identifiers as ObjectIds, which travel over HTTP as
24-character lowercase hex strings.
"""

import re

from bson import ObjectId
from fastapi import HTTPException, status

_OBJECT_ID_RE = re.compile(r"[0-9a-f]{24}")

INVALID_ID_MESSAGE = "Specified id is not valid"


def is_valid_object_id(value) -> bool:
    """Return True iff value is a 24-character lowercase hex string."""
    return isinstance(value, str) and _OBJECT_ID_RE.fullmatch(value) is not None


def parse_object_id(value: str) -> ObjectId:
    """Convert a path parameter to an ObjectId, or reject the request with 400."""
    if not is_valid_object_id(value):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_ID_MESSAGE)
    return ObjectId(value)


def id_filter(value: str) -> dict:
    """
    Build an `_id` query filter without validating the format first.

    A malformed value is kept as a plain string, which never equals a
    generated ObjectId, so the query simply matches nothing.
    """
    if is_valid_object_id(value):
        return {"_id": ObjectId(value)}
    return {"_id": value}
