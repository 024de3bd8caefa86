"""
Error taxonomy shared by the order and offer workflows.

The classes are `HTTPException`s so FastAPI renders them as-is; services raise
them directly. `handle_db_exception` is the single translation path for
persistence (and gateway) failures.
"""

import json
import re
from typing import Any, Dict, Mapping, Optional

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError

from storefront.logging_config import get_logger

log = get_logger(__name__)

UNEXPECTED_ERROR_MESSAGE = "Unexpected error, check server logs"

_SQLITE_UNIQUE = re.compile(r"UNIQUE constraint failed: (?P<columns>.+)$", re.MULTILINE)
_POSTGRES_UNIQUE = re.compile(r"Key \((?P<columns>.+?)\)=\((?P<values>.*?)\) already exists")
_POSTGRES_UNIQUE_VIOLATION = "23505"


class NotFound(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=404, detail=detail)


class BadRequest(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail)


class InternalError(HTTPException):
    def __init__(self, detail: str = UNEXPECTED_ERROR_MESSAGE):
        super().__init__(status_code=500, detail=detail)


def is_unique_violation(error: Exception) -> bool:
    if not isinstance(error, IntegrityError):
        return False
    if getattr(error.orig, "pgcode", None) == _POSTGRES_UNIQUE_VIOLATION:
        return True
    return "UNIQUE constraint failed" in str(error.orig)


def duplicate_key(error: IntegrityError, values: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Extracts `{field: value}` for the violated unique constraint.

    PostgreSQL reports the value itself; SQLite only names the columns, so the
    value is looked up in `values`, the record that was being written.
    """
    values = values or {}
    message = str(error.orig)

    match = _POSTGRES_UNIQUE.search(message)
    if match:
        columns = [c.strip() for c in match.group("columns").split(",")]
        raw = match.group("values")
        if len(columns) == 1:
            return {columns[0]: raw}
        found = [v.strip() for v in raw.split(",")]
        if len(found) != len(columns):
            # a value holds a comma, the message cannot be split reliably
            return {column: values.get(column) for column in columns}
        return dict(zip(columns, found))

    match = _SQLITE_UNIQUE.search(message)
    if match:
        columns = [c.strip().split(".")[-1] for c in match.group("columns").split(",")]
        return {column: values.get(column) for column in columns}

    return {}


def handle_db_exception(error: Exception, entity: str, values: Optional[Mapping[str, Any]] = None):
    """Never returns: raises BadRequest for duplicates, InternalError otherwise."""
    if is_unique_violation(error):
        key_value = duplicate_key(error, values)
        raise BadRequest(f"{entity} already exists, {json.dumps(key_value, default=str)}") from error

    log.error("Unhandled %s error: %r", entity.lower(), error, exc_info=error)
    raise InternalError() from error
