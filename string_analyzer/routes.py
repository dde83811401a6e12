"""
HTTP handlers for the ``/strings`` resource.

Routes are matched top to bottom and the first match wins, so the
literal ``/strings/filter-by-natural-language`` path is registered
before the parametric ``/strings/{value}`` ones.  Keep that order when
adding routes.

The parametric routes take the rest of the path and re-check it against
the raw request path: exactly one segment after ``/strings``, split
before percent-decoding, so ``/strings/a%2Fb`` addresses ``"a/b"`` and
``/strings/`` addresses the empty string.
"""

import logging
from datetime import datetime, timezone
from urllib.parse import unquote

from fastapi import APIRouter, Depends, Request, Response, status
from starlette.concurrency import run_in_threadpool

from .analyzer import analyze_string, compute_sha256
from .errors import (
    DuplicateValue,
    InternalFailure,
    MissingField,
    MissingQueryText,
    NotFound,
    RouteNotFound,
    ServiceError,
    TypeMismatch,
)
from .filters import apply_query_filters, interpret_natural_language
from .schemas import (
    NaturalLanguageResponse,
    StringEnvelope,
    StringListResponse,
    StringRecord,
)
from .store import StringStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter()


def utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def path_value(request: Request) -> str:
    """Return the single decoded segment after ``/strings``."""
    raw = request.scope.get("raw_path") or request.url.path.encode("utf-8")
    raw_path = raw.decode("latin-1").split("?", 1)[0]
    parts = raw_path.split("/")
    if len(parts) != 3 or parts[0] != "" or parts[1] != "strings":
        raise RouteNotFound()
    return unquote(parts[2], errors="replace")


# ---------------------------
# 1. POST /strings
# ---------------------------
@router.post("/strings", status_code=status.HTTP_201_CREATED, response_model=StringEnvelope)
async def create_string(request: Request, store: StringStore = Depends(get_store)):
    """Analyse a string and store it. 400 / 422 / 409 on invalid input."""
    body = request.state.body
    try:
        if not isinstance(body, dict) or "value" not in body:
            raise MissingField()
        value = body["value"]
        if not isinstance(value, str):
            raise TypeMismatch()
        if store.exists(value):
            raise DuplicateValue()

        record = StringRecord(
            id=compute_sha256(value),
            value=value,
            properties=analyze_string(value),
            created_at=utc_timestamp(),
        )
        store.add(record)
        await run_in_threadpool(store.save)
    except ServiceError:
        raise
    except Exception:
        logger.exception("Failed to create string")
        raise InternalFailure()

    logger.info("Stored string %s", record.id)
    return StringEnvelope(data=record)


# ---------------------------
# 2. GET /strings
# ---------------------------
@router.get("/strings", response_model=StringListResponse)
async def list_strings(request: Request, store: StringStore = Depends(get_store)):
    data, applied = apply_query_filters(store.snapshot(), request.query_params)
    return StringListResponse(data=data, count=len(data), filters_applied=applied)


# ---------------------------
# 3. GET /strings/filter-by-natural-language
# ---------------------------
@router.get("/strings/filter-by-natural-language", response_model=NaturalLanguageResponse)
async def filter_by_natural_language(request: Request, store: StringStore = Depends(get_store)):
    """
    Filter with plain-English keywords, e.g. "all single word palindromic strings".
    """
    query = request.query_params.get("query", "")
    if not query:
        raise MissingQueryText()
    data, parsed = interpret_natural_language(store.snapshot(), query)
    return NaturalLanguageResponse(
        data=data,
        count=len(data),
        interpreted_query={"original": query, "parsed_filters": parsed},
    )


# ---------------------------
# 4. GET /strings/{value}
# ---------------------------
@router.get("/strings/{value:path}", response_model=StringEnvelope)
async def get_string(request: Request, store: StringStore = Depends(get_store)):
    value = path_value(request)
    record = store.find(value)
    if record is None:
        raise NotFound()
    return StringEnvelope(data=record)


# ---------------------------
# 5. DELETE /strings/{value}
# ---------------------------
@router.delete("/strings/{value:path}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_string(request: Request, store: StringStore = Depends(get_store)):
    value = path_value(request)
    try:
        index = store.index_of(value)
        if index == -1:
            raise NotFound()
        removed = store.remove_at(index)
        await run_in_threadpool(store.save)
    except ServiceError:
        raise
    except Exception:
        logger.exception("Failed to delete string")
        raise InternalFailure()

    logger.info("Deleted string %s", removed.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
