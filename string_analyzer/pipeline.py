"""
Request stages run before route dispatch.

``STAGES`` is an ordered tuple of async callables taking the request.
A stage returns ``None`` to hand over to the next stage (and finally to
the router) or a response to short-circuit: that response is sent and
no handler runs.  ``run_stages`` is installed as an HTTP middleware by
``main.create_app``.
"""

import json
import logging
from typing import Awaitable, Callable, Optional
from urllib.parse import parse_qsl

from fastapi import Request
from starlette.responses import Response

from .errors import MalformedBody, error_response

logger = logging.getLogger(__name__)

Stage = Callable[[Request], Awaitable[Optional[Response]]]


def reject_constant(name: str):
    raise ValueError("Invalid JSON constant %s" % name)


def media_type(request: Request) -> str:
    content_type = request.headers.get("content-type", "")
    return content_type.split(";", 1)[0].strip().lower()


async def decode_body(request: Request) -> Optional[Response]:
    """Decode POST bodies into ``request.state.body``.

    JSON and url-encoded forms are understood; an empty body or any
    other content type leaves an empty dict behind.
    """
    request.state.body = {}
    if request.method != "POST":
        return None

    raw = await request.body()
    if not raw:
        return None

    kind = media_type(request)
    if kind == "application/json":
        try:
            request.state.body = json.loads(raw.decode("utf-8"), parse_constant=reject_constant)
        except ValueError as e:
            logger.debug("Rejecting malformed JSON body: %s", e)
            return error_response(MalformedBody())
    elif kind == "application/x-www-form-urlencoded":
        text = raw.decode("utf-8", errors="replace")
        request.state.body = dict(parse_qsl(text, keep_blank_values=True))
    return None


STAGES = (decode_body,)


async def run_stages(request: Request, call_next):
    for stage in STAGES:
        response = await stage(request)
        if response is not None:
            return response
    return await call_next(request)
