"""
Error kinds raised by request handling.

Each kind carries the HTTP status and the message sent back to the
client as ``{"status": "error", "message": ...}``.  Handlers raise
them; ``main.create_app`` registers a handler that renders them with
``error_response``.  Pipeline stages run outside FastAPI's exception
handling and call ``error_response`` directly.
"""

from typing import Optional

from fastapi.responses import JSONResponse


class ServiceError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MalformedBody(ServiceError):
    status_code = 400
    message = "Invalid JSON format"


class MissingField(ServiceError):
    status_code = 400
    message = "Invalid request body or missing 'value' field"


class TypeMismatch(ServiceError):
    status_code = 422
    message = "Invalid data type for 'value' (must be string)"


class DuplicateValue(ServiceError):
    status_code = 409
    message = "String already exists in the system"


class NotFound(ServiceError):
    status_code = 404
    message = "String does not exist in the system"


class InvalidFilterValue(ServiceError):
    status_code = 400
    message = "Invalid query parameter values or types"


class MissingQueryText(ServiceError):
    status_code = 400
    message = "Missing 'query' parameter"


class RouteNotFound(ServiceError):
    status_code = 404
    message = "Route not found"


class InternalFailure(ServiceError):
    pass


def error_response(exc: ServiceError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": "error", "message": exc.message},
    )
