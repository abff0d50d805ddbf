"""
Exception handlers rendering every failure as ``{"error": ...}``.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.routing import compile_path

HTTP_METHODS = {"get", "post", "put", "patch", "delete", "head", "options", "trace"}


def allowed_methods(request: Request) -> list[str]:
    """
    All verbs registered for the request path.
    Read from the OpenAPI path table, which lists every operation of the
    included routers whatever their nesting.
    """
    path = request.scope["path"]
    methods = set()
    for template, operations in request.app.openapi().get("paths", {}).items():
        path_regex, _, _ = compile_path(template)
        if path_regex.match(path):
            methods.update(m.upper() for m in operations if m in HTTP_METHODS)
    return sorted(methods)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    headers = dict(exc.headers or {})

    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        methods = allowed_methods(request)
        if methods:
            headers["Allow"] = ", ".join(methods)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": f"Method {request.method} not allowed"},
            headers=headers,
        )

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=headers or None,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else first.get("msg", message)

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body", "message": message},
    )


async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"Database error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Database error"},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
