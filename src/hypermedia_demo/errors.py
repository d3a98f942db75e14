from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from hypermedia_demo.greeting import Fragment, FullPage, Rendering, RenderTarget


class ErrorInfo(BaseModel):
    status_code: int
    code: str
    message: str
    details: Any | None = None


def status_to_code(status_code: int) -> str:
    if status_code == 401:
        return "unauthorized"
    if status_code == 403:
        return "forbidden"
    if status_code == 404:
        return "not_found"
    if status_code == 405:
        return "method_not_allowed"
    if status_code == 422:
        return "validation_error"
    if 400 <= status_code < 500:
        return "client_error"
    return "server_error"


def fail(*, status_code: int, message: str, details: Any | None = None) -> ErrorInfo:
    return ErrorInfo(
        status_code=status_code,
        code=status_to_code(status_code),
        message=message,
        details=details,
    )


ERROR_PAGE = FullPage("error.html")
ERROR_FRAGMENT = Fragment("error.html", "error")


def error_rendering(error: ErrorInfo, is_enhanced_client: bool) -> Rendering:
    target: RenderTarget = ERROR_FRAGMENT if is_enhanced_client else ERROR_PAGE
    return Rendering(target=target, context={"error": error})
