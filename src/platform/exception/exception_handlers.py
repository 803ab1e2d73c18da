import traceback
from typing import Any, Callable, Coroutine, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger


# Type alias for exception handlers (compatible with Starlette's expected signature)
ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]


def error_content(
    message: str, *, details: Optional[Any] = None, stack: Optional[str] = None
) -> dict[str, Any]:
    content: dict[str, Any] = {'status': 'error', 'message': message}
    if settings.IS_PRODUCTION:
        return content
    if details is not None:
        content['details'] = details
    if stack is not None:
        content['stack'] = stack
    return content


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, CustomBaseError) else CustomBaseError(str(exc), 500)
    return JSONResponse(
        status_code=error.status_code,
        content=error_content(error.message, details=error.details),
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, StarletteHTTPException) else StarletteHTTPException(500)
    if error.status_code == status.HTTP_404_NOT_FOUND and error.detail == 'Not Found':
        message = f"Can't find {request.url.path} on this server!"
    else:
        message = str(error.detail)
    return JSONResponse(
        status_code=error.status_code,
        content=error_content(message),
        headers=getattr(error, 'headers', None),
    )


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, RequestValidationError) else RequestValidationError([])
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_content(
            'Invalid request data',
            details=[
                {'loc': list(err.get('loc', ())), 'msg': err.get('msg', '')}
                for err in error.errors()
            ],
        ),
    )


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    if not getattr(exc, '_has_logged', False):
        Logger.base.exception(f'Unhandled error on {request.method} {request.url.path}: {exc}')
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_content(
            'Internal server error',
            details=str(exc),
            stack=''.join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
        ),
    )


# Exception handler mapping
EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    CustomBaseError: custom_error_handler,
    StarletteHTTPException: http_exception_handler,
    RequestValidationError: validation_error_handler,
    Exception: general_500_exception_handler,  # Catch-all for unhandled exceptions
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
