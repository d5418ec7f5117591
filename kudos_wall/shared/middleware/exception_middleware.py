# kudos_wall/shared/middleware/exception_middleware.py (async version)

"""
Middleware for centralized exception handling.

This module defines middleware that intercepts exceptions and formats
appropriate error responses for the client, plus the handler that turns
request validation errors into 400 responses.
"""

import re
import time
import logging
import traceback
from typing import Callable, Dict, Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from kudos_wall.adapters.configuration.config import Settings
from kudos_wall.domain.exceptions import DomainException

# Configure logger
logger = logging.getLogger(__name__)

STATUS_BY_CODE: Dict[str, int] = {
    "RESOURCE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "RESOURCE_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "INVALID_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "UNAUTHENTICATED": status.HTTP_401_UNAUTHORIZED,
    "INVALID_INPUT": status.HTTP_400_BAD_REQUEST,
    "DATABASE_OPERATION_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _client(request: Request) -> str:
    return request.client.host if request.client else "N/A"


class AsyncExceptionMiddleware(BaseHTTPMiddleware):
    """
    Middleware for centralized exception handling.
    Captures specific exceptions and formats the response accordingly.
    """

    def __init__(self, app: ASGIApp, settings: Settings):
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.time()
        try:
            response = await call_next(request)
            process_time = time.time() - start_time
            response.headers["X-Process-Time"] = str(process_time)
            return response

        except DomainException as exc:
            status_code = STATUS_BY_CODE.get(exc.internal_code, status.HTTP_400_BAD_REQUEST)

            if status_code >= 500:
                logger.error(
                    f"Domain exception: {str(exc)} | Code: {exc.internal_code} | "
                    f"Path: {request.url.path}"
                )
                detail = "Internal server error" if self.settings.is_production else str(exc)
            else:
                logger.warning(
                    f"Domain exception: {str(exc)} | Code: {exc.internal_code} | "
                    f"Path: {request.url.path}"
                )
                detail = str(exc)

            headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
            return JSONResponse(
                status_code=status_code,
                content={"detail": detail, "code": exc.internal_code},
                headers=headers,
            )

        except IntegrityError as exc:
            constraint_name = self._extract_constraint_name(str(exc))
            logger.error(
                f"Integrity error: Constraint={constraint_name or 'N/A'} | "
                f"Path: {request.url.path} | Client: {_client(request)}"
            )
            return JSONResponse(
                status_code=status.HTTP_409_CONFLICT,
                content={
                    "detail": "Database integrity error" if self.settings.is_production else str(exc.orig),
                    "code": f"INTEGRITY_ERROR{f'_{constraint_name}' if constraint_name else ''}"
                }
            )

        except SQLAlchemyError as exc:
            logger.error(
                f"Database error: Type={type(exc).__name__} | "
                f"Path: {request.url.path} | Client: {_client(request)}"
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "detail": "Internal database error" if self.settings.is_production else str(exc),
                    "code": "DATABASE_ERROR"
                }
            )

        except Exception as exc:
            logger.exception(
                f"Unhandled exception: Type={type(exc).__name__} | "
                f"Path: {request.url.path} | Client: {_client(request)}"
            )
            content = {"detail": "Internal server error", "code": "INTERNAL_SERVER_ERROR"}
            if self.settings.is_development:
                content["stack"] = traceback.format_exc()
            return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)

    def _extract_constraint_name(self, error_message: str) -> Optional[str]:
        """
        Attempts to extract the constraint name from an integrity error message.
        """
        patterns = [
            r'violates unique constraint "(.*?)"',
            r'violates foreign key constraint "(.*?)"',
            r'constraint "(.*?)"',
        ]

        for pattern in patterns:
            match = re.search(pattern, error_message)
            if match:
                return match.group(1)
        return None


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Returns request validation failures as 400 with one entry per invalid field.
    """
    errors = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        errors.append({
            "field": ".".join(location) or "body",
            "message": error.get("msg", "Invalid value"),
        })

    logger.warning(f"Validation error | Path: {request.url.path} | Fields: {[e['field'] for e in errors]}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation failed", "errors": errors},
    )
