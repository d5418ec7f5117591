# kudos_wall/shared/middleware/__init__.py (async version)

from kudos_wall.shared.middleware.exception_middleware import (
    AsyncExceptionMiddleware,
    validation_exception_handler,
)
from kudos_wall.shared.middleware.logging_middleware import AsyncRequestLoggingMiddleware

# Export all for easy imports
__all__ = [
    "AsyncExceptionMiddleware",
    "AsyncRequestLoggingMiddleware",
    "validation_exception_handler",
]
