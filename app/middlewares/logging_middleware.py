from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.utils.logger import get_logger


logger = get_logger("middleware")

LOGGED_PATH_PREFIX = "/category"


class LoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, path_prefix: str = ""):
        super().__init__(app)
        self.path_prefix = path_prefix + LOGGED_PATH_PREFIX

    async def dispatch(self, request: Request, call_next):
        logged = request.url.path.startswith(self.path_prefix)
        if logged:
            logger.info(f"{request.method} {request.url.path}")

        response = await call_next(request)

        if logged:
            outcome = "ok" if response.status_code < 400 else "failed"
            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code} ({outcome})"
            )

        return response
