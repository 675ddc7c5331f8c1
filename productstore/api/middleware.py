# productstore/api/middleware.py
from datetime import datetime, timezone

from fastapi import FastAPI, Request

from productstore.utils.logging import get_logger

logger = get_logger("productstore.requests")


def register_middleware(app: FastAPI) -> None:

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"

        logger.info(f"[{datetime.now(timezone.utc).isoformat()}] {request.method} {path}")
        response = await call_next(request)
        logger.info(f"{request.method} {path} -> {response.status_code}")
        return response
