# services/api/main.py
# HTTP entrypoint for the vegetable ordering backend.
# Wires config, the MongoDB store, CORS, body handling, routes and the
# static frontend, then serves on 0.0.0.0:$PORT.

import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from constants import SERVICE_NAME
from shared.config import Settings
from shared.database.mongo_client import MongoStore, connect_or_exit
from shared.logging.logger import bind_request, get_logger, unbind_request
from services.api.body import RequestBodyError
from services.business_logic.order_service.api import router as order_router

logger = get_logger("api")


def create_app(store: MongoStore, settings: Optional[Settings] = None) -> FastAPI:
    """
    Builds the app around an already-connected store.
    The store is closed when the app shuts down.
    """
    settings = settings or Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        store.close()

    app = FastAPI(
        title="Vegetable Order API",
        description="Orders, carts and checkouts for the vegetable shop frontend",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.store    = store
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        token = bind_request(request.method, request.url.path)
        started = time.perf_counter()
        try:
            response = await call_next(request)
            logger.info(
                f"{request.method} {request.url.path} {response.status_code}",
                extra={
                    "status_code": response.status_code,
                    "latency_ms": round((time.perf_counter() - started) * 1000, 2),
                },
            )
            return response
        finally:
            unbind_request(token)

    @app.exception_handler(RequestBodyError)
    async def body_error(request: Request, exc: RequestBodyError):
        logger.warning(
            "Rejected request body",
            extra={"status_code": exc.status_code, "error": exc.message},
        )
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    # Liveness only: never touches MongoDB
    @app.get("/health")
    def health():
        return {"status": "OK", "service": SERVICE_NAME}

    app.include_router(order_router)

    # Mounted last so API routes win; anything else falls through to files
    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.warning(f"Static directory {static_dir} not found, frontend not served")

    return app


def main() -> None:
    settings = Settings.from_env()
    store    = connect_or_exit(settings)   # exits 1 when MongoDB is unreachable
    app      = create_app(store, settings)

    logger.info(f"Vegetable App running on port {settings.port}", extra={"port": settings.port})
    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
