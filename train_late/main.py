from __future__ import annotations

import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from train_late.adapters.api.controllers.lateness import router as lateness_router
from train_late.adapters.persistence import CsvScheduleRepository
from train_late.config import Settings
from train_late.domain.exceptions import RealtimeError


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Schedule errors propagate here and abort startup.
    settings = Settings.from_env()
    repository = CsvScheduleRepository(
        routes_path=settings.routes_path, trips_path=settings.trips_path
    )
    app.state.schedule = repository.load_schedule()
    yield


app = FastAPI(title="Train Lateness", lifespan=lifespan)
app.include_router(lateness_router)


@app.exception_handler(RealtimeError)
async def realtime_error_handler(request: Request, exc: RealtimeError) -> JSONResponse:
    """A failed realtime lookup only fails its own request."""

    logging.getLogger("uvicorn.error").warning(
        "Realtime lookup failed: %s", exc, extra={"path": str(request.url.path)}
    )
    return JSONResponse(
        status_code=503, content={"detail": f"Realtime data unavailable: {exc}"}
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Ensure API errors are JSON so the frontend can display them."""

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    reveal = (os.getenv("TRAIN_LATE_REVEAL_ERRORS") or "").strip().lower() in {
        "1",
        "true",
        "yes",
        "on",
    }

    if reveal or isinstance(exc, (RuntimeError, ValueError)):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


def run() -> None:
    settings = Settings.from_env()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
