from __future__ import annotations

import logging
import threading

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apps.api.routes.reminders import router as reminders_router
from packages.core.config import build_reminder_store
from packages.core.errors import StorageError
from packages.core.logging_config import configure_logging
from packages.core.reminders.store import ReminderStore


logger = logging.getLogger("reminders.api")


def create_app(store: ReminderStore) -> FastAPI:
    app = FastAPI(title="Reminder Manager API")
    app.state.reminder_store = store
    app.state.reminder_lock = threading.Lock()
    app.include_router(reminders_router)

    @app.exception_handler(StorageError)
    def _storage_error(request: Request, exc: StorageError) -> JSONResponse:
        logger.error("storage_error path=%s error=%s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    return app


def build_app() -> FastAPI:
    """App factory for ``uvicorn --factory apps.api.main:build_app``."""
    configure_logging()
    return create_app(build_reminder_store())
