"""
main.py

FastAPI entry point for the LeadMate sales chat service.
Builds the app, wires the meeting store and chat model, applies middleware.
"""

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import Settings, settings as default_settings
from app.errors import AppError, ClientInputError, describe_validation_errors
from app.meetings.store import MeetingStore
from app.nlu.generator import ChatClient, build_chat_client
from app.routes import router
from app.utils.logger import setup_logging
from app.workflow import build_graph

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[Settings] = None,
    *,
    chat_client: Optional[ChatClient] = None,
    store: Optional[MeetingStore] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    The store and chat client can be injected (tests); otherwise they are
    built from settings. One store lives for the lifetime of the app.
    """
    if config is None:
        config = default_settings
    setup_logging(config)

    app = FastAPI(title="LeadMate Sales Chat", debug=config.DEBUG)

    # An empty store is falsy (__len__), so test against None
    if store is None:
        store = MeetingStore(
            base_url=config.MEETING_BASE_URL,
            event_title=config.CALENDAR_EVENT_TITLE,
            event_host=config.CALENDAR_EVENT_HOST,
        )
    if chat_client is None:
        chat_client = build_chat_client(config)

    app.state.meeting_store = store
    app.state.conversation_graph = build_graph(store, chat_client)

    # Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOW_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Error handlers
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info("Rejected request to %s: %s", request.url.path, exc.errors())
        error = ClientInputError(describe_validation_errors(exc.errors()))
        return JSONResponse(status_code=error.status_code, content={"error": error.message})

    app.include_router(router)

    logger.info("Meeting management available at:")
    logger.info("- GET /meetings - List all meetings")
    logger.info("- GET /meetings/{id} - Get specific meeting")
    logger.info("- DELETE /meetings/{id} - Cancel meeting")
    logger.info("- PUT /meetings/{id} - Reschedule meeting")

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "app.main:create_app",
        factory=True,
        host=default_settings.APP_HOST,
        port=default_settings.APP_PORT,
        log_config=None,
    )


if __name__ == "__main__":
    run()
