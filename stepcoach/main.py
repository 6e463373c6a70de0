"""FastAPI application entry point.

This module initialises the FastAPI app, configures logging and
registers the routes and error handlers.  The ``uvicorn`` ASGI server
can point to ``stepcoach.main:app``, or ``run()`` can be used directly
(it is installed as the ``stepcoach`` console script).
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .config.app_config import get_app_config
from .config.llm_config import get_llm_config
from .controllers.chat_controller import router as chat_router
from .utils.error_handler import (
    ChatError,
    chat_error_handler,
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from .utils.logger import setup_logging
from .utils.responses import cors_middleware


def create_app() -> FastAPI:
    """Create and configure a FastAPI application."""
    setup_logging()

    app = FastAPI(title="StepCoach Chat Relay", version=__version__)

    # Preflight handling and the permissive origin header on every response
    app.middleware("http")(cors_middleware)

    app.add_exception_handler(ChatError, chat_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(chat_router)

    @app.get("/health", tags=["Health"])
    async def health() -> dict[str, str]:
        """Liveness probe."""
        logger.debug("Health check invoked")
        return {"status": "ok"}

    return app


# Create an application instance for ASGI servers
app = create_app()


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    import uvicorn

    app_config = get_app_config()
    # Fail at start-up rather than on the first request when the key is missing
    llm_config = get_llm_config()

    logger.info("Chat server running on http://{}:{}", app_config.app_host, app_config.app_port)
    logger.info("Model: {} (temperature {})", llm_config.model, llm_config.temperature)
    logger.info("Endpoints:")
    logger.info("   POST /chat - Chat with the language model")
    logger.info("   GET  /health - Health check")

    uvicorn.run(app, host=app_config.app_host, port=app_config.app_port, log_config=None)


if __name__ == "__main__":
    run()
