import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tasksplit.api.routes.extraction import router as extraction_router
from tasksplit.api.routes.relay import router as relay_router
from tasksplit.api.routes.remote import router as remote_router
from tasksplit.config import settings
from tasksplit.extraction.exceptions import (
    CredentialMissing,
    InvalidInput,
    MalformedResponse,
    ServiceUnavailable,
    TaskExtractionError,
)

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Task Splitter API",
    description="Split free-text project descriptions into classified tasks",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000"],
    allow_origin_regex=r"http://localhost:\d+",
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(extraction_router)
app.include_router(relay_router)
app.include_router(remote_router)

# Checked in order; subclasses before the base class.
_ERROR_STATUS: list[tuple[type[TaskExtractionError], int]] = [
    (InvalidInput, 400),
    (CredentialMissing, 503),
    (ServiceUnavailable, 503),
    (MalformedResponse, 502),
]


@app.exception_handler(TaskExtractionError)
async def extraction_error_handler(request: Request, exc: TaskExtractionError) -> JSONResponse:
    # Return JSON so the browser keeps CORS headers on upstream failures.
    status_code = next((code for cls, code in _ERROR_STATUS if isinstance(exc, cls)), 500)
    logger.info("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.message, "type": type(exc).__name__, "details": exc.details},
    )


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    import uvicorn

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
