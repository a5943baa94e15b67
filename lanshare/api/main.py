import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from lanshare import __version__
from lanshare.api.deps import get_settings
from lanshare.core.ports.storage import StorageError
from lanshare.rules.loader import load_rules_or_default

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Validate rules on startup (fail-fast)
    try:
        load_rules_or_default(settings.rules_path)
    except ValueError as e:
        logger.critical("Rules load failed: %s", e)
        sys.exit(1)

    logger.info("Uploads directory: %s", settings.uploads_dir.absolute())
    yield


app = FastAPI(
    title="LAN Share API",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from lanshare.api.routes import (  # noqa: E402
    addresses,
    files,
    links,
    qrcodes,
    texts,
    uploads,
)

app.include_router(texts.router, prefix="/api/v1/texts", tags=["Texts"])
app.include_router(files.router, prefix="/api/v1/files", tags=["Files"])
app.include_router(addresses.router, prefix="/api/v1/addresses", tags=["Network"])
app.include_router(links.router, prefix="/api/v1/links", tags=["Network"])
app.include_router(qrcodes.router, prefix="/api/v1/qrcodes", tags=["QR Codes"])
app.include_router(uploads.router, prefix="/uploads", tags=["Downloads"])


# --- Error handlers ---
@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies and parameters as 400."""
    # The offending input is not echoed back; it may not be encodable
    errors = [{k: v for k, v in err.items() if k != "input"} for err in exc.errors()]
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(errors)})


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    """Fail only the current request when the filesystem misbehaves."""
    return JSONResponse(status_code=500, content={"detail": "Storage failure"})


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "lanshare"}
