import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from portal.config import Settings, get_settings
from portal.container import PortalContainer
from portal.errors import PortalError
from portal.logging_middleware import add_audit_middleware
from portal.rate_limit import apply_rate_limiter

from .routers import accounts, courses, faults, records

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI):
    container: PortalContainer = fastapi_app.state.container
    container.startup()
    yield
    container.shutdown()


async def portal_error_handler(_: Request, exc: PortalError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s: %s", type(exc).__name__, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def http_error_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers)


async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return JSONResponse(status_code=422, content={"error": "; ".join(messages)})


async def unhandled_error_handler(_: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error")
    return JSONResponse(status_code=500, content={"error": str(exc)})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    fastapi_app = FastAPI(title=settings.app_name, version="1.0.0", lifespan=lifespan)
    fastapi_app.state.container = PortalContainer.from_settings(settings)

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    apply_rate_limiter(fastapi_app, settings)
    add_audit_middleware(fastapi_app, "portal", settings.log_dir)

    fastapi_app.add_exception_handler(PortalError, portal_error_handler)
    fastapi_app.add_exception_handler(StarletteHTTPException, http_error_handler)
    fastapi_app.add_exception_handler(RequestValidationError, validation_error_handler)
    fastapi_app.add_exception_handler(Exception, unhandled_error_handler)

    @fastapi_app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok", "service": "portal"}

    fastapi_app.include_router(accounts.router)
    fastapi_app.include_router(faults.router)
    fastapi_app.include_router(courses.router)
    fastapi_app.include_router(records.router)

    attachments = fastapi_app.state.container.attachments
    fastapi_app.mount(attachments.url_prefix, StaticFiles(directory=attachments.directory), name="uploads")
    if settings.frontend_dir is not None:
        fastapi_app.mount("/", StaticFiles(directory=settings.frontend_dir, html=True), name="frontend")
    return fastapi_app


app = create_app()


def run() -> None:
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    uvicorn.run("services.gateway.app:app", host="0.0.0.0", port=get_settings().port)


if __name__ == "__main__":
    run()
