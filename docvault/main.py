
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from docvault.middleware.request_log import request_log_middleware
from docvault.config import settings
from docvault.db.session import init_db
from docvault.errors import AppError
from docvault.logging import configure_logging
from docvault.utils.security import require_secret
from docvault.auth.routes import router as auth_router
from docvault.documents.routes import router as documents_router

logger = structlog.get_logger()

@asynccontextmanager
async def lifespan(app: FastAPI):
    # refuse to serve anything without a signing secret
    require_secret()
    init_db()
    logger.info("api_starting", env=settings.app_env)
    yield
    logger.info("api_stopping")

async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

async def validation_error_handler(request: Request, exc: RequestValidationError):
    details = [{"loc": list(err.get("loc", ())), "msg": err.get("msg", "")} for err in exc.errors()]
    return JSONResponse(status_code=400, content={"error": "Validation failed", "details": details})

async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("unhandled_error", error_type=type(exc).__name__)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})

def create_app() -> FastAPI:
    configure_logging()
    # /docs belongs to the documents API, so the OpenAPI UI lives elsewhere
    app = FastAPI(title=settings.app_name, lifespan=lifespan, docs_url="/api-docs", redoc_url="/api-redoc")

    app.middleware("http")(request_log_middleware)

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(auth_router)
    app.include_router(documents_router)

    @app.get("/", tags=["root"])
    def root():
        return {"name": settings.app_name, "env": settings.app_env}

    return app

app = create_app()
