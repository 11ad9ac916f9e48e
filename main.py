"""FastAPI entry point for the Gradebook Insight service."""

import logging
import random
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config.settings import get_settings
from errors.exceptions import (
    EntityNotFoundError,
    ForbiddenActionError,
    GradeValidationError,
    InvalidArgumentError,
    InvalidDomainError,
)
from models.errors import ErrorCode, error_body
from services.grade_store import get_grade_store
from services.middleware import RequestIdMiddleware
from services.seed import seed_demo_data

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Seed demo data on startup when configured."""
    if settings.seed_demo_data:
        store = get_grade_store()
        if not store.list_courses():
            seed_demo_data(store, random.Random(settings.seed_random_seed))
        else:
            logger.info("Store already populated, skipping demo seed")
    yield


app = FastAPI(
    title="Gradebook Insight",
    description="Grade recording and grade-distribution statistics",
    version="0.1.0",
    lifespan=lifespan,
)

# ── Middleware stack ──────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestIdMiddleware)


# ── Domain error → HTTP mapping ─────────────────────────────


@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
    return JSONResponse(status_code=400, content=error_body(ErrorCode.INVALID_REQUEST, str(exc)))


@app.exception_handler(InvalidDomainError)
async def invalid_domain_handler(request: Request, exc: InvalidDomainError):
    logger.info("No distribution available for %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=422,
        content=error_body(ErrorCode.NO_DISTRIBUTION, f"No distribution available: {exc}"),
    )


@app.exception_handler(EntityNotFoundError)
async def not_found_handler(request: Request, exc: EntityNotFoundError):
    return JSONResponse(status_code=404, content=error_body(ErrorCode.NOT_FOUND, str(exc)))


@app.exception_handler(ForbiddenActionError)
async def forbidden_handler(request: Request, exc: ForbiddenActionError):
    return JSONResponse(status_code=403, content=error_body(ErrorCode.FORBIDDEN, str(exc)))


@app.exception_handler(GradeValidationError)
async def validation_handler(request: Request, exc: GradeValidationError):
    body = error_body(ErrorCode.INVALID_REQUEST, str(exc))
    body["errors"] = exc.errors
    return JSONResponse(status_code=422, content=body)


# ── Register routers ────────────────────────────────────────
from api.courses import public_router as public_courses_router  # noqa: E402
from api.courses import router as courses_router  # noqa: E402
from api.grades import router as grades_router  # noqa: E402
from api.groups import router as groups_router  # noqa: E402
from api.health import router as health_router  # noqa: E402
from api.statistics import router as statistics_router  # noqa: E402

app.include_router(health_router)
app.include_router(statistics_router)
app.include_router(grades_router)
app.include_router(courses_router)
app.include_router(public_courses_router)
app.include_router(groups_router)


if __name__ == "__main__":
    if settings.debug:
        # Development: single worker with reload
        uvicorn.run(
            "main:app",
            host="0.0.0.0",
            port=settings.service_port,
            reload=True,
        )
    else:
        # Production: gunicorn main:app -c deploy/gunicorn.conf.py
        uvicorn.run(
            "main:app",
            host="0.0.0.0",
            port=settings.service_port,
        )
