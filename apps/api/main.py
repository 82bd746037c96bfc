# apps/api/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from apps.api.routers import applications, projects
from core.config import settings
from core.logging import configure_logging
from services.errors import AcademaError, InternalError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("API ready (mongo db=%s)", settings.MONGO_DB)
    yield


app = FastAPI(title="Academa API", version="0.1.0", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AcademaError)
async def academa_error_handler(request: Request, exc: AcademaError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(PyMongoError)
async def mongo_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    logger.exception("db error on %s %s", request.method, request.url.path, exc_info=exc)
    return await academa_error_handler(request, InternalError("Internal server error"))


@app.get("/healthz")
def healthz() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(projects.router, prefix="/api")
app.include_router(applications.router, prefix="/api")
