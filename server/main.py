# server/main.py

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from server.api import admin, auth, sheet
from server.config import DEFAULT_SECRET, get_settings
from server.core.errors import SheetAppError
from server.logging_config import setup_logging
from server.storage import init_storage


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.dependency_overrides.get(get_settings, get_settings)()
    setup_logging(settings.log_level)
    init_storage(settings)
    if settings.secret_key == DEFAULT_SECRET:
        logger.warning("JWT_SECRET_KEY is not set; using the built-in development secret")
    yield


app = FastAPI(title="LightTaskSheet", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SheetAppError)
async def handle_app_error(request: Request, exc: SheetAppError):
    content = {"detail": exc.message}
    if exc.details:
        content["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"detail": "invalid request body", "errors": jsonable_encoder(exc.errors())},
    )


@app.get("/ping")
def ping():
    return {"ok": True}


app.include_router(auth.router)
app.include_router(sheet.router)
app.include_router(admin.router)


def run():
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("LightTaskSheet listening on %s (data dir: %s)", settings.port, settings.data_dir)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
