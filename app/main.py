# app/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.database import Base, engine, SessionLocal
from app.models.schedule import Schedule  # noqa: F401  registers table
from app.models.schedule_item import ScheduleItem  # noqa: F401
from app.routers import schedules, schedule_items, dashboard
from app.storage import ScheduleStorage
from app.utils.seed import seed_week

import time
import logging
from fastapi import Request
from app.logging_config import setup_logging


setup_logging()
logger = logging.getLogger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # create tables if missing
    Base.metadata.create_all(bind=engine)
    if settings.SEED_DATA:
        db = SessionLocal()
        try:
            seed_week(ScheduleStorage(db))
        finally:
            db.close()
    yield


app = FastAPI(title="Class Schedule Backend", version="1.0.0", lifespan=lifespan)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    try:
        response = await call_next(request)
        ms = int((time.time() - start) * 1000)
        logger.info("%s %s -> %s (%dms)", request.method, request.url.path, response.status_code, ms)
        return response
    except Exception:
        ms = int((time.time() - start) * 1000)
        logger.exception("Unhandled error %s %s (%dms)", request.method, request.url.path, ms)
        raise


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    # malformed payloads are a client error: 400, not 422
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(schedules.router)
app.include_router(schedule_items.router)
app.include_router(dashboard.router)

@app.get("/")
def root():
    return {"message": "Schedule backend is running!"}
