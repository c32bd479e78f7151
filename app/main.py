from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.routers import properties, reservations, users
from app.core.logging import setup_logging
from app.config import settings
from app.database import Database
from app.errors import DataAccessError
from structlog import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    # Reuse an executor already installed on app.state
    if getattr(app.state, "db", None) is None:
        app.state.db = Database.from_settings(settings)
    logger.info("Database executor ready")
    try:
        yield
    finally:
        await app.state.db.dispose()
        app.state.db = None
        logger.info("Database executor disposed")


app = FastAPI(title="LightBnB", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(properties.router)
app.include_router(reservations.router)
app.include_router(users.router)


@app.exception_handler(DataAccessError)
async def data_access_error_handler(request: Request, exc: DataAccessError):
    logger.error("Data access failed", path=request.url.path, error=exc.message)
    return JSONResponse(status_code=500, content={"detail": f"Database error: {exc.message}"})


@app.get("/health", tags=["health"])
async def health(request: Request):
    details = {"status": "ok"}
    # Check DB connectivity
    try:
        await request.app.state.db.execute("SELECT 1")
        details["database"] = "up"
    except DataAccessError as e:
        details["status"] = "degraded"
        details["database"] = f"down: {e.message}"
    details["config"] = {"db_url_set": bool(settings.DATABASE_URL)}
    return details
