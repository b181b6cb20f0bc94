import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.action_log import setup_action_logger
from app.crud.trailhead_crud import seed_trailheads
from app.database import SessionLocal
from app.models import Base  # noqa: F401 (registers every table on the metadata)
from app.routers.hikes import router as hikes_router
from app.routers.participants import router as participants_router
from app.routers.trailheads import router as trailheads_router
from app.routers.waivers import router as waivers_router

logger = logging.getLogger(__name__)


def _run_alembic_upgrade() -> None:
    """Apply migrations to head (hikes, users, hike_users, waiver_signatures, trailheads)."""
    from alembic import command
    from alembic.config import Config

    root = Path(__file__).resolve().parent.parent
    cfg = Config(str(root / "alembic.ini"))
    cfg.set_main_option("script_location", str(root / "alembic"))
    cfg.attributes["configure_logger"] = False
    command.upgrade(cfg, "head")


def _seed_reference_data() -> None:
    db = SessionLocal()
    try:
        seed_trailheads(db)
        db.commit()
    finally:
        db.close()


app = FastAPI(
    title="Hike Tracker API",
    description="Ad-hoc group hikes coordinated through join and leader codes instead of accounts",
    version="0.1.0",
)

setup_action_logger()


@app.on_event("startup")
def _startup_migrate() -> None:
    """Migrate, then seed trailheads. A store that cannot be migrated stops startup."""
    _run_alembic_upgrade()
    _seed_reference_data()


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Undecodable payloads are a plain 400 here, not FastAPI's 422.
    logger.warning("Rejected payload on %s %s | errors=%s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger.warning(
        "HTTPException on %s %s | status=%s | detail=%s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.detail,
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=exc.headers)


@app.exception_handler(SQLAlchemyError)
async def store_exception_handler(request: Request, exc: SQLAlchemyError):
    # Store failures on read paths; the message is passed through unsanitized.
    logger.error("Store error on %s %s | error=%s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


app.include_router(hikes_router)
app.include_router(participants_router)
app.include_router(trailheads_router)
app.include_router(waivers_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # codes are bearer secrets in the URL, no cookies involved
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", tags=["Health"])
async def health_check() -> dict:
    return {"status": "ok"}


@app.get("/", tags=["Root"])
async def root() -> dict:
    return {
        "message": "Hike Tracker API",
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8196, reload=True)
