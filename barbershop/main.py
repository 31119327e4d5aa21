import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

# Import models so they're registered with SQLAlchemy Base
from . import models  # noqa: F401
from .config import ALLOWED_ORIGINS
from .database import Base, engine
from .domain.availability.router import router as availability_router
from .domain.bookings.router import admin_router as admin_bookings_router
from .domain.bookings.router import router as bookings_router
from .domain.shop.router import router as shop_router
from .domain.stats.router import router as stats_router
from .errors import BookingAppError
from .routes.admin import router as admin_auth_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Reduce verbosity of third-party libraries
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("💈 Booking API starting up...")
    try:
        Base.metadata.create_all(bind=engine, checkfirst=True)
        logger.info("✅ Tables ready: shops, services, holidays, bookings")
    except SQLAlchemyError as e:
        # Another worker may have created the tables first
        if "already exists" in str(e) or "duplicate key" in str(e):
            logger.info("Tables already created by another worker")
        else:
            logger.error(f"❌ Could not create tables: {e}")

    yield
    logger.info("💈 Booking API shutting down")


app = FastAPI(title="Barber Shop Booking API", version="1.0.0", lifespan=lifespan)


@app.exception_handler(BookingAppError)
async def booking_app_exception_handler(request: Request, exc: BookingAppError):
    if exc.status_code >= 500:
        logger.error(f"❌ {request.method} {request.url.path} - {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} - {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(SQLAlchemyError)
async def storage_exception_handler(request: Request, exc: SQLAlchemyError):
    """Read failures that never reached a repository commit"""
    logger.error(f"❌ API ERROR {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies as 400 with a readable message"""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg", ""))
    logger.warning(f"Validation error for {request.url.path}: {messages}")
    return JSONResponse(status_code=400, content={"error": "; ".join(messages) or "Invalid request"})


logger.info(f"🌐 CORS origins: {', '.join(ALLOWED_ORIGINS)}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# Routes
app.include_router(shop_router)
app.include_router(bookings_router)
app.include_router(availability_router)
app.include_router(admin_auth_router)
app.include_router(admin_bookings_router)
app.include_router(stats_router)


@app.get("/")
def root():
    return {"message": "Barber Shop Backend is running"}


@app.get("/health")
def health():
    return {"status": "healthy"}
