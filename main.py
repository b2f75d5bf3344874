"""
BookWorm Hub API - FastAPI Application

Modular monolith architecture with:
- MongoDB connection pool (shared/persistance)
- Auth module (modules/auth)
  - JWT bearer tokens, registration, login
- Users module (modules/users)
  - Public profiles and profile updates
- Books module (modules/books)
  - Listings, rental flag, saved books
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from config.settings import settings
from shared.exception_handlers import setup_exception_handlers
from shared.persistance.mongo_db import mongo_pool
from shared.services.logger import get_logger
from modules.auth import auth_router
from modules.users import users_router
from modules.books import books_router


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Manages MongoDB connection pool startup/shutdown.
    """
    # Startup
    logger.info(f"Starting {settings.APP_NAME}...")

    try:
        mongo_pool.connect(settings.MONGO_URI)
        mongo_pool.ensure_indexes(settings.MONGO_DB)
        logger.info(f"MongoDB connected to {settings.MONGO_DB}")
    except Exception as e:
        logger.error(f"MongoDB connection failed: {e}")
        raise

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.APP_NAME}...")
    mongo_pool.close()
    logger.info("MongoDB connection closed")


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="Community book-sharing marketplace: owners list books, seekers browse and save them",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_exception_handlers(app)

# Include routers from modules
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(books_router)


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "service": settings.APP_NAME,
        "version": "0.1.0",
        "status": "healthy",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    try:
        # Test MongoDB connection
        mongo_pool.client.admin.command("ping")
        mongo_status = "connected"
    except Exception as e:
        mongo_status = f"error: {str(e)}"

    return {
        "status": "healthy" if mongo_status == "connected" else "degraded",
        "mongodb": mongo_status,
        "database": settings.MONGO_DB,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=True,
    )
