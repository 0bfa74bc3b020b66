"""FastAPI application untuk portal pelaporan Evaluasi dan Laporan."""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import settings
from src.core.database import init_db
from src.api.router import api_router, get_tags_metadata
from src.middleware.error_handler import add_error_handlers
from src.utils.logging import setup_logging

# Setup logging first
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info(f"Starting {settings.PROJECT_NAME}...")

    try:
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        raise

    logger.info("Configuration loaded:")
    logger.info(f"   - Environment: {'Development' if settings.DEBUG else 'Production'}")
    logger.info(f"   - Default province: {settings.DEFAULT_PROVINCE_CODE}")

    logger.info(f"{settings.PROJECT_NAME} started successfully")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.PROJECT_NAME}...")


def create_application() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="""
        **Portal Pelaporan GERMAS Tatanan Tempat Kerja**

        * **Evaluasi mandiri**: bank pertanyaan ya/tidak per tingkat instansi, skor dan kategori otomatis
        * **Laporan kegiatan**: template per tahun dengan target dan anggaran per semester
        * **Verifikasi**: pending -> verified/rejected dengan audit log
        * **Export PDF** untuk setiap submission

        ## Authentication

        Token JWT diterbitkan oleh layanan auth terpisah. Sertakan
        `Authorization: Bearer <token>` untuk endpoint yang membutuhkan login.

        ## Access Levels

        * **Public**: resolusi template, referensi instansi dan wilayah
        * **Authenticated**: kirim dan lihat submission milik sendiri
        * **SUPER_ADMIN / ADMIN**: verifikasi, hapus, kelola template dan pengaturan
        """,
        debug=settings.DEBUG,
        lifespan=lifespan,
        openapi_tags=get_tags_metadata(),
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS_LIST,
        allow_credentials=True,
        allow_methods=settings.CORS_METHODS_LIST,
        allow_headers=settings.CORS_HEADERS_LIST,
        expose_headers=["Content-Disposition"],
    )

    # Add error handlers
    add_error_handlers(app)

    # Include API router
    app.include_router(api_router, prefix=settings.API_V1_STR)

    # Root endpoint
    @app.get("/", tags=["System"])
    async def root():
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {settings.PROJECT_NAME}",
            "version": settings.VERSION,
            "status": "operational",
            "documentation": "/docs" if settings.DEBUG else "Documentation disabled in production",
            "environment": "development" if settings.DEBUG else "production"
        }

    # Health check endpoint
    @app.get("/health", tags=["System"])
    async def health_check():
        """Health check endpoint for monitoring."""
        return {
            "status": "healthy",
            "service": settings.PROJECT_NAME,
            "version": settings.VERSION,
            "environment": "development" if settings.DEBUG else "production"
        }

    return app


# Create application instance
app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level="info" if not settings.DEBUG else "debug",
        access_log=True
    )
