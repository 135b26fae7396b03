"""
FastAPI application entry point
Main application initialization
"""
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from app.config import DB_AUTO_CREATE, DEBUG, MODE, UPLOAD_DIR, UPLOAD_URL_PREFIX
from app.middleware.cors import setup_cors
from app.database import database, get_async_session, ping
from sqlalchemy.ext.asyncio import AsyncSession
import logging

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if DEBUG else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

APP_VERSION = "0.1.0"

# Create FastAPI app
app = FastAPI(
    title="Law Firm CMS Admin API",
    description="Blog, FAQ, media, leads and site settings for the firm's marketing site",
    version=APP_VERSION,
    debug=DEBUG,
)

# Setup CORS
setup_cors(app)


@app.on_event("startup")
async def startup_event():
    """Connect the store on startup"""
    logger.info(f"Starting application in {MODE} mode")
    database.connect()
    if DB_AUTO_CREATE:
        await database.create_all()
        logger.info("Database tables created")
    UPLOAD_DIR.mkdir(parents=True, exist_ok=True)
    logger.info("Application started successfully")


@app.on_event("shutdown")
async def shutdown_event():
    """Close database connections on shutdown"""
    logger.info("Shutting down application")
    await database.disconnect()
    logger.info("Application shut down successfully")


@app.get("/")
async def root():
    """Root endpoint - health check"""
    return JSONResponse({
        "message": "Law Firm CMS Admin API",
        "version": APP_VERSION,
        "mode": MODE,
        "status": "running"
    })


@app.get("/health")
async def health_check(session: AsyncSession = Depends(get_async_session)):
    """Health check endpoint, includes a database ping"""
    db_ok = await ping(session)
    return JSONResponse(
        {
            "status": "healthy" if db_ok else "degraded",
            "database": "up" if db_ok else "down",
            "mode": MODE
        },
        status_code=200 if db_ok else 503,
    )


from app.apps.authentication.router import router as auth_router
app.include_router(auth_router, prefix="/api/auth", tags=["auth"])

from app.apps.blog.router import router as blog_router
app.include_router(blog_router, prefix="/api/blog", tags=["blog"])

from app.apps.categories.router import router as categories_router
app.include_router(categories_router, prefix="/api/categories", tags=["categories"])

from app.apps.faq.router import router as faq_router
app.include_router(faq_router, prefix="/api/faq", tags=["faq"])

from app.apps.leads.router import router as leads_router
app.include_router(leads_router, prefix="/api/leads", tags=["leads"])

from app.apps.media.router import router as media_router
app.include_router(media_router, prefix="/api/media", tags=["media"])

from app.apps.settings.router import router as settings_router
app.include_router(settings_router, prefix="/api/settings", tags=["settings"])

from app.apps.dashboard.router import router as dashboard_router
app.include_router(dashboard_router, prefix="/api/dashboard", tags=["dashboard"])

from app.apps.public.router import router as public_router
app.include_router(public_router, prefix="/api/public", tags=["public"])

# Uploaded files
app.mount(UPLOAD_URL_PREFIX, StaticFiles(directory=UPLOAD_DIR, check_dir=False), name="uploads")


if __name__ == "__main__":
    import uvicorn
    import os
    port = int(os.getenv("PORT", "3001"))
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=port,
        reload=DEBUG,
        log_level="debug" if DEBUG else "info"
    )
