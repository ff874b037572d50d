"""
ProspectResearch - FastAPI Application

Research a company's hiring footprint from its website: careers page,
ATS vendor, live role count and a recruiter search link
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import settings
from routes.research import router as research_router

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle events for FastAPI"""
    logger.info("Starting ProspectResearch...")
    logger.info(
        f"Timeouts: probe={settings.probe_timeout_seconds}s page={settings.page_timeout_seconds}s "
        f"api={settings.api_timeout_seconds}s deadline={settings.research_deadline_seconds}s "
        f"(concurrent probes: {settings.probe_concurrently})"
    )
    yield
    logger.info("ProspectResearch shut down")


# Initialize FastAPI app
app = FastAPI(
    title="ProspectResearch",
    description="Detect a company's ATS, count its live roles and find its recruiters",
    version=VERSION,
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(research_router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and non-string URLs get the same 400 as a blank URL"""
    logger.info(f"Invalid request body on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Please provide a valid URL"})


@app.get("/")
async def root():
    return {
        "message": "ProspectResearch API",
        "version": VERSION,
        "endpoints": {
            "/api/research": "POST {url} - detect ATS, count live roles, build recruiter search",
            "/health": "Liveness check"
        }
    }


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=True
    )
