import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from resume_analyzer.config import settings
from resume_analyzer.api import analysis_routes
from resume_analyzer.services.exceptions import AnalysisError, UpstreamError

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    description="AI-powered resume scoring with ATS, skills and experience feedback",
)

# ── CORS ────────────────────────────────────────────────────────────────────

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Errors ──────────────────────────────────────────────────────────────────


@app.exception_handler(AnalysisError)
async def analysis_error_handler(request: Request, exc: AnalysisError):
    logger.info(f"{request.url.path} failed: kind={exc.kind} status={exc.status_code} {exc}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    # Unreadable bodies get the generic analysis failure, same shape as AnalysisError
    error = UpstreamError()
    logger.info(f"{request.url.path} rejected malformed request: {exc.errors()}")
    return JSONResponse(status_code=error.status_code, content={"error": error.message})


# ── Routers ─────────────────────────────────────────────────────────────────

app.include_router(analysis_routes.router, prefix="/api", tags=["Analysis"])

# ── Health Check ────────────────────────────────────────────────────────────


@app.get("/api/health")
async def health_check():
    return {"status": "healthy", "app": settings.app_name, "version": "0.1.0"}
