"""
Women's Health Risk Engine — FastAPI Application Entry Point

POST /v1/assessments/calculate          → score + store a questionnaire
GET  /v1/assessments/history            → caller's assessment log
POST /functions/v1/analyze-family-risks → family hereditary risk analysis
GET  /v1/admin/algorithm-check          → calculator fixture checks
GET  /docs                              → OpenAPI / Swagger UI
"""
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from app.api.admin_endpoint import router as admin_router
from app.api.assessment_endpoint import router as assessment_router
from app.api.family_endpoint import router as family_router
from app.core.config import get_settings
from app.services.event_publisher import close_producer

structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.ConsoleRenderer() if get_settings().app_env == "development"
        else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(get_settings().log_level),
)
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("risk_engine_starting", engine_version=get_settings().engine_version)
    yield
    await close_producer()
    logger.info("risk_engine_shutting_down")


app = FastAPI(
    title="Women's Health Risk Engine",
    description="Risk calculators and family hereditary risk analysis",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS (web client + family function is open) ──
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["POST", "GET", "PUT", "OPTIONS"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)

# ── Prometheus metrics ──
metrics_app = make_asgi_app()
app.mount("/metrics", metrics_app)

# ── Routes ──
app.include_router(assessment_router)
app.include_router(family_router)
app.include_router(admin_router)


@app.get("/", include_in_schema=False)
async def root():
    return {
        "service": "wh-risk-engine",
        "version": "1.0.0",
        "docs": "/docs",
        "calculate": "POST /v1/assessments/calculate",
        "family": "POST /functions/v1/analyze-family-risks",
    }
