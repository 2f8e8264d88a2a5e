import logging
import time
from typing import Optional
from fastapi import FastAPI, Request, Response
from k8sinfo.api.api import api_router
from k8sinfo.core.config import Settings
from k8sinfo.models.cluster import HealthStatus
from k8sinfo.services.kubernetes_service import KubernetesService
from k8sinfo.services.metrics_service import MetricsService

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    kubernetes_service: Optional[KubernetesService] = None,
    metrics_service: Optional[MetricsService] = None,
) -> FastAPI:
    """Create the FastAPI application for the given settings"""
    settings = settings or Settings()
    
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Kubernetes cluster topology and host metrics API",
        debug=settings.debug,
        openapi_url="/api/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc"
    )
    
    app.state.settings = settings
    app.state.kubernetes_service = kubernetes_service or KubernetesService(settings.kubeconfig_path)
    app.state.metrics_service = metrics_service or MetricsService()
    
    cors_headers = {
        "Access-Control-Allow-Origin": settings.allowed_origin,
        "Access-Control-Allow-Methods": ", ".join(settings.allowed_methods),
        "Access-Control-Allow-Headers": ", ".join(settings.allowed_headers),
    }
    
    # Add CORS headers to every response; preflight requests stop here
    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            response = await call_next(request)
        response.headers.update(cors_headers)
        return response
    
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
        )
        return response
    
    # Include API router
    app.include_router(api_router, prefix="/api")
    
    # Root endpoint
    @app.get("/")
    async def root():
        return {
            "message": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs",
            "redoc": "/redoc"
        }
    
    # Health check endpoint
    @app.get("/health", response_model=HealthStatus)
    async def health_check():
        return HealthStatus(status="healthy", version=settings.app_version)
    
    return app
