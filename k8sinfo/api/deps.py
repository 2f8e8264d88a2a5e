from fastapi import Request
from fastapi.responses import JSONResponse
from k8sinfo.models.cluster import ErrorResponse
from k8sinfo.services.kubernetes_service import KubernetesService
from k8sinfo.services.metrics_service import MetricsService


def get_kubernetes_service(request: Request) -> KubernetesService:
    return request.app.state.kubernetes_service


def get_metrics_service(request: Request) -> MetricsService:
    return request.app.state.metrics_service


def error_response(error: Exception) -> JSONResponse:
    """Render a failure as a 500 with {"error": message}"""
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error=str(error)).model_dump()
    )
