from fastapi import APIRouter, Depends
from k8sinfo.api.deps import get_metrics_service, error_response
from k8sinfo.models.cluster import ErrorResponse
from k8sinfo.models.metrics import CPUInfo, MemoryInfo, DiskInfo
from k8sinfo.services.metrics_service import MetricsService

router = APIRouter()

error_responses = {500: {"model": ErrorResponse}}


@router.get("/metrics/cpu", response_model=CPUInfo, responses=error_responses)
def get_cpu_info(metrics_service: MetricsService = Depends(get_metrics_service)):
    """Get host CPU usage percentage"""
    try:
        return metrics_service.get_cpu_info()
    except Exception as e:
        return error_response(e)


@router.get("/metrics/memory", response_model=MemoryInfo, responses=error_responses)
def get_memory_info(metrics_service: MetricsService = Depends(get_metrics_service)):
    """Get host memory usage"""
    try:
        return metrics_service.get_memory_info()
    except Exception as e:
        return error_response(e)


@router.get("/metrics/disk", response_model=DiskInfo, responses=error_responses)
def get_disk_info(metrics_service: MetricsService = Depends(get_metrics_service)):
    """Get root filesystem usage"""
    try:
        return metrics_service.get_disk_info()
    except Exception as e:
        return error_response(e)
