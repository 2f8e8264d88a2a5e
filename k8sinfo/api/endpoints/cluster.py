from fastapi import APIRouter, Depends
from k8sinfo.api.deps import get_kubernetes_service, error_response
from k8sinfo.models.cluster import ClusterInfo, ErrorResponse
from k8sinfo.services.kubernetes_service import KubernetesService

router = APIRouter()


@router.get("/k8sinfo", response_model=ClusterInfo, responses={500: {"model": ErrorResponse}})
def get_cluster_info(kubernetes_service: KubernetesService = Depends(get_kubernetes_service)):
    """Get cluster nodes, pods and the node each pod is assigned to"""
    try:
        return kubernetes_service.get_cluster_info()
    except Exception as e:
        return error_response(e)
