from pydantic import BaseModel, ConfigDict, Field
from typing import List, Dict


class PodAssignment(BaseModel):
    """Pod full name and the node it is assigned to"""
    name: str
    node: str


class ClusterInfo(BaseModel):
    """Snapshot of cluster nodes and pod placement"""
    model_config = ConfigDict(populate_by_name=True)

    nodes: List[str] = []
    pods: List[PodAssignment] = []
    nodes_pods: Dict[str, List[str]] = Field(default_factory=dict, alias="nodesPods")


class ErrorResponse(BaseModel):
    """Error response model"""
    error: str


class HealthStatus(BaseModel):
    """Liveness response"""
    status: str
    version: str
