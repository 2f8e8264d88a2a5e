from fastapi import APIRouter
from .endpoints import cluster, metrics

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(cluster.router, tags=["cluster"])
api_router.include_router(metrics.router, tags=["metrics"])
