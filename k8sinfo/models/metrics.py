from pydantic import BaseModel, ConfigDict, Field


class CPUInfo(BaseModel):
    """Aggregate host CPU usage"""
    usage: float


class MemoryInfo(BaseModel):
    """Host virtual memory usage in bytes"""
    model_config = ConfigDict(populate_by_name=True)

    total: int
    used: int
    free: int
    used_percent: float = Field(alias="usedPercent")


class DiskInfo(BaseModel):
    """Filesystem usage in bytes"""
    model_config = ConfigDict(populate_by_name=True)

    total: int
    used: int
    free: int
    used_percent: float = Field(alias="usedPercent")
    path: str
