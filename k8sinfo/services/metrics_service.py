import logging
import psutil
from k8sinfo.core.exceptions import MetricsError
from k8sinfo.models.metrics import CPUInfo, MemoryInfo, DiskInfo

logger = logging.getLogger(__name__)

ROOT_PATH = "/"


class MetricsService:
    """Service for sampling host resource usage"""
    
    def get_cpu_info(self) -> CPUInfo:
        """Get aggregate CPU usage since the previous sample"""
        try:
            usage = psutil.cpu_percent(interval=None)
        except (psutil.Error, OSError) as e:
            logger.error(f"Failed to sample CPU usage: {e}")
            raise MetricsError(f"failed to get cpu usage: {e}", cause=e) from e
        return CPUInfo(usage=usage)
    
    def get_memory_info(self) -> MemoryInfo:
        """Get virtual memory usage"""
        try:
            vm = psutil.virtual_memory()
        except (psutil.Error, OSError) as e:
            logger.error(f"Failed to sample memory usage: {e}")
            raise MetricsError(f"failed to get memory usage: {e}", cause=e) from e
        return MemoryInfo(
            total=vm.total,
            used=vm.used,
            free=vm.free,
            used_percent=vm.percent
        )
    
    def get_disk_info(self) -> DiskInfo:
        """Get usage of the root filesystem"""
        try:
            usage = psutil.disk_usage(ROOT_PATH)
        except (psutil.Error, OSError) as e:
            logger.error(f"Failed to sample disk usage of {ROOT_PATH}: {e}")
            raise MetricsError(f"failed to get disk usage: {e}", cause=e) from e
        return DiskInfo(
            total=usage.total,
            used=usage.used,
            free=usage.free,
            used_percent=usage.percent,
            path=ROOT_PATH
        )
