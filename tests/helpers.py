from types import SimpleNamespace


def make_node(name):
    return SimpleNamespace(metadata=SimpleNamespace(name=name))


def make_pod(namespace, name, node_name):
    return SimpleNamespace(
        metadata=SimpleNamespace(namespace=namespace, name=name),
        spec=SimpleNamespace(node_name=node_name),
    )


class StubKubernetesService:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error

    def get_cluster_info(self):
        if self.error:
            raise self.error
        return self.result


class StubMetricsService:
    def __init__(self, cpu=None, memory=None, disk=None, error=None):
        self.cpu = cpu
        self.memory = memory
        self.disk = disk
        self.error = error

    def _get(self, value):
        if self.error:
            raise self.error
        return value

    def get_cpu_info(self):
        return self._get(self.cpu)

    def get_memory_info(self):
        return self._get(self.memory)

    def get_disk_info(self):
        return self._get(self.disk)
