import logging
from kubernetes import client, config
from k8sinfo.core.exceptions import ConfigError, APIError
from k8sinfo.models.cluster import ClusterInfo, PodAssignment

logger = logging.getLogger(__name__)


class KubernetesService:
    """Service for reading cluster topology"""
    
    def __init__(self, kubeconfig_path: str):
        self.kubeconfig_path = kubeconfig_path
    
    def _new_api_client(self) -> client.ApiClient:
        """
        Build an API client from the kubeconfig file, falling back to
        in-cluster credentials when the file cannot be turned into a config.
        """
        try:
            return config.new_client_from_config(config_file=self.kubeconfig_path)
        except Exception as e:
            logger.info(
                f"Could not load kubeconfig from {self.kubeconfig_path} ({e}), trying in-cluster config"
            )
        
        configuration = client.Configuration()
        try:
            config.load_incluster_config(client_configuration=configuration)
        except Exception as e:
            logger.error(f"No usable Kubernetes credentials: {e}")
            raise ConfigError(f"failed to create k8s config: {e}", cause=e) from e
        return client.ApiClient(configuration)
    
    def get_cluster_info(self) -> ClusterInfo:
        """Get node names and pod placement across all namespaces"""
        with self._new_api_client() as api_client:
            v1 = client.CoreV1Api(api_client)
            
            try:
                node_list = v1.list_node()
            except Exception as e:
                logger.error(f"Failed to list nodes: {e}")
                raise APIError(f"failed to get nodes: {e}", cause=e) from e
            
            nodes = [node.metadata.name for node in node_list.items]
            
            try:
                pod_list = v1.list_pod_for_all_namespaces(watch=False)
            except Exception as e:
                logger.error(f"Failed to list pods: {e}")
                raise APIError(f"failed to get pods: {e}", cause=e) from e
        
        pods = []
        nodes_pods = {}
        for pod in pod_list.items:
            pod_full_name = f"{pod.metadata.namespace}/{pod.metadata.name}"
            # Unscheduled pods have no node yet
            node_name = pod.spec.node_name or ""
            
            pods.append(PodAssignment(name=pod_full_name, node=node_name))
            nodes_pods.setdefault(node_name, []).append(pod_full_name)
        
        logger.debug(f"Collected {len(nodes)} nodes and {len(pods)} pods")
        return ClusterInfo(nodes=nodes, pods=pods, nodes_pods=nodes_pods)
