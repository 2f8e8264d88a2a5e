import pytest
from fastapi.testclient import TestClient

from k8sinfo.core.config import Settings
from k8sinfo.main import create_app
from tests.helpers import StubKubernetesService, StubMetricsService


@pytest.fixture
def settings(tmp_path):
    return Settings(kubeconfig_path=str(tmp_path / "missing-kubeconfig"))


@pytest.fixture
def make_client(settings):
    def _make(kubernetes_service=None, metrics_service=None, raise_server_exceptions=True):
        app = create_app(
            settings,
            kubernetes_service=kubernetes_service or StubKubernetesService(),
            metrics_service=metrics_service or StubMetricsService(),
        )
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)
    return _make
