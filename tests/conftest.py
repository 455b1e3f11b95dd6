import httpx
import pytest


@pytest.fixture(autouse=True)
def clear_env(monkeypatch, tmp_path):
    for key in ("HOSTNAME", "ETCD", "IP", "hostname", "etcd", "ip"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    yield


@pytest.fixture
def registry():
    """Stub registry recording requests and answering with ``status``."""

    class Stub:
        status = 200

        def __init__(self):
            self.requests = []
            self.client = httpx.Client(transport=httpx.MockTransport(self.handle))

        def handle(self, request):
            self.requests.append(request)
            return httpx.Response(self.status, text="ignored")

    stub = Stub()
    yield stub
    stub.client.close()
