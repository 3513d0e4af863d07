import pytest
from fastapi.testclient import TestClient

from agenta_plugin.main import app
from agenta_plugin.schemas.credentials import AgentaApiCredentials
from agenta_plugin.services.http_service_client import HTTPServiceClient

@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c

@pytest.fixture
def credentials():
    return AgentaApiCredentials(baseUrl="https://agenta.test", apiKey="secret-key")

@pytest.fixture
def http_client():
    return HTTPServiceClient()
