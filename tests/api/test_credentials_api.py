from fastapi.testclient import TestClient

FETCH_URL = "https://agenta.test/api/api/variants/configs/fetch"

def test_credential_description(client: TestClient):
    response = client.get("/api/v1/credentials/agentaApi")
    assert response.status_code == 200
    assert response.json()["test"]["url"] == "/api/api/variants/configs/fetch"

def test_unknown_credential_type(client: TestClient):
    response = client.get("/api/v1/credentials/openAiApi")
    assert response.status_code == 404

def test_credentials_test_success(client: TestClient, requests_mock):
    requests_mock.post(FETCH_URL, json={"params": {}})

    response = client.post("/api/v1/credentials/test", json={"baseUrl": "https://agenta.test", "apiKey": "k"})

    assert response.status_code == 200
    assert response.json()["ok"] is True
    assert requests_mock.last_request.headers["Authorization"] == "ApiKey k"

def test_credentials_test_rejected(client: TestClient, requests_mock):
    requests_mock.post(FETCH_URL, status_code=403, json={"detail": "Forbidden"})

    response = client.post("/api/v1/credentials/test", json={"baseUrl": "https://agenta.test", "apiKey": "k"})

    assert response.status_code == 200
    assert response.json()["ok"] is False
    assert response.json()["status_code"] == 403

def test_credentials_test_requires_api_key(client: TestClient):
    response = client.post("/api/v1/credentials/test", json={"baseUrl": "https://agenta.test"})
    assert response.status_code == 422
