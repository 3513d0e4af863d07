from fastapi.testclient import TestClient

def test_get_health(client: TestClient):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}

def test_node_description(client: TestClient):
    response = client.get("/api/v1/node")
    assert response.status_code == 200
    payload = response.json()

    assert payload["name"] == "agenta"
    assert payload["credentials"] == [{"name": "agentaApi", "required": True}]
    assert [op["value"] for op in payload["operations"]] == ["fetchPromptConfig", "invokeLlm"]

    invoke = payload["operations"][1]
    assert invoke["action"] == "Invoke LLM"
    assert {"applicationSlug", "environment", "variables", "textInput"} <= set(invoke["parameters"]["properties"])
    assert "options" not in invoke["parameters"]["properties"]
