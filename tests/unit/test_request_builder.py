import pytest

from agenta_plugin.schemas.parameters import (
    FetchPromptConfigParams,
    InvokeLlmParams,
    ParameterValidationError,
    parse_node_parameters,
)
from agenta_plugin.services.request_builder import (
    build_fetch_config_request,
    build_invoke_request,
    resolve_variables,
)

BASE_URL = "https://agenta.test/"

def test_fetch_config_request_shape():
    params = FetchPromptConfigParams(
        environment="production",
        applicationSlug="my-app",
        options={"environmentVersion": "3", "applicationId": "app-123", "environmentId": ""},
    )
    req = build_fetch_config_request(BASE_URL, params)

    assert req.method == "POST"
    assert req.url == "https://agenta.test/api/api/variants/configs/fetch"
    assert req.headers == {"Content-Type": "application/json"}
    assert req.body == {
        "environment_ref": {"slug": "production", "version": "3", "id": None},
        "application_ref": {"slug": "my-app", "version": None, "id": "app-123"},
    }

def test_fetch_config_requires_slug():
    params = FetchPromptConfigParams(applicationSlug="   ")
    with pytest.raises(ParameterValidationError, match="Application slug is required"):
        build_fetch_config_request(BASE_URL, params)

def test_invoke_request_with_text_input():
    params = parse_node_parameters(
        {"operation": "invokeLlm", "applicationSlug": "test", "environment": "development", "textInput": "hello"}
    )
    req = build_invoke_request("https://agenta.test", params)

    assert req.url == "https://agenta.test/services/completion/run"
    assert req.body == {"inputs": {"text": "hello"}, "environment": "development", "app": "test"}

def test_invoke_request_with_variables():
    params = InvokeLlmParams(
        applicationSlug="summarizer",
        environment="staging",
        variables=[
            {"name": "topic", "value": "llamas"},
            {"name": "", "value": "dropped"},
            {"name": "tone"},
            {"name": "empty", "value": ""},
            {"name": "count", "value": 3},
        ],
    )
    req = build_invoke_request(BASE_URL, params)

    assert req.body["inputs"] == {"topic": "llamas", "empty": "", "count": "3"}
    assert req.body["app"] == "summarizer"
    assert req.body["environment"] == "staging"

def test_variables_take_precedence_over_text_input():
    params = InvokeLlmParams(
        applicationSlug="a", variables=[{"name": "q", "value": "x"}], textInput="ignored"
    )
    assert resolve_variables(params) == {"q": "x"}

def test_duplicate_variable_names_keep_last_value():
    params = InvokeLlmParams(
        applicationSlug="a", variables=[{"name": "q", "value": "1"}, {"name": "q", "value": "2"}]
    )
    assert resolve_variables(params) == {"q": "2"}

def test_variables_accept_mapping_and_collection_shapes():
    assert resolve_variables(InvokeLlmParams(applicationSlug="a", variables={"q": "x"})) == {"q": "x"}
    collection = {"variable": [{"name": "q", "value": "y"}]}
    assert resolve_variables(InvokeLlmParams(applicationSlug="a", variables=collection)) == {"q": "y"}

@pytest.mark.parametrize("params", [
    {"applicationSlug": "a"},
    {"applicationSlug": "a", "textInput": ""},
    {"applicationSlug": "a", "variables": [{"name": "", "value": "x"}, {"name": "q"}]},
])
def test_invoke_requires_inputs(params):
    with pytest.raises(ParameterValidationError, match="required for invoking LLM"):
        build_invoke_request(BASE_URL, InvokeLlmParams(**params))

def test_invoke_requires_slug():
    params = InvokeLlmParams(textInput="hello")
    with pytest.raises(ParameterValidationError, match="Application slug is required for invoking LLM"):
        build_invoke_request(BASE_URL, params)
