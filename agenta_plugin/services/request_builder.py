from typing import Dict

from agenta_plugin.config import FETCH_CONFIG_PATH, INVOKE_PATH
from agenta_plugin.schemas.parameters import FetchPromptConfigParams, InvokeLlmParams, ParameterValidationError
from agenta_plugin.schemas.requests import RequestOptions

def _url(base_url: str, path: str) -> str:
    return base_url.rstrip("/") + path

def build_fetch_config_request(base_url: str, params: FetchPromptConfigParams) -> RequestOptions:
    if not params.application_slug:
        raise ParameterValidationError("Application slug is required for fetching prompt config")

    body = {
        "environment_ref": params.environment_ref().model_dump(),
        "application_ref": params.application_ref().model_dump(),
    }
    return RequestOptions(method="POST", url=_url(base_url, FETCH_CONFIG_PATH), body=body)

def resolve_variables(params: InvokeLlmParams) -> Dict[str, str]:
    """
    Build the ``inputs`` map of an invoke request.

    Pairs with an empty name or an undefined value are dropped; a repeated
    name keeps its last value. When the list yields nothing, a non-empty
    legacy ``textInput`` is sent as ``{"text": textInput}``.
    """
    inputs = {p.name: p.value for p in params.variables if p.name and p.value is not None}
    if not inputs and params.text_input:
        inputs = {"text": params.text_input}
    return inputs

def build_invoke_request(base_url: str, params: InvokeLlmParams) -> RequestOptions:
    inputs = resolve_variables(params)
    if not inputs:
        raise ParameterValidationError("Input variables or text input are required for invoking LLM")
    if not params.application_slug:
        raise ParameterValidationError("Application slug is required for invoking LLM")

    body = {
        "inputs": inputs,
        "environment": params.environment,
        "app": params.application_slug,
    }
    return RequestOptions(method="POST", url=_url(base_url, INVOKE_PATH), body=body)
