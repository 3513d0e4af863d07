from datetime import datetime, timezone
from typing import Any, Dict, List

from agenta_plugin.logging import get_logger
from agenta_plugin.models.enums import ErrorCode, Operation
from agenta_plugin.schemas.credentials import AgentaApiCredentials
from agenta_plugin.schemas.parameters import (
    FetchPromptConfigParams,
    InvokeLlmParams,
    parse_node_parameters,
)
from agenta_plugin.services.http_service_client import HTTPServiceClient
from agenta_plugin.services.request_builder import (
    build_fetch_config_request,
    build_invoke_request,
)

COLLISIONS_KEY = "upstreamCollisions"

class NodeOperationError(RuntimeError):
    """Aborts a whole batch; raised for the first failing item when continue-on-fail is off."""

    def __init__(self, item_index: int, message: str, code: str):
        super().__init__(f"Agenta operation failed for item {item_index}: {message}")
        self.item_index = item_index
        self.code = code

def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()

def _error_code(exc: Exception) -> str:
    code = getattr(exc, "code", None)
    return code if isinstance(code, str) and code else ErrorCode.UNKNOWN_ERROR.value

class NodeExecutor:
    def __init__(self, client: HTTPServiceClient, logger=None):
        self.client = client
        self.logger = logger or get_logger(__name__)

    def execute(
        self,
        items: List[Dict[str, Any]],
        credentials: AgentaApiCredentials,
        continue_on_fail: bool = False,
    ) -> List[Dict[str, Any]]:
        out: List[Dict[str, Any]] = []

        for i, raw in enumerate(items):
            try:
                params = parse_node_parameters(raw)
                if params.operation == Operation.FETCH_PROMPT_CONFIG:
                    result = self._fetch_prompt_config(i, params, credentials)
                else:
                    result = self._invoke_llm(i, params, credentials)
                out.append({"json": result, "pairedItem": {"item": i}})

            except Exception as e:
                message = str(e) or e.__class__.__name__
                code = _error_code(e)
                timestamp = _now_iso()
                self.logger.error(
                    "agenta_item_failed", error=message, error_code=code, item_index=i, timestamp=timestamp
                )

                if not continue_on_fail:
                    raise NodeOperationError(i, message, code) from e

                out.append({
                    "json": {"error": message, "error_code": code, "timestamp": timestamp},
                    "pairedItem": {"item": i},
                })

        return out

    def _fetch_prompt_config(
        self, i: int, params: FetchPromptConfigParams, credentials: AgentaApiCredentials
    ) -> Dict[str, Any]:
        options = build_fetch_config_request(credentials.base_url, params)
        response = self.client.request_with_authentication(credentials, options)
        return self._merge(i, response, {
            "operation": Operation.FETCH_PROMPT_CONFIG.value,
            "environment": params.environment,
            "applicationSlug": params.application_slug,
        })

    def _invoke_llm(self, i: int, params: InvokeLlmParams, credentials: AgentaApiCredentials) -> Dict[str, Any]:
        options = build_invoke_request(credentials.base_url, params)
        echo: Dict[str, Any] = {
            "operation": Operation.INVOKE_LLM.value,
            "environment": params.environment,
            "applicationSlug": params.application_slug,
        }
        if any(p.name and p.value is not None for p in params.variables):
            echo["inputs"] = options.body["inputs"]
        else:
            self.logger.warning("agenta_deprecated_text_input", item_index=i)
            echo["textInput"] = params.text_input

        response = self.client.request_with_authentication(credentials, options)
        return self._merge(i, response, echo)

    def _merge(self, i: int, response: Any, echo: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge the Agenta response with the echoed request metadata.

        Echoed keys win. Upstream values they replace are kept under
        ``upstreamCollisions`` and reported with a warning; an upstream
        ``upstreamCollisions`` key is itself treated as a collision.
        """
        data = dict(response) if isinstance(response, dict) else {"data": response}

        collisions = {k: data[k] for k in echo if k in data and data[k] != echo[k]}
        if COLLISIONS_KEY in data:
            collisions[COLLISIONS_KEY] = data.pop(COLLISIONS_KEY)
        if collisions:
            self.logger.warning("agenta_response_key_collision", item_index=i, keys=sorted(collisions))
            data[COLLISIONS_KEY] = collisions

        data.update(echo)
        return data
