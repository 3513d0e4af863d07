from typing import Any, Dict

from agenta_plugin.config import CREDENTIAL_NAME, NODE_NAME, NODE_VERSION
from agenta_plugin.models.enums import Operation
from agenta_plugin.schemas.parameters import FetchPromptConfigParams, InvokeLlmParams

# value -> (name, action, parameter model)
OPERATIONS = {
    Operation.FETCH_PROMPT_CONFIG.value: ("Fetch Prompt/Config", "Fetch prompt configuration", FetchPromptConfigParams),
    Operation.INVOKE_LLM.value: ("Invoke LLM", "Invoke LLM", InvokeLlmParams),
}

def describe_node() -> Dict[str, Any]:
    operations = []
    for value, (name, action, model) in OPERATIONS.items():
        operations.append({
            "name": name,
            "value": value,
            "description": (model.__doc__ or "").strip(),
            "action": action,
            "parameters": model.model_json_schema(by_alias=True),
        })

    return {
        "displayName": "Agenta",
        "name": NODE_NAME,
        "group": ["transform"],
        "version": NODE_VERSION,
        "description": "Agenta prompt management and LLM invocation",
        "defaults": {"name": "Agenta"},
        "credentials": [{"name": CREDENTIAL_NAME, "required": True}],
        "defaultOperation": Operation.FETCH_PROMPT_CONFIG.value,
        "operations": operations,
    }
