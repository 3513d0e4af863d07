from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from agenta_plugin.config import AGENTA_API_KEY, AGENTA_BASE_URL
from agenta_plugin.dependencies import get_executor
from agenta_plugin.models.enums import ErrorCode
from agenta_plugin.schemas.credentials import AgentaApiCredentials
from agenta_plugin.schemas.items import ExecuteRequest, ExecuteResponse
from agenta_plugin.services.executor_service import NodeExecutor, NodeOperationError

router = APIRouter()

def _default_credentials() -> AgentaApiCredentials:
    try:
        return AgentaApiCredentials(base_url=AGENTA_BASE_URL, api_key=AGENTA_API_KEY)
    except ValidationError:
        raise HTTPException(400, "No agentaApi credentials supplied and AGENTA_API_KEY is not set")

@router.post("/execute", response_model=ExecuteResponse)
def execute(req: ExecuteRequest, executor: NodeExecutor = Depends(get_executor)):
    creds = req.credentials or _default_credentials()

    try:
        items = executor.execute(req.items, creds, continue_on_fail=req.continue_on_fail)
    except NodeOperationError as e:
        status = 400 if e.code == ErrorCode.VALIDATION_ERROR.value else 502
        raise HTTPException(status, {"message": str(e), "item_index": e.item_index, "error_code": e.code})

    return {"items": items}
