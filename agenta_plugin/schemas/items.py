from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional

from agenta_plugin.schemas.credentials import AgentaApiCredentials

class ExecuteRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    items: List[Dict[str, Any]]
    credentials: Optional[AgentaApiCredentials] = None
    continue_on_fail: bool = Field(False, alias="continueOnFail")

class ExecuteResponse(BaseModel):
    items: List[Dict[str, Any]]
