from pydantic import BaseModel, Field
from typing import Any, Dict

class RequestOptions(BaseModel):
    method: str = "POST"
    url: str
    body: Dict[str, Any] = Field(default_factory=dict)
    headers: Dict[str, str] = Field(default_factory=lambda: {"Content-Type": "application/json"})
