from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator
from typing import Dict, Optional

from agenta_plugin.config import AGENTA_BASE_URL

class AgentaApiCredentials(BaseModel):
    """Credentials of the ``agentaApi`` type: instance URL plus API key."""
    model_config = ConfigDict(populate_by_name=True)

    base_url: str = Field(
        default=AGENTA_BASE_URL,
        alias="baseUrl",
        title="Base URL",
        description="Your Agenta instance URL",
    )
    api_key: SecretStr = Field(
        alias="apiKey",
        title="API Key",
        description="The API Key from Agenta Console",
    )

    @field_validator("base_url", mode="before")
    @classmethod
    def _normalize_base_url(cls, v: Optional[str]) -> str:
        v = (v or "").strip()
        if not v:
            return AGENTA_BASE_URL
        return v.rstrip("/")

    @field_validator("api_key")
    @classmethod
    def _require_api_key(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value().strip():
            raise ValueError("API key must not be empty")
        return v

    def authenticate(self) -> Dict[str, str]:
        return {"Authorization": f"ApiKey {self.api_key.get_secret_value()}"}

class CredentialTestResult(BaseModel):
    ok: bool
    message: str
    status_code: Optional[int] = None
