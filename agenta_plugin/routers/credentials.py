from fastapi import APIRouter, Depends, HTTPException

from agenta_plugin.config import CREDENTIAL_NAME
from agenta_plugin.dependencies import get_http_client
from agenta_plugin.descriptors.credentials import check_credentials, describe_credentials
from agenta_plugin.schemas.credentials import AgentaApiCredentials, CredentialTestResult
from agenta_plugin.services.http_service_client import HTTPServiceClient

router = APIRouter()

@router.get("/credentials/{name}")
def credential_description(name: str):
    if name != CREDENTIAL_NAME:
        raise HTTPException(404, "Unknown credential type")
    return describe_credentials()

@router.post("/credentials/test", response_model=CredentialTestResult)
def verify_credentials(creds: AgentaApiCredentials, client: HTTPServiceClient = Depends(get_http_client)):
    return check_credentials(client, creds)
