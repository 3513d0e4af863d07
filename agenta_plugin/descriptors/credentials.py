from typing import Any, Dict

from agenta_plugin.config import (
    AGENTA_BASE_URL,
    AGENTA_DOCS_URL,
    CREDENTIAL_NAME,
    CREDENTIAL_TEST_APP_SLUG,
    CREDENTIAL_TEST_ENVIRONMENT,
    FETCH_CONFIG_PATH,
)
from agenta_plugin.logging import get_logger
from agenta_plugin.models.enums import ErrorCode
from agenta_plugin.schemas.credentials import AgentaApiCredentials, CredentialTestResult
from agenta_plugin.schemas.parameters import FetchPromptConfigParams
from agenta_plugin.schemas.requests import RequestOptions
from agenta_plugin.services.http_service_client import HTTPServiceClient, ServiceCallError
from agenta_plugin.services.request_builder import build_fetch_config_request

logger = get_logger(__name__)

def build_test_request(credentials: AgentaApiCredentials) -> RequestOptions:
    params = FetchPromptConfigParams(
        environment=CREDENTIAL_TEST_ENVIRONMENT,
        application_slug=CREDENTIAL_TEST_APP_SLUG,
    )
    return build_fetch_config_request(credentials.base_url, params)

def describe_credentials() -> Dict[str, Any]:
    return {
        "name": CREDENTIAL_NAME,
        "displayName": "Agenta API",
        "documentationUrl": AGENTA_DOCS_URL,
        "properties": AgentaApiCredentials.model_json_schema(by_alias=True),
        "authenticate": {
            "type": "generic",
            "headers": {"Authorization": "ApiKey {apiKey}"},
        },
        "test": {
            "baseUrl": AGENTA_BASE_URL,
            "method": "POST",
            "url": FETCH_CONFIG_PATH,
            "body": {
                "environment_ref": {"slug": CREDENTIAL_TEST_ENVIRONMENT, "version": None, "id": None},
                "application_ref": {"slug": CREDENTIAL_TEST_APP_SLUG, "version": None, "id": None},
            },
        },
    }

def check_credentials(client: HTTPServiceClient, credentials: AgentaApiCredentials) -> CredentialTestResult:
    """
    Run the connectivity self-test against the configured instance.

    The placeholder application usually does not exist, so a client error
    other than 401/403/429 still means the key was accepted.
    """
    try:
        client.request_with_authentication(credentials, build_test_request(credentials))
    except ServiceCallError as e:
        if e.code == ErrorCode.SERVICE_HTTP_ERROR.value and 400 <= e.status_code < 500:
            return CredentialTestResult(ok=True, message="Connection successful", status_code=e.status_code)
        logger.warning("agenta_credential_test_failed", error=str(e), error_code=e.code)
        return CredentialTestResult(ok=False, message=str(e), status_code=e.status_code)

    return CredentialTestResult(ok=True, message="Connection successful", status_code=200)
