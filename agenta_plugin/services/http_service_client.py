import requests
from typing import Any, Dict, Optional

from agenta_plugin.config import HTTP_CONNECT_TIMEOUT_S, HTTP_READ_TIMEOUT_S
from agenta_plugin.logging import get_logger
from agenta_plugin.models.enums import ErrorCode
from agenta_plugin.schemas.credentials import AgentaApiCredentials
from agenta_plugin.schemas.requests import RequestOptions

logger = get_logger(__name__)

class ServiceCallError(RuntimeError):
    def __init__(self, code: str, message: str, status_code: Optional[int] = None, details: Optional[Any] = None):
        super().__init__(message)
        self.code = code
        self.status_code = status_code
        self.details = details

class HTTPServiceClient:
    def __init__(self, session: Optional[requests.Session] = None):
        self.session = session or requests.Session()

    def _parse_error(self, resp: requests.Response) -> dict:
        try:
            body = resp.json()
        except ValueError:
            body = None

        message = f"Agenta returned HTTP {resp.status_code}"
        if isinstance(body, dict):
            detail = body.get("detail") or body.get("message") or body.get("error")
            if isinstance(detail, str) and detail:
                message = f"{message}: {detail}"

        if resp.status_code in (401, 403):
            code = ErrorCode.UNAUTHORIZED.value
        elif resp.status_code in (429, 503):
            code = ErrorCode.RESOURCE_EXHAUSTED.value
        else:
            code = ErrorCode.SERVICE_HTTP_ERROR.value

        return {"code": code, "message": message, "details": body}

    def send(self, options: RequestOptions) -> Any:
        timeout = (HTTP_CONNECT_TIMEOUT_S, HTTP_READ_TIMEOUT_S)
        logger.debug("agenta_request", method=options.method, url=options.url)

        try:
            resp = self.session.request(
                options.method, options.url, json=options.body, headers=options.headers, timeout=timeout
            )
        except requests.Timeout as e:
            raise ServiceCallError(ErrorCode.SERVICE_TIMEOUT.value, str(e))
        except requests.RequestException as e:
            raise ServiceCallError(ErrorCode.SERVICE_UNREACHABLE.value, str(e))

        if resp.status_code < 200 or resp.status_code >= 300:
            err = self._parse_error(resp)
            raise ServiceCallError(err["code"], err["message"], resp.status_code, err["details"])

        if not resp.content:
            return {}
        try:
            return resp.json()
        except ValueError:
            raise ServiceCallError(ErrorCode.BAD_RESPONSE.value, "Agenta returned non-JSON", resp.status_code)

    def request_with_authentication(self, credentials: AgentaApiCredentials, options: RequestOptions) -> Any:
        headers: Dict[str, str] = {**options.headers, **credentials.authenticate()}
        return self.send(options.model_copy(update={"headers": headers}))
