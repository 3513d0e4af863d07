from fastapi import Depends

from agenta_plugin.services.executor_service import NodeExecutor
from agenta_plugin.services.http_service_client import HTTPServiceClient

def get_http_client():
    client = HTTPServiceClient()
    try:
        yield client
    finally:
        client.session.close()

def get_executor(client: HTTPServiceClient = Depends(get_http_client)) -> NodeExecutor:
    return NodeExecutor(client)
