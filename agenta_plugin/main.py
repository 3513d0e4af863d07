from fastapi import FastAPI

from agenta_plugin.config import LOG_JSON, LOG_LEVEL
from agenta_plugin.logging import configure_logging
from agenta_plugin.routers import credentials, execute, health

configure_logging(json_output=LOG_JSON, level=LOG_LEVEL)

app = FastAPI(title="Agenta Node")

app.include_router(health.router, prefix="/api/v1")
app.include_router(credentials.router, prefix="/api/v1")
app.include_router(execute.router, prefix="/api/v1")
