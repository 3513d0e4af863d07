import os
from dotenv import load_dotenv

load_dotenv()

# Default Agenta instance, used when credentials do not carry their own URL
AGENTA_BASE_URL = os.getenv("AGENTA_BASE_URL", "https://cloud.agenta.ai")
AGENTA_API_KEY = os.getenv("AGENTA_API_KEY", "")
AGENTA_DOCS_URL = "https://docs.agenta.ai"

HTTP_CONNECT_TIMEOUT_S = float(os.getenv("HTTP_CONNECT_TIMEOUT_S", "3.0"))
HTTP_READ_TIMEOUT_S = float(os.getenv("HTTP_READ_TIMEOUT_S", "60.0"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_JSON = os.getenv("LOG_JSON", "false").lower() in ("1", "true", "yes")

# Agenta API endpoints
FETCH_CONFIG_PATH = "/api/api/variants/configs/fetch"
INVOKE_PATH = "/services/completion/run"

# Target of the credential self-test
CREDENTIAL_TEST_ENVIRONMENT = "development"
CREDENTIAL_TEST_APP_SLUG = "test"

NODE_NAME = "agenta"
NODE_VERSION = 1
CREDENTIAL_NAME = "agentaApi"
