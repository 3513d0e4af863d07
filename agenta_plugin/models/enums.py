from enum import Enum

class Operation(str, Enum):
    FETCH_PROMPT_CONFIG = "fetchPromptConfig"
    INVOKE_LLM = "invokeLlm"

class EnvironmentName(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"

class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    SERVICE_TIMEOUT = "SERVICE_TIMEOUT"
    SERVICE_UNREACHABLE = "SERVICE_UNREACHABLE"
    SERVICE_HTTP_ERROR = "SERVICE_HTTP_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    RESOURCE_EXHAUSTED = "RESOURCE_EXHAUSTED"
    BAD_RESPONSE = "BAD_RESPONSE"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
