import json
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator, model_validator
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from agenta_plugin.models.enums import EnvironmentName, ErrorCode, Operation

class ParameterValidationError(ValueError):
    """Node parameters rejected before any request is sent."""
    code = ErrorCode.VALIDATION_ERROR.value

class Reference(BaseModel):
    """Identifier triple used to pin an environment or an application."""
    slug: str
    version: Optional[str] = None
    id: Optional[str] = None

class FetchOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    environment_version: Optional[str] = Field(
        None, alias="environmentVersion", description="Specific version of the environment (optional)")
    environment_id: Optional[str] = Field(
        None, alias="environmentId", description="Environment ID (optional)")
    application_version: Optional[str] = Field(
        None, alias="applicationVersion", description="Application version (optional)")
    application_id: Optional[str] = Field(
        None, alias="applicationId", description="Application ID (optional)")

    # empty form fields mean "not set"
    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, v: Any) -> Any:
        if v is None:
            return None
        v = str(v).strip()
        return v or None

class VariablePair(BaseModel):
    name: str = ""
    value: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, v: Any) -> str:
        return "" if v is None else str(v).strip()

    @field_validator("value", mode="before")
    @classmethod
    def _stringify_value(cls, v: Any) -> Optional[str]:
        if v is None or isinstance(v, str):
            return v
        return json.dumps(v)

class _BaseParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid", use_enum_values=True)

    environment: EnvironmentName = Field(
        EnvironmentName.DEVELOPMENT.value, description="Environment to use")
    application_slug: str = Field(
        "", alias="applicationSlug", description="Application slug identifier")

    @model_validator(mode="before")
    @classmethod
    def _reject_node_base_url(cls, data: Any) -> Any:
        if isinstance(data, dict) and "baseUrl" in data:
            raise ValueError(
                "baseUrl is no longer a node parameter; set it on the agentaApi credentials")
        return data

    @field_validator("application_slug", mode="before")
    @classmethod
    def _strip_slug(cls, v: Any) -> str:
        return "" if v is None else str(v).strip()

class FetchPromptConfigParams(_BaseParams):
    """Retrieve prompt configurations from Agenta."""
    operation: Literal["fetchPromptConfig"] = Operation.FETCH_PROMPT_CONFIG.value
    options: FetchOptions = Field(default_factory=FetchOptions)

    @field_validator("options", mode="before")
    @classmethod
    def _none_options(cls, v: Any) -> Any:
        return {} if v is None else v

    def environment_ref(self) -> Reference:
        return Reference(
            slug=self.environment,
            version=self.options.environment_version,
            id=self.options.environment_id,
        )

    def application_ref(self) -> Reference:
        return Reference(
            slug=self.application_slug,
            version=self.options.application_version,
            id=self.options.application_id,
        )

class InvokeLlmParams(_BaseParams):
    """Execute LLM calls through Agenta."""
    operation: Literal["invokeLlm"] = Operation.INVOKE_LLM.value
    variables: List[VariablePair] = Field(
        default_factory=list, description="Input variables sent to the application")
    text_input: Optional[str] = Field(
        None, alias="textInput",
        description="Deprecated: single text field, sent as the 'text' variable")

    @field_validator("variables", mode="before")
    @classmethod
    def _coerce_variables(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, dict):
            # form collections arrive as {"variable": [...]}
            if set(v) == {"variable"} and isinstance(v["variable"], list):
                return v["variable"]
            return [{"name": k, "value": val} for k, val in v.items()]
        return v

NodeParameters = Annotated[
    Union[FetchPromptConfigParams, InvokeLlmParams],
    Field(discriminator="operation"),
]

_node_parameters = TypeAdapter(NodeParameters)

def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "Invalid node parameters: " + "; ".join(parts)

def parse_node_parameters(raw: Any) -> Union[FetchPromptConfigParams, InvokeLlmParams]:
    if not isinstance(raw, dict):
        raise ParameterValidationError("Node parameters must be an object")
    data = {"operation": Operation.FETCH_PROMPT_CONFIG.value, **raw}
    try:
        return _node_parameters.validate_python(data)
    except ValidationError as e:
        raise ParameterValidationError(_format_validation_error(e)) from e
