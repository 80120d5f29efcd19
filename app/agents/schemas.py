## Pydantic Schemas for Structured Output
from typing import Any, Dict, List, Literal, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, conint, confloat, field_validator


class ChatMessage(BaseModel):
    role: Literal["system", "user"]
    content: str = Field(min_length=1)


class Conversation(BaseModel):
    """System instructions followed by a single user request. Nothing else."""

    messages: List[ChatMessage] = Field(min_length=2, max_length=2)

    @field_validator("messages")
    @classmethod
    def _system_then_user(cls, v: List[ChatMessage]) -> List[ChatMessage]:
        if [m.role for m in v] != ["system", "user"]:
            raise ValueError("conversation must be a system message followed by a user message")
        return v

    @classmethod
    def build(cls, system: str, user: str) -> "Conversation":
        if not system or not system.strip():
            raise ValueError("system text must not be empty")
        if not user or not user.strip():
            raise ValueError("user text must not be empty")
        return cls(messages=[
            ChatMessage(role="system", content=system),
            ChatMessage(role="user", content=user),
        ])

    def to_payload(self) -> List[Dict[str, str]]:
        return [m.model_dump() for m in self.messages]


class SamplingOptions(BaseModel):
    # Unset fields fall back to the endpoint defaults
    temperature: Optional[confloat(ge=0)] = None
    repeat_last_n: Optional[conint(ge=-1)] = None
    repeat_penalty: Optional[confloat(ge=0)] = None
    top_k: Optional[conint(ge=0)] = None
    top_p: Optional[confloat(ge=0, le=1)] = None

    def to_options(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class EndpointConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_url: str
    model: str
    timeout: float = 120.0

    @classmethod
    def from_settings(cls, settings, *, openai_compatible: bool = False) -> "EndpointConfig":
        base_url = settings.ollama_openai_base_url if openai_compatible else settings.ollama_base_url
        return cls(
            base_url=base_url.rstrip("/"),
            model=settings.ollama_model,
            timeout=settings.request_timeout,
        )


class NpcName(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    kind: str = Field(min_length=1)


NPC_NAME_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "kind": {"type": "string"},
    },
    "required": ["name", "kind"],
}


def schema_for(model: Type[BaseModel]) -> Dict[str, Any]:
    """
    Build a plain JSON Schema object from a Pydantic model, trimmed to the
    keys a model server understands as a format constraint.
    """
    full = model.model_json_schema()
    schema = {
        "type": "object",
        "properties": {
            key: {k: v for k, v in prop.items() if k != "title"}
            for key, prop in full.get("properties", {}).items()
        },
        "required": list(full.get("required", [])),
    }
    return require_properties(schema)


def require_properties(schema: Dict[str, Any]) -> Dict[str, Any]:
    required = schema.get("required") or []
    if not required:
        raise ValueError("schema must declare at least one required property")
    properties = schema.get("properties") or {}
    missing = [name for name in required if name not in properties]
    if missing:
        raise ValueError(f"required properties not declared: {missing}")
    return schema
