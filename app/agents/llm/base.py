## Base LLM Client Interface
import json
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from app.agents.llm.errors import MalformedOutput
from app.agents.schemas import Conversation, SamplingOptions, require_properties

M = TypeVar("M", bound=BaseModel)

_JSON_TYPES = {
    "string": str,
    "integer": int,
    "number": (int, float),
    "boolean": bool,
    "object": dict,
    "array": list,
}


def parse_structured(text: str, schema: Dict[str, Any]) -> Dict[str, Any]:
    """
    Parse model output as a JSON object and check it against the schema's
    declared properties: every required key present, no undeclared keys,
    and primitive types matching.
    """
    try:
        data = json.loads(text)
    except (TypeError, json.JSONDecodeError) as e:
        raise MalformedOutput(f"Model output is not valid JSON: {e}", raw=text) from e

    if not isinstance(data, dict):
        raise MalformedOutput(f"Expected a JSON object, got {type(data).__name__}", raw=text)

    properties = schema.get("properties", {})
    missing = [k for k in schema.get("required", []) if k not in data]
    if missing:
        raise MalformedOutput(f"Missing required properties: {missing}", raw=text)

    extra = sorted(set(data) - set(properties))
    if extra:
        raise MalformedOutput(f"Undeclared properties: {extra}", raw=text)

    for key, value in data.items():
        expected = _JSON_TYPES.get(properties[key].get("type"))
        # bool is an int subclass; don't let true pass as a number
        if expected and (not isinstance(value, expected) or (isinstance(value, bool) and expected is not bool)):
            raise MalformedOutput(f"Property {key!r} should be {properties[key]['type']}", raw=text)

    return data


def validate_against(model: Type[M], data: Dict[str, Any]) -> M:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise MalformedOutput(f"Structured result does not match {model.__name__}: {e}", raw=json.dumps(data)) from e


class LLMClient(ABC):
    model: str

    @abstractmethod
    def generate_text(self, conversation: Conversation, * , schema: Dict[str, Any],
    sampling: Optional[SamplingOptions] = None) -> str:
        raise NotImplementedError

    def generate_structured(self, conversation: Conversation, * , schema: Dict[str, Any],
    sampling: Optional[SamplingOptions] = None) -> Dict[str, Any]:
        """
        Ask the model for output constrained by `schema`, then parse it.
        How the constraint reaches the model is up to the concrete client.
        """

        require_properties(schema)
        text = self.generate_text(conversation, schema=schema, sampling=sampling)
        return parse_structured(text, schema)
