## Tool-calling strategy for structured output
#
# Wraps the schema as a function tool and expects the model to "call" it.
# Kept for comparison with the `format` strategy: hot sampling makes the
# model skip the call and answer in prose, which surfaces as NoToolCallsFound.
import logging
from typing import Any, Dict, Optional

import openai
from openai import OpenAI

from app.agents.llm.base import LLMClient
from app.agents.llm.errors import EndpointUnavailable, MalformedOutput, NoToolCallsFound
from app.agents.schemas import Conversation, EndpointConfig, SamplingOptions

logger = logging.getLogger(__name__)

TOOL_NAME = "structured_output"

# Knobs the OpenAI-compatible endpoint understands directly
_OPENAI_KNOBS = ("temperature", "top_p")


def tool_for(schema: Dict[str, Any], name: str = TOOL_NAME,
description: str = "Return the answer as structured data.") -> Dict[str, Any]:
    return {
        "type": "function",
        "function": {
            "name": name,
            "description": description,
            "parameters": schema,
        },
    }


class ToolCallingClient(LLMClient):
    def __init__(self, config: EndpointConfig, client: Any = None):
        # OpenAI-compatible clients require an api key field; Ollama ignores it
        self.client = client or OpenAI(api_key="ollama", base_url=config.base_url, timeout=config.timeout)
        self.model = config.model

    def generate_text(self, conversation: Conversation, * , schema: Dict[str, Any],
    sampling: Optional[SamplingOptions] = None) -> str:
        options = sampling.to_options() if sampling else {}
        params = {k: v for k, v in options.items() if k in _OPENAI_KNOBS}
        dropped = sorted(set(options) - set(params))
        if dropped:
            logger.debug("Ignoring sampling options unsupported by the tools endpoint: %s", dropped)

        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                messages=conversation.to_payload(),
                tools=[tool_for(schema)],
                **params,
            )
        except openai.APIStatusError as e:
            raise EndpointUnavailable(f"Chat completion returned {e.status_code}", status_code=e.status_code) from e
        except openai.APIConnectionError as e:
            raise EndpointUnavailable(f"Chat completion failed: {type(e).__name__}: {e}") from e

        if not resp.choices:
            raise MalformedOutput("Chat completion returned no choices", raw=str(resp))

        message = resp.choices[0].message
        if not message.tool_calls:
            logger.warning("Model answered without a tool call (temperature=%s)", params.get("temperature"))
            raise NoToolCallsFound(content=message.content)

        return message.tool_calls[0].function.arguments
