import logging
from typing import Any, Dict, List, Optional

import httpx

from app.agents.llm.base import LLMClient
from app.agents.llm.errors import EndpointUnavailable, MalformedOutput
from app.agents.schemas import Conversation, EndpointConfig, SamplingOptions

logger = logging.getLogger(__name__)


class OllamaChatClient(LLMClient):
    """Native Ollama chat API, with the JSON Schema passed as `format`."""

    def __init__(self, config: EndpointConfig, transport: httpx.BaseTransport | None = None):
        self.base_url = config.base_url.rstrip("/")
        self.model = config.model
        self.timeout = config.timeout
        self._transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(timeout=self.timeout, transport=self._transport)

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            with self._client() as client:
                r = client.request(method, url, **kwargs)
                r.raise_for_status()
                return r.json()
        except httpx.HTTPStatusError as e:
            raise EndpointUnavailable(
                f"{method} {url} returned {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.TransportError as e:
            raise EndpointUnavailable(f"{method} {url} failed: {type(e).__name__}: {e}") from e
        except ValueError as e:
            # 2xx with a body that isn't JSON at all
            raise MalformedOutput(f"{method} {url} returned a non-JSON body") from e

    def generate_text(self, conversation: Conversation, * , schema: Dict[str, Any],
    sampling: Optional[SamplingOptions] = None) -> str:
        # POST {base_url}/api/chat, non-streaming, schema goes in `format`
        payload = {
            "model": self.model,
            "messages": conversation.to_payload(),
            "format": schema,
            "stream": False,
        }
        options = sampling.to_options() if sampling else {}
        if options:
            payload["options"] = options

        logger.debug("POST /api/chat model=%s options=%s", self.model, options)
        data = self._request("POST", "/api/chat", json=payload)

        message = data.get("message") if isinstance(data, dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        if not isinstance(content, str):
            raise MalformedOutput("Response has no message content", raw=str(data))
        return content

    def list_models(self) -> List[str]:
        data = self._request("GET", "/api/tags")
        models = data.get("models") if isinstance(data, dict) else None
        if not isinstance(models, list):
            raise MalformedOutput("Model listing has no models array", raw=str(data))
        return [m["name"] for m in models if isinstance(m, dict) and "name" in m]
