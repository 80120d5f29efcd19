from app.settings import settings
from app.agents.schemas import EndpointConfig
from app.agents.llm.base import LLMClient
from app.agents.llm.ollama import OllamaChatClient
from app.agents.llm.tools import ToolCallingClient

STRATEGIES = ("format", "tools")


def get_llm_client(config: EndpointConfig | None = None, *, strategy: str = "format") -> LLMClient:
    """Build a fresh client per call; nothing is cached between requests."""
    if strategy == "tools":
        return ToolCallingClient(
            config or EndpointConfig.from_settings(settings, openai_compatible=True)
        )

    if strategy == "format":
        return OllamaChatClient(config or EndpointConfig.from_settings(settings))

    raise ValueError(f"Unknown structured output strategy: {strategy!r} (expected one of {STRATEGIES})")
