# app/agents/workflow.py
import logging
from typing import Any, Dict, Optional

from app.agents.llm.base import LLMClient
from app.agents.llm.client import get_llm_client
from app.agents.schemas import Conversation, EndpointConfig, SamplingOptions

logger = logging.getLogger(__name__)


def generate(
    system: str,
    user: str,
    schema: Dict[str, Any],
    sampling: Optional[SamplingOptions] = None,
    *,
    config: EndpointConfig | None = None,
    client: LLMClient | None = None,
    strategy: str = "format",
) -> Dict[str, Any]:
    """
    One constrained-generation round trip: build the two-message
    conversation, send it once with the schema attached, parse the reply.

    Every failure propagates as a GenerationError subclass; there is no
    retry and no partial result.
    """
    conversation = Conversation.build(system, user)
    llm = client or get_llm_client(config, strategy=strategy)

    logger.info(
        "Structured request model=%s strategy=%s temperature=%s",
        llm.model,
        strategy,
        sampling.temperature if sampling else None,
    )
    result = llm.generate_structured(conversation, schema=schema, sampling=sampling)
    logger.debug("Structured result: %s", result)
    return result
