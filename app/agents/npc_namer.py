import logging
from typing import List, Optional

from app.settings import settings
from app.agents.llm.base import LLMClient, validate_against
from app.agents.llm.errors import MalformedOutput
from app.agents.schemas import NPC_NAME_SCHEMA, EndpointConfig, NpcName, SamplingOptions
from app.agents.workflow import generate

logger = logging.getLogger(__name__)

SYSTEM_NPC_NAMER = "You are an expert for games like D&D 5th edition."


def build_name_prompt(kind: str) -> str:
    if not kind or not kind.strip():
        raise ValueError("kind must not be empty")
    return f"Generate a random name for a {kind.strip()}."


def _with_default_temperature(sampling: Optional[SamplingOptions]) -> SamplingOptions:
    if sampling is None:
        return SamplingOptions(temperature=settings.default_temperature)
    if sampling.temperature is None:
        return sampling.model_copy(update={"temperature": settings.default_temperature})
    return sampling


def generate_npc_name(
    kind: str,
    *,
    sampling: Optional[SamplingOptions] = None,
    config: EndpointConfig | None = None,
    client: LLMClient | None = None,
    strategy: str = "format",
) -> NpcName:
    data = generate(
        SYSTEM_NPC_NAMER,
        build_name_prompt(kind),
        NPC_NAME_SCHEMA,
        _with_default_temperature(sampling),
        config=config,
        client=client,
        strategy=strategy,
    )
    npc = validate_against(NpcName, data)
    if npc.kind.strip().casefold() != kind.strip().casefold():
        raise MalformedOutput(f"Asked for a {kind.strip()}, got a {npc.kind}", raw=npc.model_dump_json())
    return npc


def generate_npc_names(
    kind: str,
    count: int,
    *,
    sampling: Optional[SamplingOptions] = None,
    config: EndpointConfig | None = None,
    client: LLMClient | None = None,
    strategy: str = "format",
) -> List[NpcName]:
    """Independent sequential calls; the first failure aborts the batch."""
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")

    names = []
    for i in range(1, count + 1):
        npc = generate_npc_name(kind, sampling=sampling, config=config, client=client, strategy=strategy)
        logger.info("Generated name %d/%d for %s: %s", i, count, kind, npc.name)
        names.append(npc)
    return names
