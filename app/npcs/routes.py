# app/npcs/routes.py
import logging
from typing import List, Literal, Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel, conint, confloat, constr

from app.agents.llm.client import get_llm_client
from app.agents.llm.errors import GenerationError
from app.agents.npc_namer import generate_npc_names
from app.agents.schemas import NpcName, SamplingOptions
from app.settings import settings

logger = logging.getLogger(__name__)

router = APIRouter()


class NameRequest(BaseModel):
    kind: constr(strip_whitespace=True, min_length=1, max_length=60)
    count: conint(ge=1, le=10) = 1
    strategy: Literal["format", "tools"] = "format"

    temperature: Optional[confloat(ge=0)] = None
    repeat_last_n: Optional[conint(ge=-1)] = None
    repeat_penalty: Optional[confloat(ge=0)] = None
    top_k: Optional[conint(ge=0)] = None
    top_p: Optional[confloat(ge=0, le=1)] = None

    def sampling(self) -> SamplingOptions:
        return SamplingOptions(**self.model_dump(include=set(SamplingOptions.model_fields)))


class NameResponse(BaseModel):
    names: List[NpcName]


@router.post("/npcs/names", response_model=NameResponse)
def create_names(body: NameRequest):
    names = generate_npc_names(
        body.kind,
        body.count,
        sampling=body.sampling(),
        strategy=body.strategy,
    )
    return NameResponse(names=names)


@router.get("/health")
def health():
    llm = get_llm_client()
    try:
        models = llm.list_models()
    except GenerationError as e:
        logger.warning("Model endpoint unavailable: %s", e)
        return JSONResponse({"status": "unavailable", "detail": str(e)}, status_code=503)

    return {"status": "ok", "model": settings.ollama_model, "models": models}
