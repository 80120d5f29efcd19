## Main application entry point

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.agents.llm.errors import EndpointUnavailable, MalformedOutput, NoToolCallsFound
from app.logging_config import configure_logging
from app.npcs.routes import router as npcs_router
from app.settings import settings

configure_logging(settings.log_level)

app = FastAPI(title="NPC Namer")


def _error(status_code: int, kind: str, exc: Exception) -> JSONResponse:
    return JSONResponse({"error": kind, "detail": str(exc)}, status_code=status_code)


@app.exception_handler(EndpointUnavailable)
async def endpoint_unavailable_handler(request: Request, exc: EndpointUnavailable):
    return _error(502, "endpoint_unavailable", exc)


@app.exception_handler(MalformedOutput)
async def malformed_output_handler(request: Request, exc: MalformedOutput):
    return _error(502, "malformed_output", exc)


@app.exception_handler(NoToolCallsFound)
async def no_tool_calls_handler(request: Request, exc: NoToolCallsFound):
    return _error(422, "no_tool_calls", exc)

app.include_router(npcs_router)
