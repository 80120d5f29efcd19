import itertools
import json

import httpx
import pytest

from app.agents.llm.ollama import OllamaChatClient
from app.agents.schemas import EndpointConfig

from helpers import DWARF_NAMES, chat_reply


@pytest.fixture
def config():
    return EndpointConfig(base_url="http://ollama.test", model="llama3.1", timeout=5)


@pytest.fixture
def requests_seen():
    return []


@pytest.fixture
def ollama_server(requests_seen):
    """
    Stand-in for /api/chat: near-deterministic at temperature 0, cycling
    through names otherwise. The kind is read back from the user prompt.
    """
    names = itertools.cycle(DWARF_NAMES)

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        requests_seen.append(body)
        user = body["messages"][1]["content"]
        kind = user.removeprefix("Generate a random name for a ").rstrip(".")
        temperature = body.get("options", {}).get("temperature", 0.8)
        name = DWARF_NAMES[0] if temperature == 0 else next(names)
        return httpx.Response(200, json=chat_reply(json.dumps({"name": name, "kind": kind})))

    return httpx.MockTransport(handler)


@pytest.fixture
def ollama_client(config, ollama_server):
    return OllamaChatClient(config, transport=ollama_server)
