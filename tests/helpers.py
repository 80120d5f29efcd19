## Test doubles for the Ollama and OpenAI-compatible endpoints
from types import SimpleNamespace

import httpx

DWARF_NAMES = ["Thorin Oakenshield", "Dagna Ironbrow", "Brokk Stonefist", "Helja Deepdelver"]


def chat_reply(content):
    return {
        "model": "llama3.1",
        "message": {"role": "assistant", "content": content},
        "done": True,
    }


def static_transport(content=None, *, status_code=200, body=None):
    def handler(request):
        if body is not None:
            return httpx.Response(status_code, json=body)
        return httpx.Response(status_code, json=chat_reply(content))
    return httpx.MockTransport(handler)


def refusing_transport():
    def refuse(request):
        raise httpx.ConnectError("Connection refused", request=request)
    return httpx.MockTransport(refuse)


class FakeCompletions:
    def __init__(self, message=None, *, choices=None):
        self.message = message
        self.choices = choices
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if isinstance(self.message, Exception):
            raise self.message
        if self.choices is not None:
            return SimpleNamespace(choices=self.choices)
        return SimpleNamespace(choices=[SimpleNamespace(message=self.message)])


class FakeOpenAI:
    """Just enough of openai.OpenAI for client.chat.completions.create."""

    def __init__(self, message=None, *, choices=None):
        self.completions = FakeCompletions(message, choices=choices)
        self.chat = SimpleNamespace(completions=self.completions)


def tool_call_message(arguments):
    call = SimpleNamespace(
        id="call_1",
        type="function",
        function=SimpleNamespace(name="structured_output", arguments=arguments),
    )
    return SimpleNamespace(role="assistant", content="", tool_calls=[call])


def prose_message(content):
    return SimpleNamespace(role="assistant", content=content, tool_calls=None)
