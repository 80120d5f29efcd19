import pytest
from pydantic import ValidationError

from app.agents.schemas import (
    NPC_NAME_SCHEMA,
    ChatMessage,
    Conversation,
    EndpointConfig,
    NpcName,
    SamplingOptions,
    require_properties,
    schema_for,
)
from app.settings import Settings


def test_conversation_is_system_then_user():
    convo = Conversation.build("You are a bard.", "Sing.")
    assert convo.to_payload() == [
        {"role": "system", "content": "You are a bard."},
        {"role": "user", "content": "Sing."},
    ]


@pytest.mark.parametrize("system,user", [("", "hi"), ("sys", "   ")])
def test_conversation_rejects_empty_text(system, user):
    with pytest.raises(ValueError):
        Conversation.build(system, user)


def test_conversation_rejects_wrong_order():
    with pytest.raises(ValidationError):
        Conversation(messages=[
            ChatMessage(role="user", content="a"),
            ChatMessage(role="system", content="b"),
        ])


def test_sampling_options_only_emits_set_fields():
    assert SamplingOptions().to_options() == {}
    opts = SamplingOptions(temperature=1.5, top_k=40)
    assert opts.to_options() == {"temperature": 1.5, "top_k": 40}


def test_sampling_options_bounds():
    with pytest.raises(ValidationError):
        SamplingOptions(top_p=1.5)
    with pytest.raises(ValidationError):
        SamplingOptions(temperature=-0.1)


def test_endpoint_config_from_settings():
    s = Settings(ollama_base_url="http://gpu-box:11434/", ollama_model="mistral", request_timeout=30)
    cfg = EndpointConfig.from_settings(s)
    assert cfg.base_url == "http://gpu-box:11434"
    assert cfg.model == "mistral"
    assert cfg.timeout == 30

    tools_cfg = EndpointConfig.from_settings(s, openai_compatible=True)
    assert tools_cfg.base_url == s.ollama_openai_base_url.rstrip("/")


def test_endpoint_config_is_frozen():
    cfg = EndpointConfig(base_url="http://x", model="m")
    with pytest.raises(ValidationError):
        cfg.model = "other"


def test_schema_for_npc_name_matches_declared_schema():
    schema = schema_for(NpcName)
    assert set(schema["properties"]) == set(NPC_NAME_SCHEMA["properties"])
    assert sorted(schema["required"]) == ["kind", "name"]
    assert schema["properties"]["name"]["type"] == "string"


def test_require_properties():
    with pytest.raises(ValueError):
        require_properties({"type": "object", "properties": {"name": {"type": "string"}}})
    with pytest.raises(ValueError):
        require_properties({"type": "object", "properties": {}, "required": ["name"]})
    assert require_properties(NPC_NAME_SCHEMA) is NPC_NAME_SCHEMA


def test_npc_name_forbids_extra_keys():
    with pytest.raises(ValidationError):
        NpcName(name="Gimli", kind="Dwarf", age=139)
