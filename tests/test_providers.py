from types import SimpleNamespace

import pytest

import resume_parser.api.llm.factory as factory
from resume_parser.api.llm import (
    AnthropicProvider,
    GeminiProvider,
    OpenAIProvider,
    ProviderFamily,
    get_llm_provider,
)
from resume_parser.lib.errors import (
    ConfigurationError,
    InvalidResponseError,
    UnsupportedProviderError,
)
from resume_parser.lib.prompts import BASE_PROMPT

from conftest import FakeOpenAIClient


# --- dispatch ----------------------------------------------------------------


@pytest.mark.parametrize(
    "model, family",
    [
        ("gpt-4o", ProviderFamily.OPENAI),
        ("o3-mini", ProviderFamily.OPENAI),
        ("claude-3-5-sonnet-latest", ProviderFamily.ANTHROPIC),
        ("Claude-opus", ProviderFamily.ANTHROPIC),
        ("gemini-2.0-flash", ProviderFamily.GEMINI),
    ],
)
def test_family_from_model_prefix(model, family):
    assert ProviderFamily.from_model(model) is family


def test_unknown_prefix_fails_before_any_client_is_built(settings, monkeypatch):
    """An unrecognized model must fail fast, without constructing a client."""
    constructed = []

    def refuse(*args, **kwargs):
        constructed.append(args)
        raise AssertionError("provider should not be constructed")

    monkeypatch.setattr(
        factory,
        "PROVIDERS",
        {family: refuse for family in ProviderFamily},
    )
    bad = settings.model_copy(update={"llm_model": "foo-123"})

    with pytest.raises(UnsupportedProviderError) as exc_info:
        get_llm_provider(bad)

    assert exc_info.value.model == "foo-123"
    assert constructed == []


def test_factory_builds_provider_for_family(settings):
    provider = get_llm_provider(settings.model_copy(update={"llm_model": "claude-3-5-sonnet-latest"}))

    assert isinstance(provider, AnthropicProvider)
    assert provider.model == "claude-3-5-sonnet-latest"


def test_missing_api_key_raises_configuration_error(settings):
    no_key = settings.model_copy(update={"openai_api_key": ""})

    with pytest.raises(ConfigurationError):
        get_llm_provider(no_key)


# --- OpenAI ------------------------------------------------------------------


def test_openai_prompt_and_send(settings):
    client = FakeOpenAIClient(output_text='{"summary": ""}')
    provider = OpenAIProvider(settings, client=client)

    prompt = provider.construct_prompt("Jane Doe")
    text = provider.send(prompt)

    assert prompt == {"model": "gpt-4o", "instructions": BASE_PROMPT, "input": "Jane Doe"}
    assert client.calls == [prompt]
    assert text == '{"summary": ""}'


def test_openai_error_response_is_invalid(settings):
    client = FakeOpenAIClient(output_text="partial", error=SimpleNamespace(code="server_error"))
    provider = OpenAIProvider(settings, client=client)

    with pytest.raises(InvalidResponseError):
        provider.send(provider.construct_prompt("Jane"))


def test_openai_empty_output_is_invalid(settings):
    provider = OpenAIProvider(settings, client=FakeOpenAIClient(output_text=""))

    assert provider.validate_response(provider.client.response) is False


# --- Anthropic ---------------------------------------------------------------


def _anthropic_provider(settings, response):
    client = SimpleNamespace(calls=[])

    def create(**kwargs):
        client.calls.append(kwargs)
        return response

    client.messages = SimpleNamespace(create=create)
    return AnthropicProvider(
        settings.model_copy(update={"llm_model": "claude-3-5-sonnet-latest"}), client=client
    )


def test_anthropic_concatenates_text_blocks_in_order(settings):
    response = SimpleNamespace(
        type="message",
        stop_reason="end_turn",
        content=[
            SimpleNamespace(type="text", text="A"),
            SimpleNamespace(type="image"),
            SimpleNamespace(type="text", text="B"),
        ],
    )
    provider = _anthropic_provider(settings, response)

    assert provider.validate_response(response)
    assert provider.get_response_text(response) == "AB"


def test_anthropic_prompt_inlines_resume_text(settings):
    provider = _anthropic_provider(settings, None)

    prompt = provider.construct_prompt("Jane Doe")

    assert prompt["model"] == "claude-3-5-sonnet-latest"
    assert prompt["max_tokens"] == 2048
    assert prompt["messages"] == [
        {"role": "user", "content": BASE_PROMPT + "\nHere is the resume data:\nJane Doe"}
    ]


def test_anthropic_response_without_text_raises(settings):
    response = SimpleNamespace(type="message", content=[SimpleNamespace(type="tool_use")])
    provider = _anthropic_provider(settings, response)

    with pytest.raises(InvalidResponseError):
        provider.send(provider.construct_prompt("Jane"))

    assert len(provider.client.calls) == 1


# --- Gemini ------------------------------------------------------------------


def _gemini_response(parts, block_reason=None):
    return SimpleNamespace(
        prompt_feedback=SimpleNamespace(block_reason=block_reason) if block_reason else None,
        candidates=[SimpleNamespace(content=SimpleNamespace(parts=parts))],
    )


def _gemini_provider(settings, response):
    client = SimpleNamespace(calls=[])

    def generate_content(**kwargs):
        client.calls.append(kwargs)
        return response

    client.models = SimpleNamespace(generate_content=generate_content)
    return GeminiProvider(settings.model_copy(update={"llm_model": "gemini-2.0-flash"}), client=client)


def test_gemini_sends_constructed_prompt(settings):
    response = _gemini_response([SimpleNamespace(text='{"a": ', thought=False), SimpleNamespace(text="1}")])
    provider = _gemini_provider(settings, response)

    prompt = provider.construct_prompt("Jane Doe")
    text = provider.send(prompt)

    call = provider.client.calls[0]
    assert call["model"] == "gemini-2.0-flash"
    assert call["contents"] == "Jane Doe"
    assert call["config"].system_instruction == BASE_PROMPT
    assert text == '{"a": 1}'


def test_gemini_skips_thought_parts(settings):
    response = _gemini_response(
        [SimpleNamespace(text="thinking...", thought=True), SimpleNamespace(text="{}", thought=None)]
    )
    provider = _gemini_provider(settings, response)

    assert provider.get_response_text(response) == "{}"


def test_gemini_blocked_prompt_is_invalid(settings):
    response = _gemini_response([SimpleNamespace(text="{}")], block_reason="SAFETY")
    provider = _gemini_provider(settings, response)

    with pytest.raises(InvalidResponseError):
        provider.send(provider.construct_prompt("Jane"))
