import pytest
from pydantic import ValidationError

from app.config import Settings
from app.nlu.generator import (
    GeminiChatClient,
    GroqChatClient,
    build_chat_client,
)

HISTORY = [
    {"role": "user", "parts": [{"text": "Hello"}]},
    {"role": "model", "parts": [{"text": "Hi! How can I help?"}]},
]


def test_groq_messages_map_model_to_assistant():
    messages = GroqChatClient.build_messages(HISTORY, "Book a demo", "SYSTEM")
    assert messages == [
        {"role": "system", "content": "SYSTEM"},
        {"role": "user", "content": "Hello"},
        {"role": "assistant", "content": "Hi! How can I help?"},
        {"role": "user", "content": "Book a demo"},
    ]


@pytest.mark.asyncio
async def test_groq_send_message_uses_generation_limits(mocker):
    client = GroqChatClient("key", "llama", max_output_tokens=300, temperature=0.7)
    completion = mocker.MagicMock()
    completion.choices[0].message.content = "Sure thing"
    create = mocker.patch.object(
        client._client.chat.completions,
        "create",
        new=mocker.AsyncMock(return_value=completion),
    )

    reply = await client.send_message(HISTORY, "Book a demo", "SYSTEM")

    assert reply == "Sure thing"
    kwargs = create.call_args.kwargs
    assert kwargs["model"] == "llama"
    assert kwargs["max_tokens"] == 300
    assert kwargs["temperature"] == 0.7


@pytest.mark.asyncio
async def test_gemini_send_message(mocker):
    mocker.patch("app.nlu.generator.genai.configure")
    model_cls = mocker.patch("app.nlu.generator.genai.GenerativeModel")
    chat = model_cls.return_value.start_chat.return_value
    chat.send_message_async = mocker.AsyncMock(return_value=mocker.MagicMock(text="Hello!"))

    client = GeminiChatClient("key", "gemini-1.5-flash", max_output_tokens=300, temperature=0.7)
    reply = await client.send_message(HISTORY, "Hi", "SYSTEM")

    assert reply == "Hello!"
    model_cls.assert_called_once_with(model_name="gemini-1.5-flash", system_instruction="SYSTEM")
    model_cls.return_value.start_chat.assert_called_once_with(history=HISTORY)
    config = chat.send_message_async.call_args.kwargs["generation_config"]
    assert config.max_output_tokens == 300
    assert config.temperature == 0.7


def test_build_chat_client_selects_provider(mocker):
    mocker.patch("app.nlu.generator.genai.configure")

    gemini = build_chat_client(Settings(LLM_PROVIDER="gemini", GEMINI_API_KEY="g"))
    groq = build_chat_client(Settings(LLM_PROVIDER="groq", GROQ_API_KEY="q"))

    assert isinstance(gemini, GeminiChatClient)
    assert isinstance(groq, GroqChatClient)


def test_settings_require_key_for_selected_provider():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, LLM_PROVIDER="groq", GROQ_API_KEY=None)
    with pytest.raises(ValidationError):
        Settings(_env_file=None, LLM_PROVIDER="gemini", GEMINI_API_KEY="")
