"""
Chat model clients.

Both providers take the normalized history ({"role": "user" | "model",
"parts": [{"text": ...}]}), the new user message and the system prompt, and
return the generated reply text. Upstream errors are not caught here; the
chat route classifies them.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List

import google.generativeai as genai
from groq import AsyncGroq

from app.config import Settings
from app.nlu.prompts import SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class ChatClient(ABC):
    def __init__(
        self,
        model_name: str,
        *,
        max_output_tokens: int = 300,
        temperature: float = 0.7,
    ) -> None:
        self.model_name = model_name
        self.max_output_tokens = max_output_tokens
        self.temperature = temperature

    @abstractmethod
    async def send_message(
        self,
        history: List[Dict[str, Any]],
        message: str,
        system_prompt: str = SYSTEM_PROMPT,
    ) -> str:
        raise NotImplementedError


class GeminiChatClient(ChatClient):
    """Google Gemini via google-generativeai chat sessions."""

    def __init__(self, api_key: str, model_name: str, **kwargs) -> None:
        super().__init__(model_name, **kwargs)
        genai.configure(api_key=api_key)

    async def send_message(
        self,
        history: List[Dict[str, Any]],
        message: str,
        system_prompt: str = SYSTEM_PROMPT,
    ) -> str:
        model = genai.GenerativeModel(
            model_name=self.model_name,
            system_instruction=system_prompt,
        )
        chat = model.start_chat(history=history)

        logger.info(
            "[GEMINI] Sending message (history=%s turns, model=%s)",
            len(history),
            self.model_name,
        )
        response = await chat.send_message_async(
            message,
            generation_config=genai.GenerationConfig(
                max_output_tokens=self.max_output_tokens,
                temperature=self.temperature,
            ),
        )
        return response.text


class GroqChatClient(ChatClient):
    """Groq chat completions; `model` turns are sent as `assistant` messages."""

    def __init__(self, api_key: str, model_name: str, **kwargs) -> None:
        super().__init__(model_name, **kwargs)
        self._client = AsyncGroq(api_key=api_key)

    @staticmethod
    def build_messages(
        history: List[Dict[str, Any]], message: str, system_prompt: str
    ) -> List[Dict[str, str]]:
        messages = [{"role": "system", "content": system_prompt}]
        for turn in history:
            role = "assistant" if turn["role"] == "model" else "user"
            text = "".join(part.get("text", "") for part in turn["parts"])
            messages.append({"role": role, "content": text})
        messages.append({"role": "user", "content": message})
        return messages

    async def send_message(
        self,
        history: List[Dict[str, Any]],
        message: str,
        system_prompt: str = SYSTEM_PROMPT,
    ) -> str:
        logger.info(
            "[GROQ] Sending message (history=%s turns, model=%s)",
            len(history),
            self.model_name,
        )
        completion = await self._client.chat.completions.create(
            model=self.model_name,
            messages=self.build_messages(history, message, system_prompt),
            temperature=self.temperature,
            max_tokens=self.max_output_tokens,
        )
        return completion.choices[0].message.content or ""


def build_chat_client(config: Settings) -> ChatClient:
    """Create the client for the configured LLM_PROVIDER."""
    common = {
        "max_output_tokens": config.LLM_MAX_OUTPUT_TOKENS,
        "temperature": config.LLM_TEMPERATURE,
    }
    if config.LLM_PROVIDER == "groq":
        return GroqChatClient(config.GROQ_API_KEY, config.GROQ_MODEL_NAME, **common)
    return GeminiChatClient(config.GEMINI_API_KEY, config.GEMINI_MODEL_NAME, **common)
