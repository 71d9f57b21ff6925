"""LLMService: a single chat-completion attempt against a named model.

Builds a two-message exchange (system instruction + raw user text),
asks the model for one low-temperature completion with a bounded output
length, and returns the trimmed text. Every kind of failure, including
an empty answer, surfaces as ``ModelInvocationError``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Optional

from langchain_core.prompts import ChatPromptTemplate
from langchain_google_genai import ChatGoogleGenerativeAI

from mailrewrite.config import Config
from mailrewrite.errors import ModelInvocationError

logger = logging.getLogger(__name__)

REWRITE_PROMPT = ChatPromptTemplate.from_messages(
    [
        ("system", "{system_prompt}"),
        ("human", "{text}"),
    ]
)

ChatModelFactory = Callable[[str], Any]


def extract_content(resp: Any) -> str:
    """Return the trimmed text of a chat response, or "" when absent."""
    content = getattr(resp, "content", resp)
    if content is None:
        return ""
    if isinstance(content, list):
        # Gemini may answer with a list of parts
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and isinstance(part.get("text"), str):
                parts.append(part["text"])
        content = "".join(parts)
    if not isinstance(content, str):
        return ""
    return content.strip()


class LLMService:
    def __init__(self, cfg: Config = Config, chat_model_factory: Optional[ChatModelFactory] = None):
        self.cfg = cfg
        self.timeout = cfg.LLM_TIMEOUT_SECONDS
        self._factory = chat_model_factory or self._default_chat_model

    def _default_chat_model(self, model_name: str) -> ChatGoogleGenerativeAI:
        # Provider-side retries are off; the fallback chain is the only retry
        return ChatGoogleGenerativeAI(
            model=model_name,
            temperature=self.cfg.LLM_TEMPERATURE,
            max_output_tokens=self.cfg.LLM_MAX_OUTPUT_TOKENS,
            timeout=self.cfg.LLM_TIMEOUT_SECONDS,
            max_retries=0,
            google_api_key=self.cfg.GOOGLE_API_KEY,
        )

    async def ainvoke(self, model_name: str, system_prompt: str, user_text: str) -> str:
        messages = REWRITE_PROMPT.format_messages(system_prompt=system_prompt, text=user_text)
        try:
            llm = self._factory(model_name)
            resp = await asyncio.wait_for(llm.ainvoke(messages), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise ModelInvocationError(model_name, f"Model {model_name} timed out after {self.timeout:g}s") from e
        except Exception as e:
            raise ModelInvocationError(model_name, str(e) or e.__class__.__name__) from e

        result = extract_content(resp)
        if not result:
            raise ModelInvocationError(model_name, "No content returned from model")
        return result
