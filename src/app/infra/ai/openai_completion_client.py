"""Cliente de completions via API compatível com OpenAI (OpenAI, Groq)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from openai import AsyncOpenAI

from app.protocols.completion import CompletionServiceProtocol
from config.settings.ai import OpenAISettings, get_openai_settings
from utils.errors import CompletionError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.sheet_records import ChatMessage, PromptSettings

logger = logging.getLogger(__name__)

_COMPONENT = "openai_completion_client"


class OpenAICompletionClient(CompletionServiceProtocol):
    """Gera respostas com chat completions.

    Parâmetros do modelo vindos da aba de prompts (`model`, `temperature`,
    `max_tokens`) prevalecem sobre os defaults das settings.
    """

    __slots__ = ("_client", "_settings")

    def __init__(
        self,
        *,
        settings: OpenAISettings | None = None,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self._settings = settings or get_openai_settings()
        if client is not None:
            self._client = client
        else:
            self._client = AsyncOpenAI(
                api_key=self._settings.api_key,
                base_url=self._settings.base_url or None,
                timeout=self._settings.timeout_seconds,
                max_retries=self._settings.max_retries,
            )

    async def generate(
        self,
        messages: Sequence[ChatMessage],
        settings: PromptSettings | None = None,
    ) -> str:
        params = self._request_params(settings or {})
        try:
            response = await self._client.chat.completions.create(
                messages=[message.as_dict() for message in messages],
                **params,
            )
        except Exception as exc:
            logger.warning(
                "completion_request_failed",
                extra={
                    "component": _COMPONENT,
                    "action": "generate",
                    "result": "error",
                    "model": params["model"],
                    "error_type": type(exc).__name__,
                },
            )
            raise CompletionError(type(exc).__name__) from exc

        content = _extract_content(response)
        if not content:
            logger.warning(
                "completion_empty_response",
                extra={"component": _COMPONENT, "action": "generate", "result": "empty"},
            )
            raise CompletionError("empty_response")
        return content.strip()

    def _request_params(self, settings: PromptSettings) -> dict[str, Any]:
        model = settings.get("model")
        temperature = settings.get("temperature")
        max_tokens = settings.get("max_tokens")
        return {
            "model": model if isinstance(model, str) and model else self._settings.model,
            "temperature": (
                float(temperature)
                if isinstance(temperature, int | float)
                else self._settings.temperature
            ),
            "max_tokens": (
                int(max_tokens) if isinstance(max_tokens, int | float) else self._settings.max_tokens
            ),
        }


def _extract_content(response: Any) -> str | None:
    try:
        return response.choices[0].message.content if response.choices else None
    except (AttributeError, IndexError):
        return None
