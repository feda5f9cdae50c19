"""Implementações concretas de IO para IA."""

from app.infra.ai.openai_completion_client import OpenAICompletionClient

__all__ = ["OpenAICompletionClient"]
