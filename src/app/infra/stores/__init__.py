"""Implementações de stores."""

from app.infra.stores.memory_chat_history import MemoryChatHistory

__all__ = ["MemoryChatHistory"]
