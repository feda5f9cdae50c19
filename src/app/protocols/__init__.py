"""Protocolos e contratos dos colaboradores externos do core."""

from .chat_history import ChatHistoryProtocol
from .completion import CompletionServiceProtocol
from .sheet_source import SheetSourceProtocol

__all__ = [
    "ChatHistoryProtocol",
    "CompletionServiceProtocol",
    "SheetSourceProtocol",
]
