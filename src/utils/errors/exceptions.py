"""Exceções de domínio para falhas de configuração e infraestrutura."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class SourceUnavailableError(InfrastructureError):
    """Falha ao ler dados da planilha (rede, auth, quota)."""

    def __init__(self, range_a1: str, reason: str = "") -> None:
        self.range_a1 = range_a1
        self.reason = reason
        super().__init__(f"Fonte indisponível para {range_a1}: {reason}".rstrip(": "))


class CompletionError(InfrastructureError):
    """Falha ao gerar resposta no provedor de completions."""


class ConfigurationError(RuntimeError):
    """Base para configuração inválida detectada no startup."""


class MalformedCredentialsError(ConfigurationError):
    """Credenciais ausentes ou ilegíveis. Fatal: não recuperável em runtime."""
