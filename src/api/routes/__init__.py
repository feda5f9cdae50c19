"""Rotas HTTP da API.

- routes/health/: liveness e readiness
- routes/messages/: roteamento de mensagens (flow ou IA)
- routes/admin/: inspeção e invalidação do cache de configuração
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
