"""Use cases de mensagens de texto."""

from .route_inbound_message import RouteInboundMessageUseCase, RouteResult

__all__ = ["RouteInboundMessageUseCase", "RouteResult"]
