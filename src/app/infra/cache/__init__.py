"""Caches em memória da configuração remota."""

from app.infra.cache.ttl_cache import CacheEntry, TTLCache

__all__ = ["CacheEntry", "TTLCache"]
