"""API: camada de borda HTTP.

Responsabilidades:
- Receber mensagens de texto já extraídas do canal
- Validar payloads (pydantic)
- Delegar para use cases em app/
- Expor health e operações administrativas do cache

NÃO PODE conter: regras de matching, acesso direto à planilha.
"""
