"""App: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (roteamento de mensagens)
- services/: normalização, matching de flows, store de configuração, IA
- domain/: registros imutáveis lidos da planilha
- infra/: implementações concretas de IO (planilha, LLM, cache, histórico)
- protocols/: contratos/interfaces
- observability/: correlation_id dos logs estruturados

Padrão: app executa; api adapta; config configura; utils apoia.
"""
