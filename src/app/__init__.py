"""App: orquestração e infraestrutura do serviço.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelo do Card e regras de validação
- infra/: implementações concretas de IO (MongoDB, provedores de IA)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas via logs estruturados

Padrão: app executa; api adapta; ai decide; utils apoia.
"""
