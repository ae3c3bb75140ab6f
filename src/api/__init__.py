"""API: camada de borda HTTP.

Responsabilidades:
- Receber requests (cards, assistente, health)
- Validar presença dos campos obrigatórios
- Traduzir erros de domínio/infra em `{"error": mensagem}`

Subpastas:
- routes/: endpoints HTTP, dependências e error handlers

NÃO PODE conter: acesso direto ao banco ou a provedores de IA.
"""
