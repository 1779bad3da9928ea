"""API: camada de borda: rotas HTTP e adapters de gateways externos.

Subpastas:
- connectors/: adapters HTTP (Asaas, WPPConnect)
- routes/: endpoints HTTP do back-office

NÃO PODE conter: regras de status, cálculo de financiamento, orquestração.
"""
