"""Connectors: adapters de borda para APIs externas.

Estrutura:
- http_base.py: cliente HTTP compartilhado (httpx, sem retry)
- asaas/: gateway de pagamentos (modos live e demo)
- wppconnect/: servidor de automação de WhatsApp
"""

__all__: list[str] = []
