"""App: coração do back-office: domínio, serviços e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelos de domínio (financiamento, pessoal, clientes, pagamentos, WhatsApp)
- services/: serviços de aplicação (cálculo, financiamentos, pagamentos, mensagens)
- infra/: implementações concretas de IO (stores, cache)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs

Padrão: app executa; api adapta; fsm governa; utils apoia.
"""
