"""Exceções de domínio e de infraestrutura do back-office."""

from __future__ import annotations


class DomainError(Exception):
    """Base para falhas de regra de negócio exibíveis ao operador."""


class EntityNotFoundError(DomainError):
    """Registro interno inexistente."""

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} não encontrado: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class InvalidTransitionError(DomainError):
    """Transição de status fora do grafo permitido."""

    def __init__(self, from_status: str, to_status: str) -> None:
        super().__init__(f"Transição inválida: {from_status} → {to_status}")
        self.from_status = from_status
        self.to_status = to_status


class DuplicateCustomerError(DomainError):
    """Já existe cliente com o mesmo CPF/CNPJ no gateway."""

    def __init__(self, customer_id: str | None) -> None:
        super().__init__("Já existe um cliente com este CPF/CNPJ")
        self.customer_id = customer_id


class PaymentNotFoundError(DomainError):
    """Cobrança inexistente no gateway."""

    def __init__(self, payment_id: str) -> None:
        super().__init__(f"Cobrança não encontrada: {payment_id}")
        self.payment_id = payment_id


class PaymentNotCancellableError(DomainError):
    """Cobrança inexistente ou já cancelada.

    `reason` é "not_found" ou "already_cancelled".
    """

    def __init__(self, payment_id: str, reason: str) -> None:
        if reason == "not_found":
            message = f"Cobrança não encontrada: {payment_id}"
        else:
            message = f"Cobrança já cancelada ou não pode ser removida: {payment_id}"
        super().__init__(message)
        self.payment_id = payment_id
        self.reason = reason


class ConnectionNotReadyError(DomainError):
    """Sessão de WhatsApp não está conectada."""


class DailyLimitExceededError(DomainError):
    """Limite diário de envio da conexão atingido."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Limite diário de {limit} mensagens atingido")
        self.limit = limit


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class GatewayTransportError(InfrastructureError):
    """Falha de rede, timeout ou 5xx ao acessar gateway externo."""


class GatewayRequestError(InfrastructureError):
    """Gateway recusou a requisição (4xx com corpo de erro)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code


class MessageDeliveryError(InfrastructureError):
    """Gateway de mensagens não confirmou o envio."""
