"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConnectionNotReadyError,
    DailyLimitExceededError,
    DomainError,
    DuplicateCustomerError,
    EntityNotFoundError,
    GatewayRequestError,
    GatewayTransportError,
    InfrastructureError,
    InvalidTransitionError,
    MessageDeliveryError,
    PaymentNotCancellableError,
    PaymentNotFoundError,
)

__all__ = [
    "ConnectionNotReadyError",
    "DailyLimitExceededError",
    "DomainError",
    "DuplicateCustomerError",
    "EntityNotFoundError",
    "GatewayRequestError",
    "GatewayTransportError",
    "InfrastructureError",
    "InvalidTransitionError",
    "MessageDeliveryError",
    "PaymentNotCancellableError",
    "PaymentNotFoundError",
]
