"""Testes da tradução de exceções para HTTP."""

from __future__ import annotations

import json
from types import SimpleNamespace

import pytest
from pydantic import BaseModel, ValidationError
from starlette.requests import Request

from api.routes.errors import (
    domain_error_handler,
    infrastructure_error_handler,
    status_for_domain_error,
    value_error_handler,
)
from utils.errors import (
    ConnectionNotReadyError,
    DailyLimitExceededError,
    DomainError,
    DuplicateCustomerError,
    EntityNotFoundError,
    GatewayTransportError,
    InvalidTransitionError,
    MessageDeliveryError,
    PaymentNotCancellableError,
    PaymentNotFoundError,
)


def _request(path: str = "/api/payments") -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "path": path,
        "raw_path": path.encode(),
        "query_string": b"",
        "headers": [],
        "app": SimpleNamespace(state=SimpleNamespace()),
    }
    return Request(scope)


@pytest.mark.parametrize(
    ("exc", "expected"),
    [
        (EntityNotFoundError("Financiamento", "f1"), 404),
        (PaymentNotFoundError("pay_1"), 404),
        (InvalidTransitionError("analysis", "paid"), 409),
        (PaymentNotCancellableError("pay_1", reason="already_cancelled"), 409),
        (DuplicateCustomerError("cus_1"), 409),
        (ConnectionNotReadyError("inativa"), 400),
        (DailyLimitExceededError(1000), 429),
        (DomainError("genérico"), 400),
    ],
)
def test_status_for_domain_error(exc: DomainError, expected: int) -> None:
    assert status_for_domain_error(exc) == expected


@pytest.mark.asyncio
async def test_domain_error_body() -> None:
    response = await domain_error_handler(_request(), DailyLimitExceededError(1000))

    assert response.status_code == 429
    assert "error" in json.loads(response.body)


@pytest.mark.asyncio
async def test_domain_handler_reraises_other_errors() -> None:
    with pytest.raises(RuntimeError):
        await domain_error_handler(_request(), RuntimeError("boom"))


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "exc", [GatewayTransportError("Asaas indisponível"), MessageDeliveryError("falhou")]
)
async def test_infrastructure_errors_are_bad_gateway(exc: Exception) -> None:
    response = await infrastructure_error_handler(_request(), exc)

    assert response.status_code == 502
    assert json.loads(response.body) == {"error": str(exc)}


@pytest.mark.asyncio
async def test_value_errors() -> None:
    class Body(BaseModel):
        value: int

    with pytest.raises(ValidationError) as exc_info:
        Body.model_validate({"value": "x"})

    invalid = await value_error_handler(_request(), exc_info.value)
    plain = await value_error_handler(_request(), ValueError("Mensagem vazia"))

    assert invalid.status_code == 422
    assert plain.status_code == 400
    assert json.loads(plain.body) == {"error": "Mensagem vazia"}
