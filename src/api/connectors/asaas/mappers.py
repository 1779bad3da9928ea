"""Conversão entre registros internos e registros do Asaas."""

from __future__ import annotations

import re

from app.domain.customer import Customer
from app.domain.payments import GatewayCustomer, GatewayPayment
from utils.digits import only_digits

# "Rua das Flores, 123" → ("Rua das Flores", "123")
_ADDRESS_WITH_NUMBER = re.compile(r"^(?P<street>.*?)(?:,\s*(?P<number>\d+))?\s*$")


def split_address(address: str | None) -> tuple[str | None, str | None]:
    """Separa logradouro e número quando o endereço termina em ', <número>'."""
    if not address or not address.strip():
        return None, None
    match = _ADDRESS_WITH_NUMBER.match(address.strip())
    if match is None:
        return address.strip(), None
    street = match.group("street").strip() or address.strip()
    return street, match.group("number")


def format_customer_for_gateway(customer: Customer) -> GatewayCustomer:
    """Monta o cliente do gateway a partir do cadastro interno.

    Documento e CEP seguem só com dígitos; a cidade vai em `province`.
    """
    street, number = split_address(customer.address)
    return GatewayCustomer(
        name=customer.name,
        cpf_cnpj=only_digits(customer.document) or None,
        email=customer.email or None,
        phone=customer.phone or None,
        mobile_phone=customer.phone or None,
        address=street,
        address_number=number,
        province=customer.city or None,
        postal_code=only_digits(customer.zip_code) or None,
        external_reference=f"customer_{customer.id}",
    )


def enrich_payment_with_customer(
    payment: GatewayPayment,
    customer: GatewayCustomer | Customer,
) -> GatewayPayment:
    """Anexa nome e documento do cliente à cobrança."""
    document = (
        customer.cpf_cnpj if isinstance(customer, GatewayCustomer) else customer.document
    )
    return payment.model_copy(
        update={"customer_name": customer.name, "customer_document": document}
    )
