"""Endpoints do cadastro interno de clientes.

Endpoints:
- GET /api/customers
- GET /api/customers/{customer_id}
- POST /api/customers
"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field

from app.bootstrap import get_customer_store
from app.domain.customer import Customer
from app.protocols.stores import CustomerStoreProtocol
from utils.errors import EntityNotFoundError

router = APIRouter()


class CustomerCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    email: str | None = None
    phone: str | None = None
    document: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None


@router.get("")
async def list_customers(
    store: CustomerStoreProtocol = Depends(get_customer_store),
) -> list[Customer]:
    return await store.list_all()


@router.get("/{customer_id}")
async def get_customer(
    customer_id: str,
    store: CustomerStoreProtocol = Depends(get_customer_store),
) -> Customer:
    customer = await store.get(customer_id)
    if customer is None:
        raise EntityNotFoundError("Cliente", customer_id)
    return customer


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_customer(
    body: CustomerCreate,
    store: CustomerStoreProtocol = Depends(get_customer_store),
) -> Customer:
    customer = Customer(id=uuid.uuid4().hex, **body.model_dump())
    await store.save(customer)
    return customer
