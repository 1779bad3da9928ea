"""Endpoints de pessoal (funcionários, agentes e lojistas).

Endpoints:
- GET /api/personnel
- GET /api/personnel/{personnel_id}
- POST /api/personnel
- PATCH /api/personnel/{personnel_id}
- DELETE /api/personnel/{personnel_id}
"""

from __future__ import annotations

import logging
import uuid
from decimal import Decimal

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, ConfigDict, Field

from app.bootstrap import get_personnel_store
from app.domain.personnel import Personnel, PersonnelType
from app.protocols.stores import PersonnelStoreProtocol
from utils.errors import EntityNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter()


class PersonnelCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    type: PersonnelType
    document: str | None = None
    email: str | None = None
    phone: str | None = None
    role: str | None = None
    is_active: bool = True
    commission_rate: Decimal | None = Field(default=None, ge=0, le=100)
    notes: str | None = None


class PersonnelUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=1)
    type: PersonnelType | None = None
    document: str | None = None
    email: str | None = None
    phone: str | None = None
    role: str | None = None
    is_active: bool | None = None
    commission_rate: Decimal | None = Field(default=None, ge=0, le=100)
    notes: str | None = None


async def _require(store: PersonnelStoreProtocol, personnel_id: str) -> Personnel:
    person = await store.get(personnel_id)
    if person is None:
        raise EntityNotFoundError("Pessoal", personnel_id)
    return person


@router.get("")
async def list_personnel(
    store: PersonnelStoreProtocol = Depends(get_personnel_store),
) -> list[Personnel]:
    return await store.list_all()


@router.get("/{personnel_id}")
async def get_personnel(
    personnel_id: str,
    store: PersonnelStoreProtocol = Depends(get_personnel_store),
) -> Personnel:
    return await _require(store, personnel_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_personnel(
    body: PersonnelCreate,
    store: PersonnelStoreProtocol = Depends(get_personnel_store),
) -> Personnel:
    person = Personnel(id=uuid.uuid4().hex, **body.model_dump())
    await store.save(person)
    logger.info(
        "personnel_created",
        extra={"component": "personnel_routes", "personnel_id": person.id, "type": person.type.value},
    )
    return person


@router.patch("/{personnel_id}")
async def update_personnel(
    personnel_id: str,
    body: PersonnelUpdate,
    store: PersonnelStoreProtocol = Depends(get_personnel_store),
) -> Personnel:
    current = await _require(store, personnel_id)
    updated = Personnel.model_validate(
        {**current.model_dump(), **body.model_dump(exclude_unset=True)}
    )
    await store.save(updated)
    return updated


@router.delete("/{personnel_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_personnel(
    personnel_id: str,
    store: PersonnelStoreProtocol = Depends(get_personnel_store),
) -> Response:
    if not await store.delete(personnel_id):
        raise EntityNotFoundError("Pessoal", personnel_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
