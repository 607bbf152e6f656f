"""
===============================================================================
TARJETA CRC — kunde/interfaces/api/http/routers/kunden.py
===============================================================================

Class/Module:
    Kunden Router

Responsibilities:
    - Exponer endpoints HTTP de lectura y escritura de Kunden.
    - Convertir requests HTTP -> inputs de casos de uso.
    - Traducir KundeError -> RFC7807 (error_mapping).

Collaborators:
    - kunde.application.usecases (Create/Update/Patch/Get/Find/Delete)
    - kunde.container (factories DI)
    - schemas.kunden (DTOs Pydantic)

Notas:
    - Un id sintácticamente inválido se trata como inexistente (404).
    - Escrituras exitosas: 201 + Location (POST), 204 (PUT/PATCH/DELETE).
===============================================================================
"""

from __future__ import annotations

from typing import Dict, List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, Response, status

from kunde.application.usecases import (
    CreateKundeUseCase,
    DeleteKundeUseCase,
    FindKundenUseCase,
    GetKundeUseCase,
    PatchKundeUseCase,
    UpdateKundeUseCase,
)
from kunde.container import (
    get_create_kunde_use_case,
    get_delete_kunde_use_case,
    get_find_kunden_use_case,
    get_get_kunde_use_case,
    get_patch_kunde_use_case,
    get_update_kunde_use_case,
)
from kunde.crosscutting.error_responses import not_found

from ..error_mapping import raise_kunde_error
from ..schemas.kunden import KundeReq, KundeRes, PatchOperationReq

router = APIRouter()


# =============================================================================
# Helpers internos (puros / sin IO)
# =============================================================================


def _parse_kunde_id(raw: str) -> UUID:
    try:
        return UUID(raw)
    except ValueError:
        raise not_found("Kunde", raw) from None


def _query_params(request: Request) -> Dict[str, List[str]]:
    """Query string -> mapa multi-valor, en orden de aparición."""
    params: Dict[str, List[str]] = {}
    for key, value in request.query_params.multi_items():
        params.setdefault(key, []).append(value)
    return params


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/kunden/{kunde_id}", response_model=KundeRes, tags=["kunden"])
def get_kunde(
    kunde_id: str,
    use_case: GetKundeUseCase = Depends(get_get_kunde_use_case),
):
    parsed_id = _parse_kunde_id(kunde_id)
    result = use_case.execute(parsed_id)
    if result.error is not None:
        raise_kunde_error(result.error, kunde_id=parsed_id)
    return KundeRes.from_entity(result.kunde)


@router.get(
    "/kunden",
    response_model=KundeRes | list[KundeRes],
    tags=["kunden"],
)
def find_kunden(
    request: Request,
    use_case: FindKundenUseCase = Depends(get_find_kunden_use_case),
):
    """
    Búsqueda por query string (email, nachname).

    - sin resultados -> 404
    - con email -> un único objeto (no lista)
    """
    params = _query_params(request)
    result = use_case.execute(params)

    if not result.kunden:
        raise not_found("Kunden", request.url.query or "*")

    if "email" in params:
        return KundeRes.from_entity(result.kunden[0])
    return [KundeRes.from_entity(k) for k in result.kunden]


@router.post(
    "/kunden",
    response_model=KundeRes,
    status_code=status.HTTP_201_CREATED,
    tags=["kunden"],
)
def create_kunde(
    req: KundeReq,
    request: Request,
    response: Response,
    use_case: CreateKundeUseCase = Depends(get_create_kunde_use_case),
):
    result = use_case.execute(req.to_entity())
    if result.error is not None:
        raise_kunde_error(result.error)

    created = result.kunde
    response.headers["Location"] = f"{str(request.url).rstrip('/')}/{created.id}"
    return KundeRes.from_entity(created)


@router.put(
    "/kunden/{kunde_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    tags=["kunden"],
)
def update_kunde(
    kunde_id: str,
    req: KundeReq,
    use_case: UpdateKundeUseCase = Depends(get_update_kunde_use_case),
):
    parsed_id = _parse_kunde_id(kunde_id)
    result = use_case.execute(parsed_id, req.to_entity())
    if result.error is not None:
        raise_kunde_error(result.error, kunde_id=parsed_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/kunden/{kunde_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    tags=["kunden"],
)
def patch_kunde(
    kunde_id: str,
    operations: list[PatchOperationReq],
    use_case: PatchKundeUseCase = Depends(get_patch_kunde_use_case),
):
    parsed_id = _parse_kunde_id(kunde_id)
    result = use_case.execute(parsed_id, [op.to_operation() for op in operations])
    if result.error is not None:
        raise_kunde_error(result.error, kunde_id=parsed_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/kunden/{kunde_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    tags=["kunden"],
)
def delete_kunde(
    kunde_id: str,
    use_case: DeleteKundeUseCase = Depends(get_delete_kunde_use_case),
):
    # Delete idempotente: id inválido o inexistente también es 204.
    try:
        parsed_id = UUID(kunde_id)
    except ValueError:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    use_case.execute_by_id(parsed_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/kunden",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    tags=["kunden"],
)
def delete_kunde_by_email(
    email: str | None = Query(None),
    use_case: DeleteKundeUseCase = Depends(get_delete_kunde_use_case),
):
    if email is None:
        raise not_found("Kunde", "email")
    use_case.execute_by_email(email)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
