"""
===============================================================================
TARJETA CRC — domain/patching.py
===============================================================================

Módulo:
    Aplicación de operaciones PATCH sobre un Kunde

Responsabilidades:
    - Representar una operación de edición {op, path, value} como dato puro.
    - Aplicar un lote de operaciones en tres fases fijas:
        1) replace  (en orden de lista, último gana por path)
        2) add      (append a interessen, sin deduplicar)
        3) remove   (borra TODAS las ocurrencias del token)
    - Resolver tokens de interés; token desconocido => UnknownEnumTokenError.

Colaboradores:
    - domain.entities.Kunde
    - domain.value_objects.InteresseType
    - domain.errors.UnknownEnumTokenError

Reglas:
    - Las fases se agrupan por tipo de op; la posición en la lista sólo
      ordena dentro de cada fase.
    - replace sobre un path no reconocido es un no-op (política laxa).
    - add/remove sobre paths distintos de /interessen también se ignoran.
    - Nunca muta el Kunde de entrada; cada fase devuelve un Kunde nuevo.
    - Todo-o-nada: cada fase add/remove resuelve todos sus tokens antes de
      tocar la colección; el primer token inválido corta el apply completo.
    - No valida constraints (eso es trabajo de domain.validation).
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Iterable, List, Mapping, Sequence, Tuple

from .entities import Kunde
from .errors import UnknownEnumTokenError
from .value_objects import InteresseType

NACHNAME_PATH = "/nachname"
EMAIL_PATH = "/email"
INTERESSEN_PATH = "/interessen"


class PatchOp(str, Enum):
    REPLACE = "replace"
    ADD = "add"
    REMOVE = "remove"


@dataclass(frozen=True)
class PatchOperation:
    """Ej: {"op": "replace", "path": "/email", "value": "neu@hska.de"}."""

    op: PatchOp
    path: str
    value: str


_REPLACERS: Mapping[str, Callable[[Kunde, str], Kunde]] = {
    NACHNAME_PATH: lambda kunde, value: replace(kunde, nachname=value),
    EMAIL_PATH: lambda kunde, value: replace(kunde, email=value),
}


def apply_patch(kunde: Kunde, operations: Iterable[PatchOperation]) -> Kunde:
    """
    Aplica el lote completo: replace -> add -> remove.

    Raises:
        UnknownEnumTokenError: si add/remove sobre /interessen trae un token
            fuera del enum. Ningún resultado parcial sale de esta función.
    """
    ops: Tuple[PatchOperation, ...] = tuple(operations)

    patched = apply_replace_ops(kunde, _select(ops, PatchOp.REPLACE))
    patched = apply_add_ops(patched, _select(ops, PatchOp.ADD))
    return apply_remove_ops(patched, _select(ops, PatchOp.REMOVE))


def apply_replace_ops(kunde: Kunde, ops: Sequence[PatchOperation]) -> Kunde:
    patched = kunde
    for op in ops:
        replacer = _REPLACERS.get(op.path)
        if replacer is None:
            continue
        patched = replacer(patched, op.value)
    return patched


def apply_add_ops(kunde: Kunde, ops: Sequence[PatchOperation]) -> Kunde:
    added = _resolve_interessen(ops)
    if not added:
        return kunde
    return kunde.with_interessen([*(kunde.interessen or ()), *added])


def apply_remove_ops(kunde: Kunde, ops: Sequence[PatchOperation]) -> Kunde:
    removed = set(_resolve_interessen(ops))
    if not removed or kunde.interessen is None:
        return kunde
    return kunde.with_interessen(i for i in kunde.interessen if i not in removed)


def _select(ops: Sequence[PatchOperation], phase: PatchOp) -> List[PatchOperation]:
    return [op for op in ops if op.op == phase]


def _resolve_interessen(ops: Sequence[PatchOperation]) -> List[InteresseType]:
    resolved: List[InteresseType] = []
    for op in ops:
        if op.path != INTERESSEN_PATH:
            continue
        interesse = InteresseType.build(op.value)
        if interesse is None:
            raise UnknownEnumTokenError(op.value)
        resolved.append(interesse)
    return resolved
