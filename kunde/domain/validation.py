"""
===============================================================================
TARJETA CRC — domain/validation.py
===============================================================================

Módulo:
    Validador de constraints declarativos de Kunde

Responsabilidades:
    - Evaluar TODOS los constraints (sin cortar en la primera falla).
    - Producir exactamente una FieldViolation por constraint fallido.
    - Validar recursivamente la Adresse anidada.
    - Prefijar los paths con el contexto ("create.kunde.", "update.kunde.", ...).

Colaboradores:
    - domain.entities.Kunde / Adresse
    - domain.messages (catálogo localizable)
    - email_validator (gramática de direcciones de e-mail)

Reglas:
    - Campo vacío => sólo la violación notEmpty (el pattern no se evalúa).
    - Orden estable: orden de declaración de los campos.
    - Sin efectos colaterales: sin violaciones => tupla vacía.
===============================================================================
"""

from __future__ import annotations

import re
from datetime import date
from typing import Callable, Iterator, Tuple

from email_validator import EmailNotValidError, validate_email

from .entities import Adresse, Kunde
from .errors import ConstraintViolationError
from .messages import DEFAULT_LOCALE, message_for
from .value_objects import FieldViolation, ValidationContext

MIN_KATEGORIE = 0
MAX_KATEGORIE = 9

_NACHNAME_PREFIX = "o'|von|von der|von und zu|van"
_NAME = "[A-ZÄÖÜ][a-zäöüß]+"
NACHNAME_PATTERN = re.compile(rf"(?:(?:{_NACHNAME_PREFIX}) ?)?{_NAME}(?:-{_NAME})?")
PLZ_PATTERN = re.compile(r"[0-9]{5}")


class KundeValidator:
    """
    Validador puro y sin estado mutable: se puede compartir entre requests.

    Args:
        locale: idioma del catálogo de mensajes ("de" | "en").
        today: fuente de la fecha actual (inyectable para tests).
    """

    def __init__(
        self,
        *,
        locale: str = DEFAULT_LOCALE,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._locale = locale
        self._today = today

    def validate(
        self, kunde: Kunde, context: ValidationContext
    ) -> Tuple[FieldViolation, ...]:
        return tuple(self._violations(kunde, context.prefix))

    def check(self, kunde: Kunde, context: ValidationContext) -> None:
        """Igual que validate(), pero lanza ConstraintViolationError si falla."""
        violations = self.validate(kunde, context)
        if violations:
            raise ConstraintViolationError(violations, context)

    # =========================================================================
    # Constraints
    # =========================================================================

    def _violations(self, kunde: Kunde, prefix: str) -> Iterator[FieldViolation]:
        yield from self._nachname(kunde.nachname, prefix)
        yield from self._email(kunde.email, prefix)
        yield from self._kategorie(kunde.kategorie, prefix)
        yield from self._geburtsdatum(kunde.geburtsdatum, prefix)
        yield from self._interessen(kunde, prefix)
        yield from self._adresse(kunde.adresse, f"{prefix}adresse.")

    def _nachname(self, nachname: str, prefix: str) -> Iterator[FieldViolation]:
        path = f"{prefix}nachname"
        if not nachname:
            yield self._violation(path, "kunde.nachname.notEmpty", nachname)
        elif not NACHNAME_PATTERN.fullmatch(nachname):
            yield self._violation(path, "kunde.nachname.pattern", nachname)

    def _email(self, email: str, prefix: str) -> Iterator[FieldViolation]:
        path = f"{prefix}email"
        if not email:
            yield self._violation(path, "kunde.email.notEmpty", email)
            return
        try:
            validate_email(
                email,
                check_deliverability=False,
                globally_deliverable=False,
                test_environment=True,
            )
        except EmailNotValidError:
            yield self._violation(path, "kunde.email.pattern", email)

    def _kategorie(self, kategorie: int, prefix: str) -> Iterator[FieldViolation]:
        if not MIN_KATEGORIE <= kategorie <= MAX_KATEGORIE:
            yield self._violation(f"{prefix}kategorie", "kunde.kategorie.range", kategorie)

    def _geburtsdatum(
        self, geburtsdatum: date | None, prefix: str
    ) -> Iterator[FieldViolation]:
        if geburtsdatum is not None and geburtsdatum >= self._today():
            yield self._violation(
                f"{prefix}geburtsdatum", "kunde.geburtsdatum.past", geburtsdatum
            )

    def _interessen(self, kunde: Kunde, prefix: str) -> Iterator[FieldViolation]:
        interessen = kunde.interessen
        if interessen is not None and len(set(interessen)) != len(interessen):
            yield self._violation(
                f"{prefix}interessen",
                "kunde.interessen.uniqueElements",
                ", ".join(str(i) for i in interessen),
            )

    def _adresse(self, adresse: Adresse, prefix: str) -> Iterator[FieldViolation]:
        plz_path = f"{prefix}plz"
        if not adresse.plz:
            yield self._violation(plz_path, "adresse.plz.notEmpty", adresse.plz)
        elif not PLZ_PATTERN.fullmatch(adresse.plz):
            yield self._violation(plz_path, "adresse.plz.pattern", adresse.plz)

        if not adresse.ort:
            yield self._violation(f"{prefix}ort", "adresse.ort.notEmpty", adresse.ort)

    def _violation(self, path: str, key: str, value: object) -> FieldViolation:
        return FieldViolation(
            path=path,
            message=message_for(key, self._locale, value=value),
            constraint=key,
        )


def validate_kunde(
    kunde: Kunde, context: ValidationContext
) -> Tuple[FieldViolation, ...]:
    """Atajo con el validador default (locale "de", fecha del sistema)."""
    return _DEFAULT_VALIDATOR.validate(kunde, context)


_DEFAULT_VALIDATOR = KundeValidator()
