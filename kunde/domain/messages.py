"""
Catálogo de mensajes de validación (localizable).

Clave = constraint estable; valor = plantilla str.format con el valor
ofensivo disponible como {value}.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

DEFAULT_LOCALE = "de"

_DE: Mapping[str, str] = {
    "kunde.nachname.notEmpty": "Ein Nachname muss angegeben werden.",
    "kunde.nachname.pattern": (
        "Bei Nachnamen ist nach einem optionalen Praefix wie z.B. von "
        "ein Grossbuchstabe und mindestens ein Kleinbuchstabe erforderlich: {value}"
    ),
    "kunde.email.notEmpty": "Eine EMail-Adresse muss angegeben werden.",
    "kunde.email.pattern": "Die EMail-Adresse {value} ist nicht korrekt.",
    "kunde.kategorie.range": "Die Kategorie {value} muss zwischen 0 und 9 liegen.",
    "kunde.geburtsdatum.past": (
        "Das Geburtsdatum {value} muss in der Vergangenheit liegen."
    ),
    "kunde.interessen.uniqueElements": (
        "Die Interessen duerfen keine Duplikate enthalten."
    ),
    "adresse.plz.notEmpty": "Eine Postleitzahl muss angegeben werden.",
    "adresse.plz.pattern": "Die Postleitzahl {value} ist nicht 5-stellig.",
    "adresse.ort.notEmpty": "Ein Ort muss angegeben werden.",
}

_EN: Mapping[str, str] = {
    "kunde.nachname.notEmpty": "A last name is required.",
    "kunde.nachname.pattern": (
        "A last name must start with an optional prefix such as von followed "
        "by an upper-case letter and at least one lower-case letter: {value}"
    ),
    "kunde.email.notEmpty": "An e-mail address is required.",
    "kunde.email.pattern": "The e-mail address {value} is not valid.",
    "kunde.kategorie.range": "The category {value} must be between 0 and 9.",
    "kunde.geburtsdatum.past": "The birth date {value} must be in the past.",
    "kunde.interessen.uniqueElements": "The interests must not contain duplicates.",
    "adresse.plz.notEmpty": "A postal code is required.",
    "adresse.plz.pattern": "The postal code {value} does not have 5 digits.",
    "adresse.ort.notEmpty": "A city is required.",
}

MESSAGES: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {"de": MappingProxyType(_DE), "en": MappingProxyType(_EN)}
)

SUPPORTED_LOCALES = frozenset(MESSAGES)


def message_for(key: str, locale: str = DEFAULT_LOCALE, **params: Any) -> str:
    """Resuelve la plantilla (fallback: locale default) y la interpola."""
    catalog = MESSAGES.get(locale, MESSAGES[DEFAULT_LOCALE])
    template = catalog.get(key) or MESSAGES[DEFAULT_LOCALE].get(key, key)
    return template.format(**params)
