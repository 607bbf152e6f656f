"""
Name: Kunde Use Case Tests

Responsibilities:
  - Validate create/update/patch/get/find/delete orchestration
  - Validate typed errors (NOT_FOUND, CONSTRAINT_VIOLATION, UNKNOWN_ENUM_TOKEN)
  - Validate the stored record is unchanged on failed writes
"""

from __future__ import annotations

from unittest.mock import Mock
from uuid import uuid4

import pytest

from kunde.application.usecases import (
    CreateKundeUseCase,
    DeleteKundeUseCase,
    FindKundenUseCase,
    GetKundeUseCase,
    KundeErrorCode,
    PatchKundeUseCase,
    UpdateKundeUseCase,
)
from kunde.domain.entities import Adresse
from kunde.domain.patching import PatchOp, PatchOperation
from kunde.domain.repositories import KundeRepository
from kunde.domain.value_objects import InteresseType, Violation
from kunde.infrastructure.repositories import InMemoryKundeRepository

pytestmark = pytest.mark.unit


@pytest.fixture
def repo(sample_kunde) -> InMemoryKundeRepository:
    return InMemoryKundeRepository([sample_kunde])


def _op(op: str, path: str, value: str) -> PatchOperation:
    return PatchOperation(op=PatchOp(op), path=path, value=value)


# =============================================================================
# Create
# =============================================================================


def test_create_assigns_new_id(validator, kunde_factory):
    repo = InMemoryKundeRepository()
    client_id = uuid4()
    kunde = kunde_factory.create(id=client_id)

    result = CreateKundeUseCase(repo, validator).execute(kunde)

    assert result.error is None
    assert result.kunde.id is not None
    assert result.kunde.id != client_id
    assert repo.find_by_id(result.kunde.id) == result.kunde


def test_create_reports_all_violations_without_prefix(validator, kunde_factory):
    repository = Mock(spec=KundeRepository)
    kunde = kunde_factory.create(
        nachname="", email="keine-email", adresse=Adresse(plz="1234", ort="Testort")
    )

    result = CreateKundeUseCase(repository, validator).execute(kunde)

    assert result.kunde is None
    assert result.error.code == KundeErrorCode.CONSTRAINT_VIOLATION
    assert [v.property for v in result.error.violations] == [
        "nachname",
        "email",
        "adresse.plz",
    ]
    repository.create.assert_not_called()


# =============================================================================
# Update
# =============================================================================


def test_update_replaces_and_keeps_stored_id(repo, validator, sample_kunde, kunde_factory):
    submitted = kunde_factory.create(id=uuid4(), nachname="Beta", email="beta@hska.de")

    result = UpdateKundeUseCase(repo, validator).execute(sample_kunde.id, submitted)

    assert result.error is None
    assert result.kunde.id == sample_kunde.id
    assert repo.find_by_id(sample_kunde.id).nachname == "Beta"


def test_update_not_found(repo, validator, sample_kunde):
    result = UpdateKundeUseCase(repo, validator).execute(uuid4(), sample_kunde)

    assert result.error.code == KundeErrorCode.NOT_FOUND


def test_update_validates_before_lookup(repo, validator, kunde_factory):
    invalid = kunde_factory.create(adresse=Adresse(plz="1", ort="Testort"))

    result = UpdateKundeUseCase(repo, validator).execute(uuid4(), invalid)

    assert result.error.code == KundeErrorCode.CONSTRAINT_VIOLATION
    assert result.error.violations[0].property == "adresse.plz"


# =============================================================================
# Patch
# =============================================================================


def test_patch_applies_and_persists(repo, validator, sample_kunde):
    result = PatchKundeUseCase(repo, validator).execute(
        sample_kunde.id,
        [
            _op("replace", "/email", "neu@hska.de"),
            _op("add", "/interessen", "S"),
            _op("remove", "/interessen", "L"),
        ],
    )

    assert result.error is None
    stored = repo.find_by_id(sample_kunde.id)
    assert stored.email == "neu@hska.de"
    assert stored.interessen == (InteresseType.REISEN, InteresseType.SPORT)


def test_patch_not_found(repo, validator):
    result = PatchKundeUseCase(repo, validator).execute(uuid4(), [])

    assert result.error.code == KundeErrorCode.NOT_FOUND


def test_patch_unknown_token_keeps_stored_record(repo, validator, sample_kunde):
    result = PatchKundeUseCase(repo, validator).execute(
        sample_kunde.id,
        [_op("replace", "/nachname", "Beta"), _op("add", "/interessen", "X")],
    )

    assert result.error.code == KundeErrorCode.UNKNOWN_ENUM_TOKEN
    assert result.error.message == "X ist kein gueltiges Interesse"
    assert repo.find_by_id(sample_kunde.id) == sample_kunde


def test_patch_constraint_violation_keeps_stored_record(repo, validator, sample_kunde):
    result = PatchKundeUseCase(repo, validator).execute(
        sample_kunde.id, [_op("replace", "/email", "keine-email")]
    )

    assert result.error.code == KundeErrorCode.CONSTRAINT_VIOLATION
    assert result.error.violations == (
        Violation(
            property="email",
            message="Die EMail-Adresse keine-email ist nicht korrekt.",
        ),
    )
    assert repo.find_by_id(sample_kunde.id) == sample_kunde


def test_patch_duplicate_interest_is_constraint_violation(repo, validator, sample_kunde):
    result = PatchKundeUseCase(repo, validator).execute(
        sample_kunde.id, [_op("add", "/interessen", "L")]
    )

    assert result.error.code == KundeErrorCode.CONSTRAINT_VIOLATION
    assert result.error.violations[0].property == "interessen"


# =============================================================================
# Get / Find / Delete
# =============================================================================


def test_get_found_and_not_found(repo, sample_kunde):
    use_case = GetKundeUseCase(repo)

    assert use_case.execute(sample_kunde.id).kunde == sample_kunde
    assert use_case.execute(uuid4()).error.code == KundeErrorCode.NOT_FOUND


def test_find_without_params_returns_all(repo, sample_kunde):
    assert FindKundenUseCase(repo).execute({}).kunden == [sample_kunde]
    assert FindKundenUseCase(repo).execute(None).kunden == [sample_kunde]


def test_find_delegates_query_dispatch(sample_kunde):
    repository = Mock(spec=KundeRepository)
    repository.find.return_value = [sample_kunde]

    result = FindKundenUseCase(repository).execute({"nachname": ["Alpha"]})

    assert result.kunden == [sample_kunde]
    repository.find.assert_called_once_with({"nachname": ["Alpha"]})


def test_delete_is_idempotent(repo, sample_kunde):
    use_case = DeleteKundeUseCase(repo)

    assert use_case.execute_by_id(sample_kunde.id).deleted is True
    assert use_case.execute_by_id(sample_kunde.id).deleted is False
    assert repo.find_by_id(sample_kunde.id) is None


def test_delete_by_email(repo, sample_kunde):
    result = DeleteKundeUseCase(repo).execute_by_email(sample_kunde.email)

    assert result.deleted is True
    assert repo.find_all() == []
