"""
Name: In-Memory Kunde Repository Tests

Responsibilities:
  - Validate lookup, replace and delete semantics
  - Validate query dispatch over multi-valued parameters
"""

from uuid import uuid4

import pytest

from kunde.infrastructure.repositories import InMemoryKundeRepository

pytestmark = pytest.mark.unit


@pytest.fixture
def kunden(kunde_factory):
    return [
        kunde_factory.create(nachname="Gamma", email="gamma@hska.de"),
        kunde_factory.create(nachname="Alpha", email="alpha2@hska.de"),
        kunde_factory.create(nachname="Alpha", email="alpha1@hska.de"),
    ]


@pytest.fixture
def repo(kunden) -> InMemoryKundeRepository:
    return InMemoryKundeRepository(kunden)


def test_find_all_sorted_by_nachname_then_email(repo):
    assert [(k.nachname, k.email) for k in repo.find_all()] == [
        ("Alpha", "alpha1@hska.de"),
        ("Alpha", "alpha2@hska.de"),
        ("Gamma", "gamma@hska.de"),
    ]


def test_find_by_id_miss_is_none(repo):
    assert repo.find_by_id(uuid4()) is None


def test_empty_query_returns_all(repo):
    assert len(repo.find({})) == 3


def test_query_by_email_exact(repo):
    (found,) = repo.find({"email": ["gamma@hska.de"]})

    assert found.nachname == "Gamma"
    assert repo.find({"email": ["GAMMA@hska.de"]}) == []


def test_query_by_nachname_exact(repo):
    assert [k.email for k in repo.find({"nachname": ["Alpha"]})] == [
        "alpha1@hska.de",
        "alpha2@hska.de",
    ]
    assert repo.find({"nachname": ["Alp"]}) == []


def test_query_by_empty_nachname_returns_all(repo):
    assert len(repo.find({"nachname": [""]})) == 3


def test_query_with_repeated_parameter_is_empty(repo):
    assert repo.find({"nachname": ["Alpha", "Gamma"]}) == []


def test_query_with_unknown_parameter_only_is_empty(repo):
    assert repo.find({"ort": ["Testort"]}) == []


def test_query_skips_unknown_parameter_before_known(repo):
    found = repo.find({"ort": ["Testort"], "nachname": ["Gamma"]})

    assert [k.nachname for k in found] == ["Gamma"]


def test_query_stops_at_first_repeated_parameter(repo):
    assert repo.find({"ort": ["a", "b"], "nachname": ["Gamma"]}) == []


def test_replace_existing_and_missing(repo, kunden, kunde_factory):
    updated = kunden[0].with_interessen(())

    assert repo.replace(updated) == updated
    assert repo.find_by_id(updated.id).interessen == ()
    assert repo.replace(kunde_factory.create()) is None


def test_create_requires_id(kunde_factory):
    with pytest.raises(ValueError):
        InMemoryKundeRepository().create(kunde_factory.create(id=None))


def test_delete_by_id_and_email(repo, kunden):
    assert repo.delete_by_id(kunden[0].id) is True
    assert repo.delete_by_id(kunden[0].id) is False
    assert repo.delete_by_email("alpha1@hska.de") is True
    assert repo.delete_by_email("alpha1@hska.de") is False
    assert [k.email for k in repo.find_all()] == ["alpha2@hska.de"]
