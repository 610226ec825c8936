"""
Shared pytest fixtures for all tests.
"""

import pytest
from django.test import RequestFactory

from apps.issuers.controller import IssuerController
from apps.issuers.store import DjangoIssuerStore
from tests.factories import IssuerFactory


@pytest.fixture
def rf():
    """Request factory for testing views."""
    return RequestFactory()


@pytest.fixture
def issuer():
    """Fixture to create an Issuer instance."""
    return IssuerFactory(name="Acme Bank")


@pytest.fixture
def store():
    """ORM-backed issuer store."""
    return DjangoIssuerStore()


@pytest.fixture
def controller(store):
    """Issuer controller wired to the ORM-backed store."""
    return IssuerController(store)


@pytest.fixture(autouse=True)
def enable_db_access_for_all_tests(db):
    """
    Give all tests access to the database.
    This is equivalent to @pytest.mark.django_db on every test.
    """
    pass
