"""
Tests for the Issuer model and the shared timestamp base.
"""

from __future__ import annotations

import pytest
from django.core.exceptions import ValidationError

from apps.issuers.models import Issuer
from tests.factories import IssuerFactory


class TestIssuer:
    """Test cases for Issuer model."""

    def test_create_issuer(self, issuer):
        """Test creating an issuer assigns an id."""
        assert issuer.pk is not None
        assert issuer.name == "Acme Bank"

    def test_issuer_str(self, issuer):
        """Test issuer string representation."""
        assert str(issuer) == "Acme Bank"

    def test_issuer_ids_are_unique(self):
        """Test that each issuer receives its own id."""
        first = IssuerFactory()
        second = IssuerFactory()
        assert first.pk != second.pk

    def test_issuer_has_timestamps(self, issuer):
        """Test that created_at and updated_at are set automatically."""
        assert issuer.created_at is not None
        assert issuer.updated_at is not None

    def test_issuer_ordering_by_name(self):
        """Test default ordering is by name."""
        IssuerFactory(name="Zenith Bank")
        IssuerFactory(name="Access Bank")
        names = list(Issuer.objects.values_list("name", flat=True))
        assert names == ["Access Bank", "Zenith Bank"]

    def test_blank_name_fails_validation(self):
        """Test that full_clean rejects a blank name."""
        with pytest.raises(ValidationError) as exc_info:
            Issuer(name="").full_clean()
        assert "name" in exc_info.value.message_dict

    def test_name_longer_than_255_fails_validation(self):
        """Test that full_clean rejects names over the column length."""
        with pytest.raises(ValidationError):
            Issuer(name="x" * 256).full_clean()


class TestTimeStampedModel:
    """Test cases for the TimeStampedModel base."""

    def test_only_name_is_writable(self):
        """Test that ids and timestamps are not client-writable."""
        assert Issuer.writable_field_names() == ["name"]
