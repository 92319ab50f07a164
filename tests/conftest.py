"""Pytest configuration for django-pactum tests."""

import pytest
from django.utils import timezone

from django_pactum.ids import CounterpartyId
from django_pactum.models import Agreement
from django_pactum.services import activate_agreement, create_agreement, create_counterparty


@pytest.fixture
def today():
    return timezone.localdate()


@pytest.fixture
def counterparty_id():
    """A counterparty id with no stored counterparty behind it."""
    return CounterpartyId.new()


@pytest.fixture
def user(db, django_user_model):
    """Create a test user."""
    return django_user_model.objects.create_user(
        username="testuser",
        password="testpass123",
    )


@pytest.fixture
def counterparty(db):
    return create_counterparty("Acme Ltd")


@pytest.fixture
def draft(today, counterparty_id):
    """Unsaved draft agreement."""
    return Agreement.create("Test", counterparty_id, today)


@pytest.fixture
def saved_draft(db, counterparty, today, user):
    return create_agreement("Master services", counterparty.id, today, created_by=user)


@pytest.fixture
def saved_active(saved_draft, user):
    return activate_agreement(saved_draft, by_user=user)
