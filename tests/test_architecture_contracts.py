# tests/test_architecture_contracts.py
"""
Architecture contract tests for django-pactum.

These tests enforce structural invariants that unit tests don't catch:
- Version consistency (__init__.py vs pyproject.toml)
- Lazy imports in __init__.py (prevent AppRegistryNotReady)
- AUTH_USER_MODEL usage (not direct User imports)
- Agreements reference counterparties by id only (no FK)
- Append-only transition log blocks updates
- Admin is registered read-only
"""
from __future__ import annotations

import re
from pathlib import Path

import pytest
from django.contrib import admin

from django_pactum.fields import CounterpartyIdField
from django_pactum.models import Agreement, AgreementTransition, Counterparty

ROOT_DIR = Path(__file__).parent.parent
SRC_DIR = ROOT_DIR / "src" / "django_pactum"


def test_version_consistency():
    """__init__.py __version__ must match pyproject.toml version."""
    pyproject_text = (ROOT_DIR / "pyproject.toml").read_text()
    match = re.search(r'^version\s*=\s*["\']([^"\']+)["\']', pyproject_text, re.MULTILINE)
    assert match, "pyproject.toml missing version"

    init_text = (SRC_DIR / "__init__.py").read_text()
    init_match = re.search(r'__version__\s*=\s*["\']([^"\']+)["\']', init_text)
    assert init_match, "__init__.py missing __version__"

    assert match.group(1) == init_match.group(1)


def test_init_uses_lazy_imports():
    """__init__.py must not import models eagerly."""
    source = (SRC_DIR / "__init__.py").read_text()

    assert not re.search(r'^from \.(models|services|admin) import', source, re.MULTILINE)
    assert '__getattr__' in source


def test_uses_auth_user_model_not_direct_import():
    """Use settings.AUTH_USER_MODEL, not direct User imports."""
    violations = []

    for py_file in SRC_DIR.rglob("*.py"):
        source = py_file.read_text()
        if re.search(r'from django\.contrib\.auth\.models import.*\bUser\b', source):
            violations.append(py_file.name)

    assert not violations, f"Direct User imports: {violations}"


def test_agreement_has_no_relation_to_counterparty():
    """Cross-aggregate references are by identifier only."""
    related = [
        field.name
        for field in Agreement._meta.get_fields()
        if field.is_relation and field.related_model is Counterparty
    ]

    assert related == []
    assert isinstance(Agreement._meta.get_field('counterparty_id'), CounterpartyIdField)


def test_append_only_models_block_updates():
    """AgreementTransition overrides save() and checks _state.adding."""
    source = (SRC_DIR / "models.py").read_text()
    class_start = source.find("class AgreementTransition")
    class_source = source[class_start:]

    assert "def save" in class_source
    assert "self._state.adding" in class_source


@pytest.mark.parametrize("model", [Counterparty, Agreement, AgreementTransition])
def test_models_registered_in_admin(model):
    assert admin.site.is_registered(model)


@pytest.mark.parametrize("model", [Counterparty, Agreement, AgreementTransition])
def test_admin_is_read_only(model, rf):
    model_admin = admin.site._registry[model]
    request = rf.get("/")

    assert model_admin.has_add_permission(request) is False
    assert model_admin.has_change_permission(request) is False
    assert model_admin.has_delete_permission(request) is False
