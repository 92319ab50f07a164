"""Counterparty, Agreement and AgreementTransition models.

Agreement carries its own lifecycle rules:
- Agreement.create() is the only supported way to build a new agreement
- activate() and terminate() are the only status mutations

Those methods work in memory. Persist through services:
- create_agreement()
- activate_agreement()
- terminate_agreement()
"""

from datetime import date, datetime

from django.conf import settings
from django.db import models
from django.db.models import Q
from django.utils import timezone

from .conf import get_setting
from .exceptions import (
    AgreementValidationError,
    BusinessRuleViolation,
    ImmutableTransitionError,
)
from .fields import AgreementIdField, CounterpartyIdField
from .ids import AgreementId, CounterpartyId
from .lifecycle import AgreementStatus, INITIAL_STATUS, TERMINAL_STATUSES, can_transition


NAME_MAX_LENGTH = 200


def validate_name(name, error_class) -> None:
    """
    Check a record name: a non-blank string of at most NAME_MAX_LENGTH.

    Raises:
        error_class: If name is missing, blank or too long
        TypeError: If name is not a string
    """
    if name is None:
        raise error_class('name', "name required")
    if not isinstance(name, str):
        raise TypeError(f"name must be a str, got {type(name).__name__}")
    if not name.strip():
        raise error_class('name', "name required")
    if len(name) > NAME_MAX_LENGTH:
        raise error_class('name', f"name must be at most {NAME_MAX_LENGTH} characters")


def current_date() -> date:
    """Today in the current time zone, or the server's local date when USE_TZ is off."""
    if settings.USE_TZ:
        return timezone.localdate()
    return date.today()


class PactumBaseModel(models.Model):
    """Base model with created/updated timestamps."""

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class Counterparty(PactumBaseModel):
    """
    External party to agreements.

    Agreements reference a counterparty by CounterpartyId only, never
    through a foreign key.
    """

    id = CounterpartyIdField(
        primary_key=True,
        default=CounterpartyId.new,
        editable=False,
    )
    name = models.CharField(
        max_length=NAME_MAX_LENGTH,
        help_text="Legal name of the counterparty",
    )

    class Meta:
        app_label = 'django_pactum'
        verbose_name_plural = 'counterparties'
        ordering = ['name']

    def __str__(self):
        return self.name


class AgreementQuerySet(models.QuerySet):
    """Custom queryset for Agreement model."""

    def drafts(self):
        return self.filter(status=AgreementStatus.DRAFT)

    def active(self):
        return self.filter(status=AgreementStatus.ACTIVE)

    def terminated(self):
        return self.filter(status=AgreementStatus.TERMINATED)

    def for_counterparty(self, counterparty_id: CounterpartyId):
        """Return agreements with the given counterparty."""
        return self.filter(counterparty_id=counterparty_id)

    def starting_between(self, start, end):
        """Return agreements whose start_date falls in [start, end]."""
        return self.filter(start_date__gte=start, start_date__lte=end)


class Agreement(PactumBaseModel):
    """
    Legal agreement with a counterparty.

    Fields:
    - id: AgreementId, generated by create(), never changes
    - name: Label, validated once at creation
    - counterparty_id: CounterpartyId of the other party (no FK)
    - start_date: Calendar date, today or later at creation
    - status: draft -> active -> terminated
    - activated_at, terminated_at: Stamped by the service layer

    Usage:
        agreement = Agreement.create("Supply", counterparty.id, date.today())
        agreement.activate()
        agreement.terminate("Superseded")

    Query examples:
        Agreement.objects.active().for_counterparty(counterparty.id)
    """

    id = AgreementIdField(
        primary_key=True,
        default=AgreementId.new,
        editable=False,
    )
    name = models.CharField(
        max_length=NAME_MAX_LENGTH,
        help_text="Agreement name (immutable after creation)",
    )
    counterparty_id = CounterpartyIdField(
        db_index=True,
        help_text="Identifier of the counterparty (reference by id only)",
    )
    start_date = models.DateField(
        help_text="When the agreement starts",
    )
    status = models.CharField(
        max_length=20,
        choices=AgreementStatus.choices,
        default=INITIAL_STATUS,
        db_index=True,
    )
    activated_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="When the agreement was activated",
    )
    terminated_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="When the agreement was terminated",
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='pactum_agreements_created',
        help_text="User who created the agreement",
    )

    objects = AgreementQuerySet.as_manager()

    class Meta:
        app_label = 'django_pactum'
        ordering = ['-created_at']
        constraints = [
            models.CheckConstraint(
                condition=Q(status__in=AgreementStatus.values),
                name='pactum_agreement_status_valid',
            ),
        ]

    def __str__(self):
        return f"{self.name} ({self.get_status_display()})"

    @classmethod
    def create(cls, name: str, counterparty_id: CounterpartyId, start_date) -> "Agreement":
        """
        Build a new draft agreement. Nothing is saved.

        Args:
            name: Non-empty agreement name
            counterparty_id: CounterpartyId of the other party
            start_date: date (or datetime) the agreement starts, not in the past

        Returns:
            Unsaved Agreement with a fresh AgreementId and status draft

        Raises:
            AgreementValidationError: If any input is missing or invalid
            TypeError: If name is not a str or counterparty_id is not a CounterpartyId
        """
        validate_name(name, AgreementValidationError)

        if counterparty_id is None:
            raise AgreementValidationError('counterparty_id', "counterparty required")
        if not isinstance(counterparty_id, CounterpartyId):
            raise TypeError(
                f"counterparty_id must be a CounterpartyId, got {type(counterparty_id).__name__}"
            )

        if start_date is None:
            raise AgreementValidationError('start_date', "start date required")
        if isinstance(start_date, datetime):
            if timezone.is_aware(start_date):
                start_date = timezone.localdate(start_date)
            else:
                start_date = start_date.date()
        if start_date < current_date():
            raise AgreementValidationError('start_date', "start date cannot be in the past")

        return cls(
            id=AgreementId.new(),
            name=name,
            counterparty_id=counterparty_id,
            start_date=start_date,
            status=INITIAL_STATUS,
        )

    def activate(self) -> None:
        """Move draft -> active. Raises BusinessRuleViolation otherwise."""
        if not can_transition(self.status, AgreementStatus.ACTIVE):
            raise BusinessRuleViolation(
                self.status,
                AgreementStatus.ACTIVE,
                "only Draft agreements can be activated",
            )
        self.status = AgreementStatus.ACTIVE

    def terminate(self, reason: str) -> None:
        """
        Move active -> terminated.

        The reason is not kept on the agreement; the service layer records
        it on the transition log. It is only checked when
        PACTUM_REQUIRE_TERMINATION_REASON is set.
        """
        if get_setting('REQUIRE_TERMINATION_REASON') and not (reason or '').strip():
            raise AgreementValidationError('reason', "termination reason required")
        if not can_transition(self.status, AgreementStatus.TERMINATED):
            raise BusinessRuleViolation(
                self.status,
                AgreementStatus.TERMINATED,
                "only Active agreements can be terminated",
            )
        self.status = AgreementStatus.TERMINATED

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES


class AgreementTransition(models.Model):
    """
    Audit log of agreement status changes.

    Append-only: never modified after creation.
    """

    agreement = models.ForeignKey(
        Agreement,
        on_delete=models.CASCADE,
        related_name='transitions',
        help_text="The agreement that changed status",
    )
    from_status = models.CharField(
        max_length=20,
        choices=AgreementStatus.choices,
    )
    to_status = models.CharField(
        max_length=20,
        choices=AgreementStatus.choices,
    )
    reason = models.TextField(
        blank=True,
        default='',
        help_text="Stated reason for the change",
    )
    transitioned_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='pactum_agreement_transitions',
        help_text="User who performed the transition",
    )
    transitioned_at = models.DateTimeField(
        auto_now_add=True,
    )

    class Meta:
        app_label = 'django_pactum'
        ordering = ['transitioned_at', 'id']

    def save(self, *args, **kwargs):
        """Enforce immutability - transitions are audit records."""
        if not self._state.adding:
            raise ImmutableTransitionError(self.pk)
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.agreement_id}: {self.from_status} -> {self.to_status}"
