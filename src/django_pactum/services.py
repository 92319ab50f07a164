"""Agreement service layer.

All write operations go through these functions.
Direct model manipulation bypasses the audit log and is unsupported.

Functions:
- create_counterparty(): Register a counterparty
- create_agreement(): Build and save a draft agreement
- activate_agreement(): draft -> active, with audit record
- terminate_agreement(): active -> terminated, with audit record
- get_allowed_transitions(): Statuses reachable from the current one
- get_transition_history(): Audit records, oldest first
"""

import logging

from django.db import transaction
from django.utils import timezone

from .exceptions import (
    AgreementValidationError,
    BusinessRuleViolation,
    CounterpartyValidationError,
)
from .lifecycle import AgreementStatus, allowed_transitions
from .models import Agreement, AgreementTransition, Counterparty, validate_name

logger = logging.getLogger(__name__)


def create_counterparty(name: str) -> Counterparty:
    """
    Register a counterparty.

    Raises:
        CounterpartyValidationError: If name is empty or too long
        TypeError: If name is not a str
    """
    validate_name(name, CounterpartyValidationError)
    counterparty = Counterparty.objects.create(name=name)
    logger.info(f"Counterparty {counterparty.pk} created")
    return counterparty


def create_agreement(name: str, counterparty_id, start_date, created_by=None) -> Agreement:
    """
    Create and save a draft agreement.

    Args:
        name: Agreement name (required, non-empty)
        counterparty_id: CounterpartyId of the other party
        start_date: When the agreement starts (today or later)
        created_by: Optional user creating the agreement

    Returns:
        The saved Agreement in draft status

    Raises:
        AgreementValidationError: If inputs are invalid
    """
    agreement = Agreement.create(name, counterparty_id, start_date)
    agreement.created_by = created_by

    with transaction.atomic():
        agreement.save(force_insert=True)

    logger.info(
        f"Agreement {agreement.pk} created for counterparty {agreement.counterparty_id} "
        f"starting {agreement.start_date}"
    )
    return agreement


def _apply_transition(agreement: Agreement, mutate, by_user, reason: str) -> Agreement:
    """
    Lock the agreement row, apply mutate() to the locked copy and record it.

    The precondition is checked against the locked row, so a stale
    in-memory instance cannot move the stored status.
    """
    with transaction.atomic():
        locked = Agreement.objects.select_for_update().get(pk=agreement.pk)
        from_status = locked.status

        try:
            mutate(locked)
        except (BusinessRuleViolation, AgreementValidationError) as e:
            logger.warning(f"Agreement {locked.pk} transition rejected: {e}")
            raise

        now = timezone.now()
        update_fields = ['status', 'updated_at']
        if locked.status == AgreementStatus.ACTIVE:
            locked.activated_at = now
            update_fields.append('activated_at')
        elif locked.status == AgreementStatus.TERMINATED:
            locked.terminated_at = now
            update_fields.append('terminated_at')
        locked.save(update_fields=update_fields)

        AgreementTransition.objects.create(
            agreement=locked,
            from_status=from_status,
            to_status=locked.status,
            reason=reason or '',
            transitioned_by=by_user,
        )

    logger.info(f"Agreement {locked.pk} moved {from_status} -> {locked.status}")
    return locked


def activate_agreement(agreement: Agreement, by_user=None, reason: str = '') -> Agreement:
    """
    Activate a draft agreement.

    Args:
        agreement: The agreement to activate
        by_user: Optional user performing the activation
        reason: Optional note for the audit record

    Returns:
        The updated Agreement instance (freshly loaded)

    Raises:
        BusinessRuleViolation: If the stored agreement is not in draft
    """
    return _apply_transition(agreement, lambda a: a.activate(), by_user, reason)


def terminate_agreement(agreement: Agreement, reason: str = '', by_user=None) -> Agreement:
    """
    Terminate an active agreement.

    Args:
        agreement: The agreement to terminate
        reason: Why the agreement was terminated (stored on the audit record)
        by_user: Optional user performing the termination

    Returns:
        The updated Agreement instance (freshly loaded)

    Raises:
        BusinessRuleViolation: If the stored agreement is not active
        AgreementValidationError: If a reason is required and missing
    """
    return _apply_transition(agreement, lambda a: a.terminate(reason), by_user, reason)


def get_allowed_transitions(agreement: Agreement) -> list[str]:
    """Get list of statuses the agreement can move to next."""
    return allowed_transitions(agreement.status)


def get_transition_history(agreement: Agreement):
    """Return the agreement's transition records, oldest first."""
    return agreement.transitions.order_by('transitioned_at', 'id')
