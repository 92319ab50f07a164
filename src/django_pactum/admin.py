"""Django admin configuration for agreements.

Read-only: records are written through services so they are validated
and status changes are audited.
"""

from django.contrib import admin

from .models import Agreement, AgreementTransition, Counterparty


class ReadOnlyAdminMixin:
    def has_add_permission(self, request, obj=None):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


class AgreementTransitionInline(ReadOnlyAdminMixin, admin.TabularInline):
    """Inline for viewing an agreement's transitions."""

    model = AgreementTransition
    extra = 0
    readonly_fields = ['from_status', 'to_status', 'reason', 'transitioned_by', 'transitioned_at']


@admin.register(Counterparty)
class CounterpartyAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    """Admin for Counterparty model. Register through create_counterparty()."""

    list_display = ['name', 'id', 'created_at']
    search_fields = ['name']
    readonly_fields = ['id', 'created_at', 'updated_at']


@admin.register(Agreement)
class AgreementAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    """Admin for Agreement model."""

    list_display = ['name', 'status', 'start_date', 'counterparty_id', 'created_at']
    list_filter = ['status', 'start_date']
    search_fields = ['name']
    readonly_fields = [
        'id',
        'name',
        'counterparty_id',
        'start_date',
        'status',
        'activated_at',
        'terminated_at',
        'created_by',
        'created_at',
        'updated_at',
    ]
    inlines = [AgreementTransitionInline]


@admin.register(AgreementTransition)
class AgreementTransitionAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    """Admin for AgreementTransition model (read-only)."""

    list_display = ['agreement', 'from_status', 'to_status', 'transitioned_by', 'transitioned_at']
    list_filter = ['to_status', 'transitioned_at']
    readonly_fields = [
        'agreement',
        'from_status',
        'to_status',
        'reason',
        'transitioned_by',
        'transitioned_at',
    ]
