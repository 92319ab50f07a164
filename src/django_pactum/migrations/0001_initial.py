# Generated manually for standalone django-pactum package

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

import django_pactum.fields
import django_pactum.ids


STATUS_CHOICES = [
    ("draft", "Draft"),
    ("active", "Active"),
    ("terminated", "Terminated"),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Counterparty",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "id",
                    django_pactum.fields.CounterpartyIdField(
                        default=django_pactum.ids.CounterpartyId.new,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "name",
                    models.CharField(
                        help_text="Legal name of the counterparty",
                        max_length=200,
                    ),
                ),
            ],
            options={
                "verbose_name_plural": "counterparties",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Agreement",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "id",
                    django_pactum.fields.AgreementIdField(
                        default=django_pactum.ids.AgreementId.new,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "name",
                    models.CharField(
                        help_text="Agreement name (immutable after creation)",
                        max_length=200,
                    ),
                ),
                (
                    "counterparty_id",
                    django_pactum.fields.CounterpartyIdField(
                        db_index=True,
                        help_text="Identifier of the counterparty (reference by id only)",
                    ),
                ),
                (
                    "start_date",
                    models.DateField(help_text="When the agreement starts"),
                ),
                (
                    "status",
                    models.CharField(
                        choices=STATUS_CHOICES,
                        db_index=True,
                        default="draft",
                        max_length=20,
                    ),
                ),
                (
                    "activated_at",
                    models.DateTimeField(
                        blank=True,
                        help_text="When the agreement was activated",
                        null=True,
                    ),
                ),
                (
                    "terminated_at",
                    models.DateTimeField(
                        blank=True,
                        help_text="When the agreement was terminated",
                        null=True,
                    ),
                ),
                (
                    "created_by",
                    models.ForeignKey(
                        blank=True,
                        help_text="User who created the agreement",
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="pactum_agreements_created",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(
                            ("status__in", ["draft", "active", "terminated"])
                        ),
                        name="pactum_agreement_status_valid",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="AgreementTransition",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "from_status",
                    models.CharField(choices=STATUS_CHOICES, max_length=20),
                ),
                (
                    "to_status",
                    models.CharField(choices=STATUS_CHOICES, max_length=20),
                ),
                (
                    "reason",
                    models.TextField(
                        blank=True,
                        default="",
                        help_text="Stated reason for the change",
                    ),
                ),
                ("transitioned_at", models.DateTimeField(auto_now_add=True)),
                (
                    "agreement",
                    models.ForeignKey(
                        help_text="The agreement that changed status",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="transitions",
                        to="django_pactum.agreement",
                    ),
                ),
                (
                    "transitioned_by",
                    models.ForeignKey(
                        blank=True,
                        help_text="User who performed the transition",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="pactum_agreement_transitions",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["transitioned_at", "id"],
            },
        ),
    ]
