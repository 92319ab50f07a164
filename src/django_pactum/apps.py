"""Django app configuration for django-pactum."""

from django.apps import AppConfig
from django.core.exceptions import ImproperlyConfigured


class DjangoPactumConfig(AppConfig):
    """App configuration for django-pactum."""

    name = 'django_pactum'
    verbose_name = 'Pactum Agreements'
    default_auto_field = 'django.db.models.BigAutoField'

    def ready(self):
        from . import lifecycle

        errors = lifecycle.validate_lifecycle_graph(
            states=lifecycle.STATUS_ORDER,
            transitions=lifecycle.TRANSITIONS,
            initial_state=lifecycle.INITIAL_STATUS,
            terminal_states=lifecycle.TERMINAL_STATUSES,
        )
        if errors:
            raise ImproperlyConfigured(
                "Invalid agreement lifecycle: " + "; ".join(errors)
            )
