"""Configuration helpers for django-pactum.

Settings are read at call time so override_settings applies.

PACTUM_REQUIRE_TERMINATION_REASON (default False):
    Reject terminate() calls with an empty reason.
"""

from django.conf import settings


DEFAULTS = {
    'REQUIRE_TERMINATION_REASON': False,
}


def get_setting(name: str, default=None):
    """Get a setting with PACTUM_ prefix."""
    if default is None:
        default = DEFAULTS.get(name)
    return getattr(settings, f"PACTUM_{name}", default)
