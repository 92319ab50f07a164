"""Tests for configuration and app startup checks."""

from django.apps import apps

from django_pactum.conf import DEFAULTS, get_setting


class TestGetSetting:
    """Tests for get_setting()."""

    def test_reads_prefixed_setting(self, settings):
        settings.PACTUM_REQUIRE_TERMINATION_REASON = True

        assert get_setting('REQUIRE_TERMINATION_REASON') is True

    def test_falls_back_to_package_default(self, settings):
        del settings.PACTUM_REQUIRE_TERMINATION_REASON

        assert get_setting('REQUIRE_TERMINATION_REASON') is DEFAULTS['REQUIRE_TERMINATION_REASON']

    def test_explicit_default_for_unknown_setting(self):
        assert get_setting('NOT_A_SETTING', 'fallback') == 'fallback'

    def test_unknown_setting_without_default_is_none(self):
        assert get_setting('NOT_A_SETTING') is None


class TestAppConfig:
    """The app registers and its lifecycle graph passed the ready() check."""

    def test_app_is_installed(self):
        config = apps.get_app_config('django_pactum')

        assert config.verbose_name == 'Pactum Agreements'

    def test_ready_runs_without_error(self):
        apps.get_app_config('django_pactum').ready()
