"""
Tests for application settings.
"""

from datetime import timedelta

from app.core.config import Settings
from app.services.search.connection_rules import ConnectionRules


class TestConnectionRulesSetting:
    def test_defaults(self):
        rules = Settings(_env_file=None).connection_rules()

        assert rules == ConnectionRules()

    def test_minutes_become_layover_rules(self):
        settings = Settings(
            _env_file=None,
            MINIMUM_CONNECTION_TIME_DOMESTIC=30,
            MINIMUM_CONNECTION_TIME_INTERNATIONAL=120,
            MAXIMUM_LAYOVER_TIME=480,
        )

        rules = settings.connection_rules()

        assert isinstance(rules, ConnectionRules)
        assert rules.min_domestic_layover == timedelta(minutes=30)
        assert rules.min_international_layover == timedelta(minutes=120)
        assert rules.max_layover == timedelta(hours=8)

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("MAXIMUM_LAYOVER_TIME", "240")

        assert Settings(_env_file=None).connection_rules().max_layover == timedelta(hours=4)
