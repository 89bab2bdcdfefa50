"""
Tests for blacklist profiles.
"""

import pytest

from logfilter import BlacklistProfile, LoggerFilter
from logfilter.profiles import DEFAULT_PROFILE, DefaultProfile


class TestDefaultProfile:
    """Test suite for the built-in profile."""

    def test_metadata(self):
        assert DEFAULT_PROFILE.name == "default"
        assert DEFAULT_PROFILE.description
        assert repr(DEFAULT_PROFILE) == "<BlacklistProfile: default>"

    @pytest.mark.parametrize("pattern", ["password", "token", "secret", "authorization"])
    def test_common_patterns_present(self, pattern):
        """Should cover the usual credential field names."""
        assert pattern in DEFAULT_PROFILE.get_patterns()

    def test_patterns_are_lowercase_strings(self):
        patterns = DefaultProfile().get_patterns()
        assert all(isinstance(p, str) and p == p.lower() for p in patterns)
        assert len(patterns) == len(set(patterns))

    @pytest.mark.parametrize(
        "key",
        ["Authorization", "accessToken", "client_secret", "Set-Cookie", "sessionId", "x-api-key"],
    )
    def test_redacts_common_field_names(self, key):
        """Should redact typical header and payload field names."""
        assert LoggerFilter().process({key: "v"}) == {key: "*sensitive*"}

    @pytest.mark.parametrize("key", ["className", "shipping", "message", "author", "timestamp"])
    def test_does_not_redact_ordinary_field_names(self, key):
        """Should leave everyday field names alone."""
        assert LoggerFilter().process({key: "v"}) == {key: "v"}


class TestCustomProfile:
    """Test adding custom blacklist profiles."""

    def test_custom_profile_integration(self):
        """Should be able to use a custom profile instead of the default."""

        class PaymentsProfile(BlacklistProfile):
            @property
            def name(self) -> str:
                return "payments"

            @property
            def description(self) -> str:
                return "Payments profile"

            def get_patterns(self):
                return ["iban", "account_number"]

        log_filter = LoggerFilter(profiles=[PaymentsProfile()])
        result = log_filter.process({"IBAN": "DE89", "password": "x", "amount": 10})

        assert log_filter.blacklist == ("iban", "account_number")
        assert result == {"IBAN": "*sensitive*", "password": "x", "amount": 10}

    def test_abstract_profile_cannot_be_instantiated(self):
        """Should require name, description and get_patterns."""
        with pytest.raises(TypeError):
            BlacklistProfile()
