"""
Blacklist Profiles Package

This package contains the profiles that supply default sensitive field-name
patterns to the LoggerFilter.

Available profiles:
    - default: Credentials, tokens, keys, sessions, card data

To add a new profile:
    1. Create a new file (e.g., payments.py)
    2. Subclass BlacklistProfile
    3. Implement get_patterns() with your field-name fragments
    4. Pass it to LoggerFilter(profiles=[...])

Example:
    # logfilter/profiles/payments.py
    from ..base_profile import BlacklistProfile

    class PaymentsProfile(BlacklistProfile):
        @property
        def name(self) -> str:
            return "payments"

        @property
        def description(self) -> str:
            return "Card holder data"

        def get_patterns(self) -> list[str]:
            return ["iban", "bic", "account_number"]
"""

from .default import DefaultProfile, DEFAULT_PROFILE

__all__ = ["DefaultProfile", "DEFAULT_PROFILE"]
