"""
Base Blacklist Profile - Abstract base class for sensitive field-name patterns.

A profile is the source of the *default* blacklist a LoggerFilter starts
from. Extend this class to ship field-name patterns for a specific
application or industry, for example:
    - a payments profile (card_number, cvv, iban)
    - a healthcare profile (diagnosis, patient_id)

Each profile defines:
    - name: Unique identifier for the profile
    - description: Human-readable description
    - get_patterns(): Returns the field-name fragments treated as sensitive

Patterns are plain substrings, matched case-insensitively against field
names: the pattern "token" marks "accessToken", "TOKEN" and
"refresh_token_expiry" as sensitive.
"""

from abc import ABC, abstractmethod


class BlacklistProfile(ABC):
    """
    Abstract base class for blacklist profiles.

    Subclass this to add new sets of default patterns without modifying
    the LoggerFilter itself.

    Example:
        class PaymentsProfile(BlacklistProfile):
            @property
            def name(self) -> str:
                return "payments"

            @property
            def description(self) -> str:
                return "Card holder data field names"

            def get_patterns(self) -> list[str]:
                return ["card_number", "cvv", "iban"]
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for this profile (e.g., 'default', 'payments')."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what this profile covers."""
        pass

    @abstractmethod
    def get_patterns(self) -> list[str]:
        """
        Return the field-name patterns contributed by this profile.

        Order matters only for readability of LoggerFilter.blacklist;
        it has no effect on matching.
        """
        pass

    def __repr__(self) -> str:
        return f"<BlacklistProfile: {self.name}>"
