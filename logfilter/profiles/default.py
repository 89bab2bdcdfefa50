"""
Default Blacklist Profile - Built-in sensitive field-name patterns.

Patterns covered:
    - Passwords and generic secrets
    - Tokens and authorization headers
    - API keys, access keys and private keys
    - Session identifiers and cookies
    - Payment card data
    - Social security numbers

Keep fragments specific enough to avoid collateral redaction: matching is a
case-insensitive substring test, so a short fragment such as "pin" would also
hit "shipping" or "mapping".
"""

from ..base_profile import BlacklistProfile


class DefaultProfile(BlacklistProfile):
    """
    Default profile used by every LoggerFilter unless told otherwise.

    Covers the field names that most commonly carry credentials or
    personal data in application logs.
    """

    @property
    def name(self) -> str:
        return "default"

    @property
    def description(self) -> str:
        return "Common credential, session and personal data field names"

    def get_patterns(self) -> list[str]:
        return [
            # Credentials
            "password",
            "passwd",
            "secret",
            "credential",

            # Tokens and auth headers
            "token",
            "authorization",

            # Keys
            "api_key",
            "apikey",
            "api-key",
            "access_key",
            "private_key",

            # Sessions
            "cookie",
            "session",

            # Payment card data
            "card_number",
            "credit_card",
            "cvv",

            # Personal data
            "social_security",
        ]


# Export the default profile
DEFAULT_PROFILE = DefaultProfile()
