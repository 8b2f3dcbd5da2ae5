"""
domain.exceptions - Custom exception hierarchy for the meal analyzer.

All domain-level errors inherit from DomainError so callers can catch
broad or specific exceptions as needed.
"""


class DomainError(Exception):
    """Base exception for all domain-level errors."""


class GenerationError(DomainError):
    """Raised when a request to the generative-AI service fails.

    Covers network/provider failures and unusable responses alike. The
    message is human readable and safe to show to the user.
    """


class ResponseSchemaError(GenerationError):
    """Raised when the AI response is not JSON or does not match the schema."""


class AuthenticationError(DomainError):
    """Raised when login or registration is rejected."""


class AccountNotFoundError(AuthenticationError):
    """Raised when logging in with an email that has no account."""


class DuplicateAccountError(DomainError):
    """Raised when attempting to register with an email that already exists."""


class PlanValidationError(DomainError):
    """Raised when plan request fields fail validation.

    errors maps field names (age, height, weight, gender, activityLevel,
    goal) to user-facing messages.
    """

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        super().__init__("; ".join(f"{k}: {v}" for k, v in self.errors.items()))
