class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class PersistenceError(DomainError):
    """Raised when the table store rejects an operation.

    The message carries the raw backend text so it can be shown to the user.
    """


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class AuthenticationError(DomainError):
    """Raised when login fails."""


class InvalidAccountError(AuthenticationError):
    """Account identifier not found in any credential table."""


class WrongPasswordError(AuthenticationError):
    pass


class AccountExpiredError(AuthenticationError):
    pass
