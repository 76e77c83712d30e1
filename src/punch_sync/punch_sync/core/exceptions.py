class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ConfigurationError(DomainError):
    """Raised when the console is missing a required setting."""


class RemoteError(DomainError):
    """Raised when the remote endpoint answers with an error envelope.

    Transport, protocol and application failures all arrive here with the same
    shape: only the message differs.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
