class InvalidInputError(ValueError):
    """Raised when caller-supplied data breaks a model or forecast precondition."""

class ProviderError(RuntimeError):
    """Raised when the external data provider cannot produce a reading."""
