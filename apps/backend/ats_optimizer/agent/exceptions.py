class ProviderError(RuntimeError):
    """Raised when the underlying LLM provider fails"""


class ProviderConfigurationError(ProviderError):
    """Raised when a provider cannot be built because required settings are missing.

    Raised before any client is constructed, so callers can tell a
    misconfigured server apart from a failing remote service.
    """
