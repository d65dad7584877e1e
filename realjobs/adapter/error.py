"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ProviderError(AdapterError):
    """An external provider returned an error or an unusable response."""

    pass


class ExternalServiceDegradedError(ProviderError):
    """The provider is unavailable or not configured.

    Callers are expected to fall back to a safe default.
    """

    pass
