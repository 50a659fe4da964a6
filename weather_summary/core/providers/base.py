from __future__ import annotations


class ProviderError(RuntimeError):
    """Base provider error; the message is shown to API clients verbatim."""


class ProviderRequestError(ProviderError):
    """Raised when the HTTP request to the provider could not be completed."""


class ProviderReadError(ProviderError):
    """Raised when the provider's response body could not be read."""


class ProviderDecodeError(ProviderError):
    """Raised when the response body is not the expected JSON document."""


__all__ = ["ProviderError", "ProviderRequestError", "ProviderReadError", "ProviderDecodeError"]
