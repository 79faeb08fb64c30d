"""Errors raised by external collaborators."""


class ProviderError(Exception):
    """Base class for weather, news and AI provider failures."""

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(f"{provider}: {message}")
        self.provider = provider


class ProviderUnavailableError(ProviderError):
    """The provider could not be reached or returned an unusable payload."""


class ProviderTimeoutError(ProviderError):
    """The provider did not answer within the allotted time."""


class EnhancementError(ProviderError):
    """The AI enhancer failed to produce a usable sentence."""


__all__ = ["EnhancementError", "ProviderError", "ProviderTimeoutError", "ProviderUnavailableError"]
