"""Service exceptions mapped to HTTP responses by the app-level handler."""

from __future__ import annotations


class RelayServiceError(Exception):
    status_code: int = 500
    default_detail: str = "Service error"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.default_detail)
        self.detail = detail or self.default_detail


class ConfigurationError(RelayServiceError):
    default_detail = "Twilio credentials are not configured."


class ProviderError(RelayServiceError):
    default_detail = "Twilio request failed."
