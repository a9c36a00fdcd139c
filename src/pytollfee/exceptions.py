"""Library exceptions."""

from __future__ import annotations


class TollFeeError(Exception):
    """Base exception for the library."""

    error_type = "unknown"
    default_error_code: str | None = None

    def __init__(
        self,
        message: str | None = None,
        *,
        error_code: str | None = None,
        detail: str | None = None,
        user_message: str | None = None,
    ) -> None:
        self.detail = detail if detail is not None else message
        super().__init__(message if message is not None else (self.detail or ""))
        self.error_code = error_code if error_code is not None else self.default_error_code
        self.user_message = user_message


class ValidationError(TollFeeError):
    """Raised when inputs fail validation."""

    error_type = "validation"
    default_error_code = "validation_error"


class ConfigError(TollFeeError):
    """Raised when the library is configured with unknown or broken settings."""

    error_type = "config"
    default_error_code = "config_error"


class HolidayLookupError(TollFeeError):
    """Raised when public holidays cannot be determined."""

    error_type = "holiday_lookup"
    default_error_code = "holiday_lookup_error"


class NetworkError(HolidayLookupError):
    """Raised when network communication with a holiday provider fails."""

    error_type = "network"
    default_error_code = "network_error"


class ProviderError(HolidayLookupError):
    """Raised when a holiday provider returns an error or unusable data."""

    error_type = "provider"
    default_error_code = "provider_error"
