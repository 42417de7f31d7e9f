class ExtractionError(Exception):
    """Raised when extraction and translation of a poster fails."""


class ConfigError(ExtractionError):
    """Raised when no API credential is configured for the extraction provider."""


class UpstreamError(ExtractionError):
    """Raised when the AI service returns no usable output."""


class UpstreamNetworkError(UpstreamError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class UpstreamValidationError(UpstreamError):
    """Raised when the parsed response does not match the incident record contract."""
