from typing import Optional, Any


class ClickatellError(Exception):
    """Base exception for all Clickatell client errors."""
    def __init__(self, message: str, status_code: Optional[int] = None, details: Any = None):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class InvalidEncodingError(ClickatellError, ValueError):
    """Raised when the message is not well-formed Unicode text. Never retried."""
    pass


class InvalidNumberError(ClickatellError, ValueError):
    """Raised when the destination is not a digits-only international number."""
    pass


class AuthenticationError(ClickatellError):
    """Raised when no valid session could be obtained from the gateway."""
    pass


class GatewayResponseError(ClickatellError):
    """Raised when the gateway answers with an unexpected body or a 4xx status."""
    pass


class ServiceUnavailableError(ClickatellError):
    """Raised when the gateway is unreachable or returns a 5xx status."""
    pass


class ServiceTimeoutError(ServiceUnavailableError):
    """Raised specifically on timeouts."""
    pass
