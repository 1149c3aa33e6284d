"""SSO portal exceptions for error handling."""


class PortalError(Exception):
    """Base exception for all SSO portal operations."""
    pass


class PortalTransportError(PortalError):
    """Network-level failure talking to the portal (DNS, TCP, TLS, timeout).

    Attributes:
        endpoint: URL that could not be reached
        reason: Description of the underlying failure
    """

    def __init__(self, endpoint: str, reason: str):
        self.endpoint = endpoint
        self.reason = reason
        super().__init__(f"{endpoint}: {reason}")


class PortalAPIError(PortalError):
    """Non-success HTTP status returned by the portal.

    Attributes:
        status_code: HTTP status code
        message: Response body text
        endpoint: API endpoint that failed
    """

    def __init__(self, status_code: int, message: str, endpoint: str):
        self.status_code = status_code
        self.message = message
        self.endpoint = endpoint
        super().__init__(f"[{status_code}] {endpoint}: {message}")


class PortalDecodeError(PortalError):
    """Response body does not match the expected JSON shape.

    Raised separately from transport and status errors because it points
    at a change in the portal's API contract rather than an outage.
    """

    def __init__(self, endpoint: str, reason: str):
        self.endpoint = endpoint
        self.reason = reason
        super().__init__(f"Unexpected response from {endpoint}: {reason}")
