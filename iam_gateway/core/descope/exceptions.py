"""Descope-specific exceptions for error handling."""


class DescopeError(Exception):
    """Base exception for all Descope management operations."""
    pass


class DescopeAPIError(DescopeError):
    """HTTP error from the Descope management API.
    
    Attributes:
        status_code: HTTP status code (503 for transport failures)
        message: Error message from response
        endpoint: API endpoint that failed
    """
    
    def __init__(self, status_code: int, message: str, endpoint: str):
        self.status_code = status_code
        self.message = message
        self.endpoint = endpoint
        super().__init__(f"[{status_code}] {endpoint}: {message}")
    
    @property
    def is_not_found(self) -> bool:
        """Heuristic used by the handlers: Descope reports most missing
        entities as 400 with a "... not found" description."""
        if self.status_code == 404:
            return True
        return "not found" in (self.message or "").lower()


class DescopeConfigurationError(DescopeError):
    """Client cannot be built: project id or management key missing."""
    pass
