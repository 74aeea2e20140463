"""Engine wiring exceptions.

Engine operations themselves never wrap errors: transport failures and
malformed responses reach the caller as raised by the client.  These types
cover driver lookup and client construction only.
"""


class EngineError(Exception):
    """Base exception for search engine wiring errors."""


class DriverNotFoundError(EngineError):
    """Raised when a requested search driver is not registered."""


class ConfigurationError(EngineError):
    """Raised when engine configuration is invalid or a client package is missing."""
