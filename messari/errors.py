class MessariError(Exception):
    """Base class for errors raised by the Messari client."""


class MessariConfigError(MessariError, ValueError):
    """Raised when the client is constructed with invalid configuration."""


class MessariRequestError(MessariError):
    """Raised when a request fails before a usable envelope is decoded."""
