"""Error types raised by the EchoNest clients."""

from typing import Optional

import requests

# Network, DNS and timeout failures surface as the requests error unchanged.
TransportError = requests.RequestException


class EchoNestError(Exception):
    """Base class for errors raised by this package."""


class MissingRequiredOptionError(EchoNestError):
    """An operation needs an option that was neither configured nor passed."""
    
    def __init__(self, option: str, message: Optional[str] = None):
        self.option = option
        super().__init__(message or f"This operation requires the '{option}' option")


class RemoteApiError(EchoNestError):
    """The API answered with a non-success status block."""
    
    UNKNOWN_IDENTIFIER = 5  # "The Identifier specified does not exist"
    
    def __init__(self, code: int, message: str):
        self.code = code
        self.message = message
        super().__init__(message)


class MalformedResponseError(EchoNestError):
    """The response body does not follow the envelope contract."""
    
    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)
