"""Exceptions raised by bridge discovery.

A discovery call either returns a DiscoveryResult or raises one of these.
When raised from inside the collection loop, ``result`` carries whatever was
collected before the failure.
"""

from typing import Optional


class DiscoveryError(Exception):
    """Base class for discovery failures."""

    def __init__(self, message: str, result=None):
        super().__init__(message)
        self.result = result


class BindError(DiscoveryError):
    """The receiving endpoint could not be opened."""


class SendError(DiscoveryError):
    """The search request could not be sent."""


class ReceiveError(DiscoveryError):
    """A non-timeout transport error happened while collecting replies."""


class MalformedResponseError(DiscoveryError):
    """A reply violated the discovery protocol.

    Distinct from a reply that is merely irrelevant, which the validator
    reports by returning False.
    """

    def __init__(self, message: str, body: Optional[str] = None, result=None):
        super().__init__(message, result=result)
        self.body = body
