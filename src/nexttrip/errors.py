"""Errors raised while resolving a next trip.

Every failure in the resolution pipeline is a distinct subclass of
NextTripError so callers can report cause-specific messages.
"""


class NextTripError(Exception):
    """Base class for all next-trip lookup failures."""


class NotFoundError(NextTripError):
    """No route, direction, or stop matched the user's query."""

    def __init__(self, kind: str, query: str):
        self.kind = kind
        self.query = query
        super().__init__(f"no {kind} found that matches {query}")


class StopClosedError(NextTripError):
    """An alert on the departure bundle marks the stop closed."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"the stop is closed due to {reason}")


class NoDeparturesError(NextTripError):
    """The stop is open but has no upcoming departures."""

    def __init__(self):
        super().__init__("no upcoming departures for this route")


class TransportError(NextTripError):
    """The HTTP request failed or returned a non-success status."""


class DecodeError(NextTripError):
    """The response body was not valid JSON of the expected shape."""


class UnknownProviderError(NextTripError):
    """No provider is registered under the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown transit provider: {name}")
