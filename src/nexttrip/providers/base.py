from typing import Protocol


class Provider(Protocol):
    """A transit provider that can answer next-trip queries."""

    async def get_next_trip(self, route: str, stop: str, direction: str) -> int:
        """Return the epoch time of the next departure matching the queries."""
        ...
