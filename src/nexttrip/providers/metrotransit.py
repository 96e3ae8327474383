"""Metro Transit NexTrip provider.

Resolves free-text route, direction, and stop queries to NexTrip ids and
selects the next departure. Stages run strictly in sequence:

    route -> direction -> stop -> departure

Each stage makes one request and fails fast; nothing is retried.
"""

import logging
from typing import TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from nexttrip.data.config import DEFAULT_BASE_URL
from nexttrip.data.transport import Transport
from nexttrip.errors import DecodeError, NotFoundError, TransportError
from nexttrip.matching import first_match
from nexttrip.models.nextrip import Departure, DepartureBundle, Direction, Route, Stop
from nexttrip.services.departures import choose_departure

logger = logging.getLogger(__name__)

T = TypeVar("T")

_ROUTES = TypeAdapter(list[Route])
_DIRECTIONS = TypeAdapter(list[Direction])
_STOPS = TypeAdapter(list[Stop])
_BUNDLE = TypeAdapter(DepartureBundle)


class MetroTransitProvider:
    """Next-trip lookups against the Metro Transit NexTrip v2 API."""

    def __init__(
        self,
        transport: Transport,
        base_url: str = DEFAULT_BASE_URL,
        use_sandbox: bool = False,
    ):
        """Initialize the provider.

        Args:
            transport: Sends requests; an httpx.AsyncClient or a test double.
            base_url: NexTrip API root that resource paths are joined onto.
            use_sandbox: Accepted for forward compatibility; has no effect yet.
        """
        self._transport = transport
        self._base_url = base_url
        self.use_sandbox = use_sandbox

    def _url(self, path: str) -> str:
        return f"{self._base_url.rstrip('/')}/{path.lstrip('/')}"

    async def _request(self, path: str, adapter: TypeAdapter[T]) -> T:
        """GET a resource and decode it into the given type.

        Raises:
            TransportError: If the request fails or returns a non-2xx status.
            DecodeError: If the body is not JSON of the expected shape.
        """
        request = httpx.Request("GET", self._url(path))
        logger.debug(f"GET {request.url}")

        try:
            response = await self._transport.send(request)
        except httpx.HTTPError as e:
            raise TransportError(f"request to {request.url} failed: {e}") from e

        # Scripted transports may return responses with no request attached,
        # so the status is checked here rather than with raise_for_status()
        if not response.is_success:
            message = f"request to {request.url} failed with status {response.status_code}"
            raise TransportError(message) from httpx.HTTPStatusError(
                message, request=request, response=response
            )

        try:
            return adapter.validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(f"could not decode response from {request.url}: {e}") from e

    async def resolve_route(self, query: str) -> Route:
        """Find the first route whose label contains the query.

        Raises:
            NotFoundError: If no route label matches.
        """
        routes = await self._request("routes", _ROUTES)
        route = first_match(query, routes, lambda r: r.route_label)
        if route is None:
            raise NotFoundError("route", query)

        logger.debug(f"Resolved route {query!r} -> {route.route_id} ({len(routes)} scanned)")
        return route

    async def resolve_direction(self, query: str, route_id: str) -> Direction:
        """Find the first direction of a route whose name contains the query.

        Raises:
            NotFoundError: If no direction name matches.
        """
        directions = await self._request(f"directions/{route_id}", _DIRECTIONS)
        direction = first_match(query, directions, lambda d: d.direction_name)
        if direction is None:
            raise NotFoundError("direction", query)

        logger.debug(
            f"Resolved direction {query!r} -> {direction.direction_id} ({len(directions)} scanned)"
        )
        return direction

    async def resolve_stop(self, query: str, route_id: str, direction_id: str) -> Stop:
        """Find the first stop for a route and direction whose description contains the query.

        Raises:
            NotFoundError: If no stop description matches.
        """
        stops = await self._request(f"stops/{route_id}/{direction_id}", _STOPS)
        stop = first_match(query, stops, lambda s: s.description)
        if stop is None:
            raise NotFoundError("stop", query)

        logger.debug(f"Resolved stop {query!r} -> {stop.place_code} ({len(stops)} scanned)")
        return stop

    async def select_next_departure(
        self, route_id: str, direction_id: str, place_code: str
    ) -> Departure:
        """Fetch departures for a stop and return the earliest one.

        Raises:
            StopClosedError: If any alert marks the stop closed.
            NoDeparturesError: If nothing is scheduled.
        """
        bundle = await self._request(f"{route_id}/{direction_id}/{place_code}", _BUNDLE)
        return choose_departure(bundle)

    async def get_next_trip(self, route: str, stop: str, direction: str) -> int:
        """Resolve the queries and return the next departure time.

        Args:
            route: Free-text route query, e.g. "blue".
            stop: Free-text stop query, e.g. "target field".
            direction: Free-text direction query, e.g. "south".

        Returns:
            Departure time in epoch seconds.
        """
        r = await self.resolve_route(route)
        d = await self.resolve_direction(direction, r.route_id)
        direction_id = str(d.direction_id)
        s = await self.resolve_stop(stop, r.route_id, direction_id)
        departure = await self.select_next_departure(r.route_id, direction_id, s.place_code)

        logger.info(
            f"Next departure for route {r.route_id} at {s.place_code}: {departure.departure_time}"
        )
        return departure.departure_time
