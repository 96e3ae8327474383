"""Shared fixtures: a scripted in-memory transport and sample NexTrip payloads."""

from collections.abc import Callable

import httpx
import pytest

from nexttrip.data.config import DEFAULT_BASE_URL


class ScriptedTransport:
    """In-memory transport that answers from a path -> response table.

    Values are JSON-serializable payloads, raw bytes (sent as the body), an
    int status code, or an exception instance to raise. Unknown paths get 404.
    """

    def __init__(self, responses: dict | None = None):
        self.responses = dict(responses or {})
        self.requests: list[httpx.Request] = []

    @property
    def paths(self) -> list[str]:
        return [str(r.url).removeprefix(DEFAULT_BASE_URL + "/") for r in self.requests]

    async def send(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = str(request.url).removeprefix(DEFAULT_BASE_URL + "/")

        if path not in self.responses:
            return httpx.Response(404, request=request)

        value = self.responses[path]
        if isinstance(value, Exception):
            raise value
        if isinstance(value, bytes):
            return httpx.Response(200, content=value, request=request)
        if isinstance(value, int):
            return httpx.Response(value, request=request)
        return httpx.Response(200, json=value, request=request)


@pytest.fixture
def routes() -> list[dict]:
    return [
        {"route_id": "4", "agency_id": 6, "route_label": "not right"},
        {"route_id": "1", "agency_id": 2, "route_label": "1234 Testroute 1234"},
    ]


@pytest.fixture
def directions() -> list[dict]:
    return [
        {"direction_id": 0, "direction_name": "Northbound"},
        {"direction_id": 1, "direction_name": "Southbound"},
    ]


@pytest.fixture
def stops() -> list[dict]:
    return [
        {"place_code": "TF2", "description": "Target Field Station Platform 2"},
        {"place_code": "TF1", "description": "Target Field Station Platform 1"},
        {"place_code": "WARE", "description": "Warehouse District/ Hennepin Ave Station"},
    ]


@pytest.fixture
def make_departure() -> Callable[..., dict]:
    """Factory for departures as returned by NexTrip."""

    def _make(departure_time: int, trip_id: str = "22847851-AUG22-RAIL-Weekday-03") -> dict:
        return {
            "actual": False,
            "trip_id": trip_id,
            "stop_id": 56335,
            "departure_text": "5:03",
            "departure_time": departure_time,
            "description": "to Mall of America",
            "gate": "1",
            "route_id": "901",
            "route_short_name": "Blue",
            "direction_id": 1,
            "direction_text": "SB",
            "schedule_relationship": "NoData",
        }

    return _make


@pytest.fixture
def make_bundle() -> Callable[..., dict]:
    """Factory for departure bundle responses."""

    def _make(departures: list[dict] | None = None, alerts: list[dict] | None = None) -> dict:
        return {
            "stops": [
                {
                    "stop_id": 56335,
                    "latitude": 44.982905,
                    "longitude": -93.277396,
                    "description": "Target Field Station Platform 1",
                }
            ],
            "alerts": alerts or [],
            "departures": departures or [],
        }

    return _make


@pytest.fixture
def scripted_transport() -> type[ScriptedTransport]:
    """The scripted transport class, for tests that need their own responses."""
    return ScriptedTransport


@pytest.fixture
def transport(routes, directions, stops, make_bundle, make_departure) -> ScriptedTransport:
    """A transport scripted with the full happy-path conversation."""
    return ScriptedTransport(
        {
            "routes": routes,
            "directions/1": directions,
            "stops/1/1": stops,
            "1/1/TF2": make_bundle([make_departure(1664229780), make_departure(1664230680)]),
        }
    )
