"""Wire models for the NexTrip v2 API.

All models are frozen snapshots decoded fresh on every request.
See https://svc.metrotransit.org/swagger/index.html
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class _Snapshot(BaseModel):
    """Base for NexTrip payloads.

    A JSON null in a field that has a default decodes to that default, so one
    null label does not reject the whole response.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name is not None:
            field = cls.model_fields[info.field_name]
            if not field.is_required():
                return field.get_default(call_default_factory=True)
        return value


class Route(_Snapshot):
    """A transit route."""

    route_id: str
    agency_id: int = 0
    route_label: str = ""


class Direction(_Snapshot):
    """A direction of travel, meaningful only for the route it came from."""

    direction_id: int
    direction_name: str = ""


class Stop(_Snapshot):
    """A stop served by a route in one direction.

    place_code is the key used when requesting departures.
    """

    stop_id: int = 0
    latitude: float = 0.0
    longitude: float = 0.0
    description: str = ""
    place_code: str = ""


class Alert(_Snapshot):
    """A service alert attached to a departure bundle."""

    stop_closed: bool = False
    alert_text: str = ""


class Departure(_Snapshot):
    """A single upcoming departure from a stop.

    Only departure_time drives selection; the rest is passed through as sent.
    """

    departure_time: int
    actual: Any = None
    trip_id: Any = None
    stop_id: Any = None
    departure_text: Any = None
    description: Any = None
    gate: Any = None
    route_id: Any = None
    route_short_name: Any = None
    direction_id: Any = None
    direction_text: Any = None
    schedule_relationship: Any = None


class DepartureBundle(_Snapshot):
    """Response for a route/direction/place triple."""

    stops: list[Stop] = []
    alerts: list[Alert] = []
    departures: list[Departure] = []
