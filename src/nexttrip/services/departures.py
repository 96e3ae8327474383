"""Departure selection: alert gating, ordering, and time-until."""

import logging
from collections.abc import Sequence

from nexttrip.errors import NoDeparturesError, StopClosedError
from nexttrip.models.nextrip import Alert, Departure, DepartureBundle

logger = logging.getLogger(__name__)


def check_alerts(alerts: Sequence[Alert]) -> None:
    """Raise if any alert closes the stop.

    Alerts are checked in the order returned; the first closure wins.

    Raises:
        StopClosedError: With the text of the first closing alert.
    """
    for alert in alerts:
        if alert.stop_closed:
            logger.debug(f"Stop closed: {alert.alert_text}")
            raise StopClosedError(alert.alert_text)


def earliest_departure(departures: Sequence[Departure]) -> Departure:
    """Return the earliest departure.

    sorted() is stable, so equal times keep their original order.

    Raises:
        NoDeparturesError: If there are no departures.
    """
    if not departures:
        raise NoDeparturesError()
    return sorted(departures, key=lambda d: d.departure_time)[0]


def choose_departure(bundle: DepartureBundle) -> Departure:
    """Pick the next departure from a bundle.

    Closure alerts take precedence over any departures present.

    Raises:
        StopClosedError: If an alert closes the stop.
        NoDeparturesError: If the stop is open but nothing is scheduled.
    """
    check_alerts(bundle.alerts)
    return earliest_departure(bundle.departures)


def minutes_until(departure_time: int, now: float) -> int:
    """Calculate whole minutes from now to a departure.

    Args:
        departure_time: Departure time in epoch seconds.
        now: Current time in epoch seconds.

    Returns:
        Minutes until departure, truncated toward zero (negative if already gone).
    """
    return int((departure_time - now) / 60)
