import argparse
import asyncio
import logging
import sys
import time

from pydantic import ValidationError

from nexttrip.data.config import NextTripConfig, get_config
from nexttrip.data.transport import NextTripClient
from nexttrip.errors import NextTripError
from nexttrip.providers.registry import ProviderRegistry, default_registry
from nexttrip.services.departures import minutes_until

logger = logging.getLogger(__name__)


async def run_lookup(
    route: str,
    stop: str,
    direction: str,
    config: NextTripConfig,
    registry: ProviderRegistry | None = None,
) -> int:
    """Look up the next departure time for the given queries."""
    registry = registry or default_registry()

    async with NextTripClient() as transport:
        provider = registry.get_provider(config.provider, config, transport)
        return await provider.get_next_trip(route, stop, direction)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="nexttrip",
        description="Gets the next time transit will be at the specified stop",
    )
    parser.add_argument("route", help="Route name, e.g. 'METRO Blue Line'")
    parser.add_argument("stop", help="Stop name, e.g. 'Target Field'")
    parser.add_argument("direction", help="Direction, e.g. 'south'")
    parser.add_argument(
        "--provider",
        default=None,
        help="Transit provider (default: metrotransit or NEXTTRIP_PROVIDER env var)",
    )
    parser.add_argument(
        "--sandbox",
        action="store_true",
        help="Use the provider's sandbox environment",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    overrides = {}
    if args.provider:
        overrides["provider"] = args.provider
    if args.sandbox:
        overrides["use_sandbox"] = True

    try:
        config = get_config().model_copy(update=overrides)
        departure_time = asyncio.run(run_lookup(args.route, args.stop, args.direction, config))
    except (NextTripError, ValidationError) as e:
        logger.debug("Lookup failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"{minutes_until(departure_time, time.time())} Minutes")
    return 0


if __name__ == "__main__":
    sys.exit(main())
