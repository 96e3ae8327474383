"""Registry of transit providers selectable by name."""

from collections.abc import Callable

from nexttrip.data.config import NextTripConfig
from nexttrip.data.transport import Transport
from nexttrip.errors import UnknownProviderError
from nexttrip.providers.base import Provider
from nexttrip.providers.metrotransit import MetroTransitProvider

ProviderFactory = Callable[[NextTripConfig, Transport], Provider]


class ProviderRegistry:
    """Maps provider names to factories that build them."""

    def __init__(self) -> None:
        self._factories: dict[str, ProviderFactory] = {}

    def register(self, name: str, factory: ProviderFactory) -> None:
        self._factories[name] = factory

    def available(self) -> list[str]:
        return sorted(self._factories)

    def get_provider(self, name: str, config: NextTripConfig, transport: Transport) -> Provider:
        """Build the provider registered under name.

        Raises:
            UnknownProviderError: If nothing is registered under name.
        """
        factory = self._factories.get(name)
        if factory is None:
            raise UnknownProviderError(name)
        return factory(config, transport)


def _metrotransit(config: NextTripConfig, transport: Transport) -> Provider:
    return MetroTransitProvider(
        transport,
        base_url=config.base_url,
        use_sandbox=config.use_sandbox,
    )


def default_registry() -> ProviderRegistry:
    """Create a registry with the built-in providers."""
    registry = ProviderRegistry()
    registry.register("metrotransit", _metrotransit)
    return registry
