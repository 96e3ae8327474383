"""Transit data providers."""

from nexttrip.providers.base import Provider
from nexttrip.providers.metrotransit import MetroTransitProvider
from nexttrip.providers.registry import ProviderRegistry, default_registry

__all__ = [
    "Provider",
    "MetroTransitProvider",
    "ProviderRegistry",
    "default_registry",
]
