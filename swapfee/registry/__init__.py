"""Token registry: resolves asset ids to token attributes."""

from swapfee.registry.base import RegistryNotReadyError, TokenRegistry, TokenRegistryFetchError
from swapfee.registry.cached import CachedTokenRegistry
from swapfee.registry.static import StaticTokenRegistry

__all__ = [
    "CachedTokenRegistry",
    "RegistryNotReadyError",
    "StaticTokenRegistry",
    "TokenRegistry",
    "TokenRegistryFetchError",
]
