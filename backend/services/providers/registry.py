"""Lazy-loading provider registry.

Follows the same pattern as gemini_client.py: global singletons, created on
first use.
"""

import logging

from services.providers.base import BaseRecommendationProvider

logger = logging.getLogger(__name__)

_registry: dict[str, BaseRecommendationProvider] = {}


def _create_provider(name: str) -> BaseRecommendationProvider:
    """Factory: create a provider by name with deferred imports."""
    if name == "gemini":
        from services.providers.gemini import GeminiRecommendationProvider
        return GeminiRecommendationProvider()
    elif name == "heuristic":
        from services.providers.heuristic import HeuristicRecommendationProvider
        return HeuristicRecommendationProvider()
    else:
        raise ValueError(f"Unknown provider: {name}")


def get_provider(name: str) -> BaseRecommendationProvider:
    """Get a provider by name, creating it on first access."""
    if name not in _registry:
        logger.info("Creating recommendation provider: %s", name)
        _registry[name] = _create_provider(name)
    return _registry[name]


def clear() -> None:
    """Drop all providers. Useful for testing."""
    _registry.clear()
