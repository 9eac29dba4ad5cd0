"""Provider factory: selects the knowledge-base adapter by name.

The factory keeps a registry of known adapters. New adapters are
registered with ``register_provider`` or by adding an entry in
``_register_builtin_adapters``.

Usage::

    from planetary_atlas.providers.factory import get_provider

    provider = get_provider("wikipedia", client=client)
    page = await provider.lookup("Olympus Mons")

The provider name is read from the ``ATLAS_KNOWLEDGE_BASE_PROVIDER``
environment variable via ``AtlasConfig.knowledge_base_provider``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from planetary_atlas.models.knowledge import ProviderConfig
from planetary_atlas.providers.base import KnowledgeBaseProvider, ProviderError

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Provider name constants
# ---------------------------------------------------------------------------

WIKIPEDIA = "wikipedia"

# ---------------------------------------------------------------------------
# Lazy-import adapter registry
# ---------------------------------------------------------------------------

# Each entry maps a provider name to a zero-argument callable returning the
# adapter class, so an adapter's module is imported only when selected.

_ADAPTER_REGISTRY: dict[str, Callable[[], type[KnowledgeBaseProvider]]] = {}


def _register_builtin_adapters() -> None:
    """Register the built-in adapters (called once, lazily)."""

    def _wikipedia() -> type[KnowledgeBaseProvider]:
        from planetary_atlas.providers.wikipedia import WikipediaAdapter

        return WikipediaAdapter

    _ADAPTER_REGISTRY[WIKIPEDIA] = _wikipedia


def _ensure_registry() -> None:
    if not _ADAPTER_REGISTRY:
        _register_builtin_adapters()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def register_provider(
    name: str,
    loader: Callable[[], type[KnowledgeBaseProvider]],
) -> None:
    """Register a custom adapter, e.g. a test double.

    Args:
        name: Provider name (e.g. ``"my_wiki"``).
        loader: A zero-argument callable that returns the adapter class.

    Raises:
        ValueError: If the name is empty.
    """
    if not name:
        msg = "Provider name must be non-empty"
        raise ValueError(msg)
    _ensure_registry()
    _ADAPTER_REGISTRY[name] = loader
    logger.debug("Registered knowledge-base adapter: %s", name)


def get_provider(
    name: str,
    config: ProviderConfig | None = None,
    *,
    client: httpx.AsyncClient | None = None,
) -> KnowledgeBaseProvider:
    """Create and return a knowledge-base provider instance.

    Args:
        name: Provider identifier (e.g. ``"wikipedia"``).
        config: Optional ``ProviderConfig``. Defaults to one carrying just
            the provider name.
        client: Shared HTTP client handed to adapters that accept one.

    Raises:
        ProviderError: If the name is not registered or *config* names a
            different provider.
    """
    _ensure_registry()

    loader = _ADAPTER_REGISTRY.get(name)
    if loader is None:
        available = ", ".join(sorted(_ADAPTER_REGISTRY))
        msg = f"Unknown knowledge-base provider: {name!r}. Available: {available}"
        raise ProviderError(provider=name, message=msg)

    adapter_cls = loader()

    if config is None:
        config = ProviderConfig(name=name)
    elif config.name != name:
        msg = f"ProviderConfig.name {config.name!r} does not match requested provider {name!r}"
        raise ProviderError(provider=name, message=msg)

    logger.info("Creating knowledge-base provider: %s", name)
    if client is None:
        return adapter_cls(config)
    return adapter_cls(config, client=client)  # type: ignore[call-arg]


def list_providers() -> list[str]:
    """Return the names of all registered adapters."""
    _ensure_registry()
    return sorted(_ADAPTER_REGISTRY)
