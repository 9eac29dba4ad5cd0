"""Knowledge-base provider adapters.

Implements the provider-agnostic adapter pattern:
- KnowledgeBaseProvider: Abstract base class defining the read interface
- WikipediaAdapter: MediaWiki action API

The active provider is selected via configuration.
"""

from planetary_atlas.providers.base import (
    KnowledgeBaseContractError,
    KnowledgeBaseError,
    KnowledgeBaseProvider,
    ProviderError,
)
from planetary_atlas.providers.factory import (
    WIKIPEDIA,
    get_provider,
    list_providers,
    register_provider,
)

__all__ = [
    "WIKIPEDIA",
    "KnowledgeBaseContractError",
    "KnowledgeBaseError",
    "KnowledgeBaseProvider",
    "ProviderError",
    "get_provider",
    "list_providers",
    "register_provider",
]
