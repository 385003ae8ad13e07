"""Display names for models and providers.

Lookups go through a pluggable resolver so that the aggregation pipeline
never depends on the network:
- OfflineResolver: Knows nothing; every lookup falls back to formatting
- ModelsDevResolver: Fetches the models.dev catalogue once, with a timeout

When a resolver has no answer, names are derived from the identifier itself
(e.g. 'claude-sonnet-4-5' becomes 'Claude Sonnet 4 5').
"""

import logging
import re
from typing import Dict, Optional

import requests

from .constants import MODELS_API_TIMEOUT_SECONDS, MODELS_API_URL, UNKNOWN_ID

logger = logging.getLogger(__name__)

MODEL = "model"
PROVIDER = "provider"
MODEL_PROVIDER = "model_provider"


class DisplayNameResolver:
    """Resolve identifiers to human-readable names.

    Subclasses implement :meth:`lookup`; returning None means "no idea" and
    triggers the formatting fallback.
    """

    def lookup(self, kind: str, identifier: str) -> Optional[str]:
        """Look up ``identifier`` of the given kind ('model', 'provider',
        or 'model_provider' for the provider id that owns a model)."""
        raise NotImplementedError


class OfflineResolver(DisplayNameResolver):
    """Resolver that never has an answer."""

    def lookup(self, kind: str, identifier: str) -> Optional[str]:
        return None


class ModelsDevResolver(DisplayNameResolver):
    """Resolver backed by the models.dev catalogue.

    The catalogue is fetched lazily on the first lookup and cached for the
    lifetime of the resolver. Any failure leaves an empty catalogue behind,
    so later lookups fall back without retrying.
    """

    def __init__(self, url: str = MODELS_API_URL, timeout: float = MODELS_API_TIMEOUT_SECONDS):
        self.url = url
        self.timeout = timeout
        self._catalogue: Optional[Dict[str, Dict[str, str]]] = None

    def fetch(self) -> Dict[str, Dict[str, str]]:
        """Fetch and index the catalogue (cached after the first call)."""
        if self._catalogue is not None:
            return self._catalogue

        catalogue: Dict[str, Dict[str, str]] = {MODEL: {}, PROVIDER: {}, MODEL_PROVIDER: {}}
        try:
            response = requests.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("Failed to fetch models.dev data, using fallbacks: %s", e)
            self._catalogue = catalogue
            return catalogue

        if isinstance(data, dict):
            for provider_id, provider_data in data.items():
                if not isinstance(provider_data, dict):
                    continue
                if isinstance(provider_data.get("name"), str):
                    catalogue[PROVIDER][provider_id] = provider_data["name"]
                models = provider_data.get("models")
                if not isinstance(models, dict):
                    continue
                for model_id, model_data in models.items():
                    if isinstance(model_data, dict) and isinstance(model_data.get("name"), str):
                        catalogue[MODEL][model_id] = model_data["name"]
                        catalogue[MODEL_PROVIDER][model_id] = provider_id

        self._catalogue = catalogue
        return catalogue

    def lookup(self, kind: str, identifier: str) -> Optional[str]:
        return self.fetch().get(kind, {}).get(identifier)


def format_model_id_as_name(model_id: str) -> str:
    """Format a model id for display without a catalogue.

    Segments split on '-' or '_' are capitalized, except those starting with
    a digit.

    Example:
        >>> format_model_id_as_name("claude-3_5-sonnet")
        'Claude 3 5 Sonnet'
    """
    parts = re.split(r"[-_]", model_id)
    return " ".join(p if p[:1].isdigit() else p[:1].upper() + p[1:] for p in parts)


def format_provider_id_as_name(provider_id: str) -> str:
    """Capitalize the first letter of a provider id."""
    return provider_id[:1].upper() + provider_id[1:]


def model_display_name(model_id: str, resolver: Optional[DisplayNameResolver] = None) -> str:
    """Human-readable name of a model."""
    name = resolver.lookup(MODEL, model_id) if resolver else None
    return name or format_model_id_as_name(model_id)


def provider_display_name(
    provider_id: str, resolver: Optional[DisplayNameResolver] = None
) -> str:
    """Human-readable name of a provider."""
    name = resolver.lookup(PROVIDER, provider_id) if resolver else None
    return name or format_provider_id_as_name(provider_id)


def model_provider(model_id: str, resolver: Optional[DisplayNameResolver] = None) -> str:
    """Provider id owning a model according to the resolver ('unknown' if none)."""
    provider_id = resolver.lookup(MODEL_PROVIDER, model_id) if resolver else None
    return provider_id or UNKNOWN_ID
