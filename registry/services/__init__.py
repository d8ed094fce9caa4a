"""Registry service wiring.

The store and oracle classes are chosen by settings so deployments can swap
them without touching the service.
"""

from functools import lru_cache

from django.conf import settings
from django.utils.module_loading import import_string

from registry.services.event_registry import EventRegistry, parse_event_id

__all__ = ["EventRegistry", "get_event_registry", "parse_event_id"]


@lru_cache(maxsize=1)
def get_event_registry() -> EventRegistry:
    """Return the process-wide registry built from settings."""
    store_class = import_string(settings.REGISTRY_EVENT_STORE)
    oracle_class = import_string(settings.REGISTRY_CREDENTIAL_ORACLE)
    return EventRegistry(store=store_class(), oracle=oracle_class())
