from registry.stores.interfaces import EventStore
from registry.stores.memory_store import InMemoryEventStore

__all__ = ["EventStore", "InMemoryEventStore"]
