from personalink_core.storage.base import LinkStore
from personalink_core.storage.memory import InMemoryLinkStore

__all__ = ["InMemoryLinkStore", "LinkStore"]
