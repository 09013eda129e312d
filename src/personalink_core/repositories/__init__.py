from personalink_core.repositories.links import LinkRepository

__all__ = ["LinkRepository"]
