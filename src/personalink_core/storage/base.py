from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol

from personalink_core.models import LinkRecord


class LinkStore(Protocol):
    """
    Narrow read/write contract the ingestion pipeline needs from a backing store.

    Reads raise `StorageUnavailable`; `commit_batch` is all-or-nothing and raises
    `PersistenceFailed`.
    """

    def list_known_urls(self) -> set[str]: ...

    def commit_batch(self, records: Sequence[LinkRecord]) -> list[LinkRecord]: ...

    def list_all(self, *, newest_first: bool = True) -> list[LinkRecord]: ...

    def clear_new_flags(self, *, created_before: datetime) -> int: ...
