from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime

from personalink_core.errors import PersistenceFailed, StorageUnavailable
from personalink_core.models import LinkRecord


class InMemoryLinkStore:
    """
    Process-local `LinkStore`. Each instance owns its own collection.

    `fail_reads` / `fail_commits` simulate an unreachable backend.
    """

    def __init__(
        self,
        records: Sequence[LinkRecord] = (),
        *,
        fail_reads: bool = False,
        fail_commits: bool = False,
    ):
        self._records: dict[str, LinkRecord] = {}
        self.fail_reads = fail_reads
        self.fail_commits = fail_commits
        self.commit_calls = 0
        if records:
            self._insert_all(records)

    def _insert_all(self, records: Sequence[LinkRecord]) -> list[LinkRecord]:
        urls = {r.url for r in self._records.values()}
        ids = set(self._records)
        staged: dict[str, LinkRecord] = {}
        for rec in records:
            if rec.id in ids or rec.id in staged:
                raise PersistenceFailed(f"Duplicate link id: {rec.id}")
            if rec.url in urls:
                raise PersistenceFailed(f"Duplicate link url: {rec.url}")
            urls.add(rec.url)
            staged[rec.id] = rec
        self._records.update(staged)
        return list(staged.values())

    def list_known_urls(self) -> set[str]:
        if self.fail_reads:
            raise StorageUnavailable("In-memory store is configured to fail reads.")
        return {r.url for r in self._records.values()}

    def commit_batch(self, records: Sequence[LinkRecord]) -> list[LinkRecord]:
        self.commit_calls += 1
        if self.fail_commits:
            raise PersistenceFailed("In-memory store is configured to fail commits.")
        return self._insert_all(records)

    def list_all(self, *, newest_first: bool = True) -> list[LinkRecord]:
        if self.fail_reads:
            raise StorageUnavailable("In-memory store is configured to fail reads.")
        return sorted(self._records.values(), key=lambda r: r.created_at, reverse=newest_first)

    def clear_new_flags(self, *, created_before: datetime) -> int:
        stale = [r for r in self._records.values() if r.is_new and r.created_at < created_before]
        for rec in stale:
            self._records[rec.id] = replace(rec, is_new=False)
        return len(stale)
