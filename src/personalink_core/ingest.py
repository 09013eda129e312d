from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime

from personalink_core.dedup import partition_candidates
from personalink_core.errors import LinkValidationError
from personalink_core.models import LinkRecord, RawSuggestion
from personalink_core.normalize import new_link_id, normalize_suggestion, utc_now
from personalink_core.storage.base import LinkStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InvalidCandidate:
    candidate: RawSuggestion
    reason: str


@dataclass(frozen=True)
class IngestReport:
    admitted: list[LinkRecord] = field(default_factory=list)
    duplicates: list[RawSuggestion] = field(default_factory=list)
    invalid: list[InvalidCandidate] = field(default_factory=list)

    @property
    def nothing_new(self) -> bool:
        return not self.admitted


class LinkIngestor:
    """
    Merges suggested links into a `LinkStore` without duplicating urls.

    One call reads the known urls once, filters and normalizes in memory, then writes a
    single batch. Storage and persistence failures propagate as `StorageUnavailable` and
    `PersistenceFailed`; an invalid candidate only drops itself.
    """

    def __init__(
        self,
        store: LinkStore,
        *,
        id_factory: Callable[[], str] = new_link_id,
        clock: Callable[[], datetime] = utc_now,
        rng: random.Random | None = None,
    ):
        self._store = store
        self._id_factory = id_factory
        self._clock = clock
        self._rng = rng or random.Random()

    def ingest(self, candidates: Sequence[RawSuggestion]) -> list[LinkRecord]:
        return self.ingest_report(candidates).admitted

    def ingest_report(self, candidates: Sequence[RawSuggestion]) -> IngestReport:
        known_urls = self._store.list_known_urls()

        dedup = partition_candidates(candidates, known_urls)

        records: list[LinkRecord] = []
        invalid: list[InvalidCandidate] = []
        for candidate in dedup.admitted:
            try:
                records.append(
                    normalize_suggestion(
                        candidate,
                        id_factory=self._id_factory,
                        clock=self._clock,
                        rng=self._rng,
                    )
                )
            except LinkValidationError as e:
                logger.warning("Dropping invalid link suggestion %r: %s", candidate.url, e)
                invalid.append(InvalidCandidate(candidate=candidate, reason=str(e)))

        committed = self._store.commit_batch(records) if records else []

        logger.info(
            "Ingested %d of %d suggested links (%d duplicates, %d invalid)",
            len(committed),
            len(candidates),
            len(dedup.rejected),
            len(invalid),
        )
        return IngestReport(admitted=committed, duplicates=dedup.rejected, invalid=invalid)
