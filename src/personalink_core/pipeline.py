from __future__ import annotations

import logging

from personalink_core.ingest import IngestReport, LinkIngestor
from personalink_core.models import ExistingLinkRef
from personalink_core.storage.base import LinkStore
from personalink_core.suggestions import SuggestionSource

logger = logging.getLogger(__name__)


def suggest_new_links(
    store: LinkStore,
    source: SuggestionSource,
    *,
    ingestor: LinkIngestor | None = None,
) -> IngestReport:
    """
    The "suggest new links" action: ask the suggestion source for links the store does not
    have yet, then ingest whatever survives dedup and validation.

    An `UpstreamContractViolation` from the source stops the flow before anything is ingested.
    """
    existing = [ExistingLinkRef.from_record(r) for r in store.list_all()]
    candidates = source.request_suggestions(existing)
    logger.info("Received %d link suggestions (%d existing links)", len(candidates), len(existing))
    return (ingestor or LinkIngestor(store)).ingest_report(candidates)
