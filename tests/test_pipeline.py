from __future__ import annotations

from collections.abc import Sequence

import pytest

from personalink_core.errors import UpstreamContractViolation
from personalink_core.models import ExistingLinkRef, RawSuggestion
from personalink_core.pipeline import suggest_new_links
from personalink_core.seed import seed_links
from personalink_core.storage.memory import InMemoryLinkStore
from personalink_core.suggestions import parse_suggestion_payload

from conftest import suggestion


class FakeSource:
    def __init__(self, batch: list[RawSuggestion] | None = None, error: Exception | None = None):
        self.batch = batch or []
        self.error = error
        self.calls: list[list[ExistingLinkRef]] = []

    def request_suggestions(self, existing: Sequence[ExistingLinkRef]) -> list[RawSuggestion]:
        self.calls.append(list(existing))
        if self.error:
            raise self.error
        return self.batch


def test_suggest_new_links_passes_existing_and_ingests() -> None:
    store = InMemoryLinkStore()
    seed_links(store)
    source = FakeSource(
        [
            suggestion("https://github.com/torvalds/linux", icon_keywords="code repository"),
            suggestion("https://new.example/", icon_keywords="website tool"),
        ]
    )

    report = suggest_new_links(store, source)

    assert len(source.calls[0]) == 24
    assert ExistingLinkRef(title="EveryCircuit", url="https://everycircuit.com/") in source.calls[0]
    assert [r.url for r in report.admitted] == ["https://new.example/"]
    assert len(report.duplicates) == 1


def test_short_upstream_batch_never_reaches_ingest() -> None:
    store = InMemoryLinkStore()
    payload = {
        "suggestedLinks": [
            {
                "title": f"R{i}",
                "url": f"https://r{i}.example",
                "description": "d",
                "category": "book",
                "iconKeywords": "book",
            }
            for i in range(3)
        ]
    }
    with pytest.raises(UpstreamContractViolation):
        parse_suggestion_payload(payload)

    source = FakeSource(error=UpstreamContractViolation("returned 3 links, expected exactly 5"))
    with pytest.raises(UpstreamContractViolation):
        suggest_new_links(store, source)
    assert store.commit_calls == 0
