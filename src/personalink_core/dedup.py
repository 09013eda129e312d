from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from personalink_core.models import RawSuggestion


@dataclass(frozen=True)
class DedupResult:
    admitted: list[RawSuggestion] = field(default_factory=list)
    rejected: list[RawSuggestion] = field(default_factory=list)


def partition_candidates(
    candidates: Sequence[RawSuggestion],
    known_urls: Iterable[str],
) -> DedupResult:
    """
    Splits candidates into admitted and rejected, first occurrence wins.

    The url is compared as an exact string: `http://x.com` and `http://x.com/` are
    different keys. `known_urls` is not modified.
    """
    seen = set(known_urls)
    admitted: list[RawSuggestion] = []
    rejected: list[RawSuggestion] = []
    for candidate in candidates:
        if candidate.url in seen:
            rejected.append(candidate)
            continue
        seen.add(candidate.url)
        admitted.append(candidate)
    return DedupResult(admitted=admitted, rejected=rejected)
