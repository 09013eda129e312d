from __future__ import annotations

import random
from collections.abc import Callable
from datetime import UTC, datetime
from urllib.parse import urlparse
from uuid import uuid4

from personalink_core.errors import LinkValidationError
from personalink_core.icons import classify_icon
from personalink_core.models import LinkCategory, LinkRecord, RawSuggestion

# Freshly ingested links have no usage signal yet; they start in the low band.
NEW_LINK_POPULARITY_CEILING = 50


def new_link_id() -> str:
    return uuid4().hex


def utc_now() -> datetime:
    return datetime.now(UTC)


def is_http_url(url: str) -> bool:
    if not url or any(ch.isspace() for ch in url):
        return False
    try:
        parsed = urlparse(url)
        if parsed.scheme not in {"http", "https"}:
            return False
        return bool(parsed.hostname)
    except ValueError:
        # e.g. an unbalanced IPv6 bracket: "http://[::1"
        return False


def _optional_text(value: str | None) -> str | None:
    value = (value or "").strip()
    return value or None


def _coerce_category(value: LinkCategory | str) -> LinkCategory:
    try:
        return LinkCategory(value)
    except ValueError as e:
        raise LinkValidationError(f"Unknown link category: {value!r}") from e


def normalize_suggestion(
    raw: RawSuggestion,
    *,
    id_factory: Callable[[], str] = new_link_id,
    clock: Callable[[], datetime] = utc_now,
    rng: random.Random | None = None,
) -> LinkRecord:
    """
    Builds a storage-ready record from one suggestion.

    Each call consumes a fresh id, so normalizing the same suggestion twice yields two
    distinct records.
    """
    title = (raw.title or "").strip()
    # The url is the dedup key; it is stored exactly as deduplicated, never trimmed.
    url = raw.url or ""
    if not title:
        raise LinkValidationError("Suggested link has an empty title.")
    if not url.strip():
        raise LinkValidationError(f"Suggested link {title!r} has an empty url.")
    if not is_http_url(url):
        raise LinkValidationError(f"Suggested link {title!r} has a malformed url: {url!r}")
    category = _coerce_category(raw.category)

    rng = rng or random.Random()
    return LinkRecord(
        id=id_factory(),
        title=title,
        url=url,
        category=category,
        created_at=clock(),
        icon_tag=classify_icon(raw.icon_keywords),
        author=_optional_text(raw.author),
        description=_optional_text(raw.description),
        popularity=rng.randrange(NEW_LINK_POPULARITY_CEILING),
        is_new=True,
    )
