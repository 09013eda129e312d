from __future__ import annotations

from datetime import UTC, datetime

import pytest

from personalink_core.catalog import filter_links
from personalink_core.models import LinkCategory, LinkRecord


def _link(link_id: str, day: int, popularity: int, **kwargs) -> LinkRecord:  # noqa: ANN003
    kwargs.setdefault("category", LinkCategory.WEBSITE)
    return LinkRecord(
        id=link_id,
        title=kwargs.pop("title", f"Link {link_id}"),
        url=f"https://{link_id}.example",
        created_at=datetime(2026, 1, day, tzinfo=UTC),
        popularity=popularity,
        **kwargs,
    )


LINKS = [
    _link("a", 1, 90, author="Mozilla", description="Web docs"),
    _link("b", 3, 10, is_new=True, category=LinkCategory.BOOK, title="Rust Book"),
    _link("c", 2, 50, is_new=True, category=LinkCategory.YOUTUBE_VIDEO),
]


def test_default_view_is_newest_first() -> None:
    assert [link.id for link in filter_links(LINKS)] == ["b", "c", "a"]


def test_popular_view() -> None:
    assert [link.id for link in filter_links(LINKS, view="popular")] == ["a", "c", "b"]


def test_newly_added_view() -> None:
    assert [link.id for link in filter_links(LINKS, view="newly_added")] == ["b", "c"]


def test_category_view_and_search() -> None:
    assert [link.id for link in filter_links(LINKS, view="book")] == ["b"]
    assert [link.id for link in filter_links(LINKS, search="mozilla")] == ["a"]
    assert [link.id for link in filter_links(LINKS, search="DOCS")] == ["a"]
    assert filter_links(LINKS, search="rust", view="website") == []


def test_unknown_view_is_rejected() -> None:
    with pytest.raises(ValueError):
        filter_links(LINKS, view="bogus")
