from __future__ import annotations

from collections.abc import Iterable

from personalink_core.models import LinkCategory, LinkRecord

VIEWS = ("all", "newest", "popular", "newly_added")


def _matches(link: LinkRecord, term: str) -> bool:
    fields = (link.title, link.author or "", link.description or "")
    return any(term in f.lower() for f in fields)


def filter_links(
    links: Iterable[LinkRecord],
    *,
    search: str | None = None,
    view: str = "all",
) -> list[LinkRecord]:
    """
    Applies the links page's search box and view selector.

    `view` is one of `VIEWS` or a `LinkCategory` value. Category views keep storage order;
    the others sort newest first, except `popular`.
    """
    out = list(links)
    term = (search or "").strip().lower()
    if term:
        out = [link for link in out if _matches(link, term)]

    if view in ("all", "newest"):
        return sorted(out, key=lambda link: link.created_at, reverse=True)
    if view == "popular":
        return sorted(out, key=lambda link: link.popularity, reverse=True)
    if view == "newly_added":
        fresh = [link for link in out if link.is_new]
        return sorted(fresh, key=lambda link: link.created_at, reverse=True)
    try:
        category = LinkCategory(view)
    except ValueError as e:
        raise ValueError(f"Unknown links view: {view!r}") from e
    return [link for link in out if link.category == category]
