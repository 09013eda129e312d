from __future__ import annotations

import csv
import io
from collections.abc import Iterable

from personalink_core.models import LinkRecord

CSV_HEADER = (
    "ID",
    "Title",
    "URL",
    "Author",
    "Description",
    "Category",
    "Icon",
    "Created At",
    "Popularity",
    "Is New",
)


def _yes_no(value: bool) -> str:
    return "Yes" if value else "No"


def links_to_csv(links: Iterable[LinkRecord]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for link in links:
        writer.writerow(
            (
                link.id,
                link.title,
                link.url,
                link.author or "",
                link.description or "",
                str(link.category),
                str(link.icon_tag),
                link.created_at.isoformat(),
                link.popularity,
                _yes_no(link.is_new),
            )
        )
    return buf.getvalue()


def links_to_text(links: Iterable[LinkRecord]) -> str:
    blocks = []
    for link in links:
        blocks.append(
            "\n".join(
                (
                    f"Title: {link.title}",
                    f"URL: {link.url}",
                    f"Author: {link.author or 'N/A'}",
                    f"Description: {link.description or 'N/A'}",
                    f"Category: {link.category}",
                    f"Created At: {link.created_at.isoformat()}",
                    f"Popularity: {link.popularity}",
                    f"Is New: {_yes_no(link.is_new)}",
                    "---",
                )
            )
        )
    return "\n\n".join(blocks)
