from __future__ import annotations

import csv
import io
from datetime import UTC, datetime

from personalink_core.export import CSV_HEADER, links_to_csv, links_to_text
from personalink_core.models import IconTag, LinkCategory, LinkRecord

LINK = LinkRecord(
    id="42",
    title='Say "hi", world',
    url="https://example.com/?a=1,2",
    category=LinkCategory.WEBSITE,
    created_at=datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC),
    icon_tag=IconTag.WEBSITE,
    description="line one\nline two",
    popularity=12,
    is_new=True,
)


def test_csv_quotes_and_round_trips_through_reader() -> None:
    rows = list(csv.reader(io.StringIO(links_to_csv([LINK]))))
    assert tuple(rows[0]) == CSV_HEADER
    assert rows[1] == [
        "42",
        'Say "hi", world',
        "https://example.com/?a=1,2",
        "",
        "line one\nline two",
        "website",
        "website",
        "2026-01-02T03:04:05+00:00",
        "12",
        "Yes",
    ]


def test_csv_empty_has_header_only() -> None:
    assert links_to_csv([]) == ",".join(CSV_HEADER) + "\n"


def test_text_export_blocks() -> None:
    text = links_to_text([LINK, LINK])
    assert text.count("---") == 2
    assert "Author: N/A" in text
    assert "Is New: Yes" in text
    assert "Category: website" in text
