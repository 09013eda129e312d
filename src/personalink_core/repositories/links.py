from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

import psycopg

from personalink_core.errors import PersistenceFailed, StorageUnavailable
from personalink_core.models import IconTag, LinkCategory, LinkRecord

_COLUMNS = """
  id, title, url, author, description,
  icon_tag, category, created_at, popularity, is_new
"""


def _row_to_link(row: tuple) -> LinkRecord:
    return LinkRecord(
        id=row[0],
        title=row[1],
        url=row[2],
        author=row[3],
        description=row[4],
        icon_tag=IconTag(row[5]),
        category=LinkCategory(row[6]),
        created_at=row[7],
        popularity=row[8],
        is_new=row[9],
    )


class LinkRepository:
    """Postgres-backed `LinkStore` over the `useful_links` table."""

    def __init__(self, conn: psycopg.Connection):
        self._conn = conn

    def _rollback(self) -> None:
        # A dropped connection cannot roll back; the caller raises the typed error either way.
        if self._conn.closed:
            return
        try:
            self._conn.rollback()
        except psycopg.OperationalError:
            return

    def _read(self, sql: str, params: tuple | None = None) -> list[tuple]:
        try:
            rows = self._conn.execute(sql, params).fetchall()
            # End the implicit read transaction so the next batch starts clean.
            self._conn.commit()
        except psycopg.Error as e:
            self._rollback()
            raise StorageUnavailable(f"Reading useful_links failed: {e}") from e
        return rows

    def list_known_urls(self) -> set[str]:
        return {r[0] for r in self._read("select url from useful_links")}

    def commit_batch(self, records: Sequence[LinkRecord]) -> list[LinkRecord]:
        sql = f"""
        insert into useful_links (
          id, title, url, author, description,
          icon_tag, category, created_at, popularity, is_new
        ) values (
          %(id)s, %(title)s, %(url)s, %(author)s, %(description)s,
          %(icon_tag)s, %(category)s, coalesce(%(created_at)s, now()), %(popularity)s, %(is_new)s
        )
        returning {_COLUMNS}
        """
        stored: list[LinkRecord] = []
        try:
            for rec in records:
                row = self._conn.execute(
                    sql,
                    {
                        "id": rec.id,
                        "title": rec.title,
                        "url": rec.url,
                        "author": rec.author,
                        "description": rec.description,
                        "icon_tag": str(rec.icon_tag),
                        "category": str(rec.category),
                        "created_at": rec.created_at,
                        "popularity": rec.popularity,
                        "is_new": rec.is_new,
                    },
                ).fetchone()
                stored.append(_row_to_link(row))
            self._conn.commit()
        except psycopg.Error as e:
            self._rollback()
            raise PersistenceFailed(f"Batch insert of {len(records)} links failed: {e}") from e
        return stored

    def list_all(self, *, newest_first: bool = True) -> list[LinkRecord]:
        direction = "desc" if newest_first else "asc"
        rows = self._read(f"select {_COLUMNS} from useful_links order by created_at {direction}, id")
        return [_row_to_link(r) for r in rows]

    def get_link(self, link_id: str) -> LinkRecord | None:
        rows = self._read(f"select {_COLUMNS} from useful_links where id=%s", (link_id,))
        if not rows:
            return None
        return _row_to_link(rows[0])

    def clear_new_flags(self, *, created_before: datetime) -> int:
        try:
            cur = self._conn.execute(
                """
                update useful_links
                set is_new=false
                where is_new and created_at < %s
                """,
                (created_before,),
            )
            self._conn.commit()
        except psycopg.Error as e:
            self._rollback()
            raise PersistenceFailed(f"Clearing new flags failed: {e}") from e
        return cur.rowcount
