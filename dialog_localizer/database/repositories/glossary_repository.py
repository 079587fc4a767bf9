from collections.abc import Sequence
from typing import Any

import psycopg
from psycopg.rows import dict_row

from dialog_localizer.database.connection import get_connection
from dialog_localizer.glossary.models import DEFAULT_CATEGORY, GlossaryTerm


class GlossaryRepository:
    """Database operations for the glossary table."""

    def __init__(self, batch_size: int = 500) -> None:
        self._batch_size = batch_size

    def list_all(self) -> list[GlossaryTerm]:
        """Return every glossary term, ordered by term."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute("SELECT id, term, category FROM glossary ORDER BY term")
                rows = cur.fetchall()

        return [
            GlossaryTerm(
                id=row["id"],
                term=row["term"],
                category=row["category"] or DEFAULT_CATEGORY,
            )
            for row in rows
        ]

    def replace_all(self, conn: psycopg.Connection[Any], terms: Sequence[GlossaryTerm]) -> None:
        """Delete every term and insert *terms* in batches. Caller commits.

        Previously masked text referencing old ids stops resolving after this.
        """
        conn.execute("DELETE FROM glossary")
        with conn.cursor() as cur:
            for start in range(0, len(terms), self._batch_size):
                batch = terms[start : start + self._batch_size]
                cur.executemany(
                    "INSERT INTO glossary (id, term, category) VALUES (%s, %s, %s)",
                    [(t.id, t.term, t.category) for t in batch],
                )
