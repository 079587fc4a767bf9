from collections.abc import Sequence
from typing import Any

import psycopg
from psycopg.rows import dict_row

from dialog_localizer.database.connection import get_connection
from dialog_localizer.database.models import DialogStringRecord, StringUpdate
from dialog_localizer.processor.exceptions import DialogStringNotFoundError
from dialog_localizer.sst.models import SstString

_SELECT_COLUMNS = "id, file_id, s_id, list_id, source, dest, masked_source"


class DialogStringsRepository:
    """Database operations for the dialog_strings table."""

    def __init__(self, batch_size: int = 1000) -> None:
        self._batch_size = batch_size

    def insert_many(
        self,
        conn: psycopg.Connection[Any],
        file_id: int,
        strings: Sequence[SstString],
    ) -> None:
        """Insert imported strings with an empty dest, in batches. Caller commits."""
        with conn.cursor() as cur:
            for start in range(0, len(strings), self._batch_size):
                batch = strings[start : start + self._batch_size]
                cur.executemany(
                    """
                    INSERT INTO dialog_strings (file_id, s_id, list_id, source, dest)
                    VALUES (%s, %s, %s, %s, '')
                    """,
                    [(file_id, s.s_id, s.list_id, s.source) for s in batch],
                )

    def delete_by_file(self, conn: psycopg.Connection[Any], file_id: int) -> None:
        """Remove every string of a file. Caller commits."""
        conn.execute("DELETE FROM dialog_strings WHERE file_id = %s", (file_id,))

    def list_all(self) -> list[DialogStringRecord]:
        return self._select(f"SELECT {_SELECT_COLUMNS} FROM dialog_strings ORDER BY id")

    def list_by_file(self, file_id: int) -> list[DialogStringRecord]:
        return self._select(
            f"SELECT {_SELECT_COLUMNS} FROM dialog_strings WHERE file_id = %s ORDER BY id",
            (file_id,),
        )

    def list_untranslated(self) -> list[DialogStringRecord]:
        """Strings whose dest is still empty."""
        return self._select(
            f"""
            SELECT {_SELECT_COLUMNS}
            FROM dialog_strings
            WHERE dest IS NULL OR dest = ''
            ORDER BY id
            """
        )

    def apply_masking(
        self,
        conn: psycopg.Connection[Any],
        updates: Sequence[StringUpdate],
    ) -> None:
        """Write masked_source/dest for every update. Caller commits."""
        with conn.cursor() as cur:
            cur.executemany(
                """
                UPDATE dialog_strings
                SET dest = %s, masked_source = %s
                WHERE id = %s
                """,
                [(u.dest, u.masked_source, u.id) for u in updates],
            )

    def update_dest_many(self, string_ids: Sequence[int], dest: str) -> None:
        """Store the same translation on several strings."""
        with get_connection() as conn:
            conn.execute(
                "UPDATE dialog_strings SET dest = %s WHERE id = ANY(%s)",
                (dest, list(string_ids)),
            )
            conn.commit()

    def update_dest(self, string_id: int, dest: str) -> None:
        """Overwrite the translation of one string.

        Raises:
            DialogStringNotFoundError: if no string with this ID exists.
        """
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    "UPDATE dialog_strings SET dest = %s WHERE id = %s",
                    (dest, string_id),
                )
                if cur.rowcount == 0:
                    raise DialogStringNotFoundError(f"Dialog string {string_id} not found")
            conn.commit()

    def _select(
        self, query: str, params: tuple[Any, ...] | None = None
    ) -> list[DialogStringRecord]:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(query, params)
                rows = cur.fetchall()

        return [
            DialogStringRecord(
                id=row["id"],
                file_id=row["file_id"],
                s_id=row["s_id"],
                list_id=row["list_id"],
                source=row["source"],
                dest=row["dest"],
                masked_source=row["masked_source"],
            )
            for row in rows
        ]
