from typing import Any

import psycopg
from psycopg.rows import dict_row

from dialog_localizer.database.connection import get_connection
from dialog_localizer.database.models import DialogFileRecord
from dialog_localizer.sst.models import SstParams


class DialogFilesRepository:
    """Database operations for the dialog_files table."""

    def find_by_filename(
        self, conn: psycopg.Connection[Any], filename: str
    ) -> DialogFileRecord | None:
        with conn.cursor(row_factory=dict_row) as cur:
            cur.execute(
                """
                SELECT id, filename, addon, source_lang, dest_lang, version
                FROM dialog_files
                WHERE filename = %s
                """,
                (filename,),
            )
            row = cur.fetchone()

        if row is None:
            return None
        return self._to_record(row)

    def create(
        self, conn: psycopg.Connection[Any], filename: str, params: SstParams
    ) -> DialogFileRecord:
        """Insert a new file row. Caller commits."""
        with conn.cursor(row_factory=dict_row) as cur:
            cur.execute(
                """
                INSERT INTO dialog_files (filename, addon, source_lang, dest_lang, version)
                VALUES (%s, %s, %s, %s, %s)
                RETURNING id, filename, addon, source_lang, dest_lang, version
                """,
                (filename, params.addon, params.source, params.dest, params.version),
            )
            row = cur.fetchone()

        if row is None:
            raise RuntimeError(f"Insert of dialog file {filename} returned no row")
        return self._to_record(row)

    def update_params(
        self, conn: psycopg.Connection[Any], file_id: int, params: SstParams
    ) -> None:
        """Overwrite the Params columns of an existing file row. Caller commits."""
        conn.execute(
            """
            UPDATE dialog_files
            SET addon = %s, source_lang = %s, dest_lang = %s, version = %s
            WHERE id = %s
            """,
            (params.addon, params.source, params.dest, params.version, file_id),
        )

    def list_all(self) -> list[DialogFileRecord]:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, filename, addon, source_lang, dest_lang, version
                    FROM dialog_files
                    ORDER BY id
                    """
                )
                rows = cur.fetchall()

        return [self._to_record(row) for row in rows]

    @staticmethod
    def _to_record(row: dict[str, Any]) -> DialogFileRecord:
        return DialogFileRecord(
            id=row["id"],
            filename=row["filename"],
            addon=row["addon"],
            source_lang=row["source_lang"],
            dest_lang=row["dest_lang"],
            version=row["version"],
        )
