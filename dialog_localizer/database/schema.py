from dialog_localizer.database.connection import get_connection
from dialog_localizer.logging.logger import Log

SCHEMA_STATEMENTS: tuple[str, ...] = (
    """
    CREATE TABLE IF NOT EXISTS dialog_files (
        id SERIAL PRIMARY KEY,
        filename TEXT NOT NULL UNIQUE,
        addon TEXT,
        source_lang TEXT,
        dest_lang TEXT,
        version INTEGER
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS dialog_strings (
        id SERIAL PRIMARY KEY,
        file_id INTEGER NOT NULL REFERENCES dialog_files (id),
        s_id TEXT NOT NULL,
        list_id TEXT DEFAULT '0',
        source TEXT,
        dest TEXT,
        masked_source TEXT
    )
    """,
    "CREATE INDEX IF NOT EXISTS dialog_strings_file_id_idx ON dialog_strings (file_id)",
    """
    CREATE TABLE IF NOT EXISTS glossary (
        id TEXT PRIMARY KEY,
        term TEXT NOT NULL UNIQUE,
        category TEXT
    )
    """,
    "CREATE UNIQUE INDEX IF NOT EXISTS glossary_term_lower_idx ON glossary (lower(term))",
)


def init_schema() -> None:
    """Create tables and indexes that do not exist yet."""
    with get_connection() as conn:
        with conn.cursor() as cur:
            for statement in SCHEMA_STATEMENTS:
                cur.execute(statement)
        conn.commit()
    Log.info("Database schema is up to date")


def clear_all() -> None:
    """Delete every string, file and glossary row in one transaction."""
    with get_connection() as conn:
        with conn.transaction():
            Log.info("Deleting strings...")
            conn.execute("DELETE FROM dialog_strings")
            Log.info("Deleting files...")
            conn.execute("DELETE FROM dialog_files")
            Log.info("Deleting glossary...")
            conn.execute("DELETE FROM glossary")
    Log.info("Database cleared")
