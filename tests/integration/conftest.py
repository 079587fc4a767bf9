import os
from collections.abc import Generator
from typing import Any

import psycopg
import pytest

from dialog_localizer.config.settings import Settings
from dialog_localizer.database.connection import close_pool, get_connection, init_pool
from dialog_localizer.database.schema import clear_all, init_schema


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "dialog_localizer_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        init_schema()
    except Exception as e:
        close_pool()
        pytest.skip(
            f"PostgreSQL test DB not available: {e}. "
            "Set DB_* env to point at a disposable database"
        )
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def clean_db(integration_pool: None) -> Generator[None, None, None]:
    clear_all()
    yield
    clear_all()


@pytest.fixture
def db_conn(clean_db: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn
