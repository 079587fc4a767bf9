from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from psycopg.conninfo import conninfo_to_dict

from dialog_localizer.config.settings import Settings
from dialog_localizer.database import connection
from dialog_localizer.logging.logger import Log


class TestBuildConninfo:
    def test_includes_all_settings(self) -> None:
        settings = Settings(
            db_host="db.local",
            db_port=5433,
            db_database="strings",
            db_username="translator",
            db_password="p@ss word",
        )
        params = conninfo_to_dict(connection.build_conninfo(settings))
        assert params == {
            "host": "db.local",
            "port": "5433",
            "dbname": "strings",
            "user": "translator",
            "password": "p@ss word",
        }


class TestPool:
    def test_get_connection_without_pool_raises(self) -> None:
        connection.close_pool()
        with pytest.raises(RuntimeError, match="not initialized"):
            with connection.get_connection():
                pass

    def test_init_pool_closes_pool_when_wait_fails(self) -> None:
        pool = MagicMock()
        pool.wait.side_effect = TimeoutError("no db")
        with patch.object(connection, "ConnectionPool", return_value=pool) as pool_cls:
            with pytest.raises(TimeoutError):
                connection.init_pool(Settings(db_pool_max_size=2))
        assert pool_cls.call_args.kwargs["max_size"] == 2
        pool.close.assert_called_once_with()
        with pytest.raises(RuntimeError):
            with connection.get_connection():
                pass

    def test_close_pool_is_idempotent(self) -> None:
        pool = MagicMock()
        with patch.object(connection, "ConnectionPool", return_value=pool):
            connection.init_pool(Settings())
        connection.close_pool()
        connection.close_pool()
        pool.close.assert_called_once_with()


class TestLogConfigure:
    def test_writes_to_log_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "run.log"
        Log.configure("INFO", log_file)
        try:
            Log.info("Masking complete")
            Log.debug("hidden")
        finally:
            Log.configure("INFO")
        content = log_file.read_text(encoding="utf-8")
        assert "[INFO] Masking complete" in content
        assert "hidden" not in content

    def test_reconfigure_does_not_duplicate_handlers(self) -> None:
        Log.configure("DEBUG")
        Log.configure("INFO")
        assert len(Log._logger.handlers) == 1
