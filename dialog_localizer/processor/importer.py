from pathlib import Path

from dialog_localizer.database.connection import get_connection
from dialog_localizer.database.repositories.dialog_files_repository import DialogFilesRepository
from dialog_localizer.database.repositories.dialog_strings_repository import (
    DialogStringsRepository,
)
from dialog_localizer.logging.logger import Log
from dialog_localizer.processor.exceptions import ImportDirectoryNotFoundError
from dialog_localizer.processor.models import ImportResult
from dialog_localizer.sst.exceptions import SstFormatError
from dialog_localizer.sst.models import SstDocument
from dialog_localizer.sst.reader import read_sst_file


class ImportProcessor:
    """Loads SST XML string tables into dialog_files / dialog_strings."""

    def __init__(
        self,
        files_repo: DialogFilesRepository,
        strings_repo: DialogStringsRepository,
        raw_strings_dir: Path,
    ) -> None:
        self._files_repo = files_repo
        self._strings_repo = strings_repo
        self._raw_strings_dir = raw_strings_dir

    def run(self) -> list[ImportResult]:
        """Import every *.xml file of the raw strings directory, in name order.

        Files that are not valid SST XML are logged and skipped.

        Raises:
            ImportDirectoryNotFoundError: if the directory does not exist.
        """
        if not self._raw_strings_dir.is_dir():
            raise ImportDirectoryNotFoundError(
                f"Raw strings directory not found: {self._raw_strings_dir}"
            )

        results: list[ImportResult] = []
        for path in sorted(self._raw_strings_dir.glob("*.xml")):
            Log.info(f"Processing {path}...")
            try:
                document = read_sst_file(path)
            except SstFormatError as exc:
                Log.error(f"Skipping {path.name}: {exc}")
                continue
            results.append(self.import_document(path.name, document))

        Log.info(f"Imported {len(results)} files")
        return results

    def import_document(self, filename: str, document: SstDocument) -> ImportResult:
        """Create or replace one file and all of its strings, atomically."""
        with get_connection() as conn:
            with conn.transaction():
                existing = self._files_repo.find_by_filename(conn, filename)
                if existing is not None:
                    Log.info(f"Updating existing file record for {filename}")
                    self._files_repo.update_params(conn, existing.id, document.params)
                    self._strings_repo.delete_by_file(conn, existing.id)
                    file_id = existing.id
                else:
                    Log.info(f"Creating new file record for {filename}")
                    file_id = self._files_repo.create(conn, filename, document.params).id
                self._strings_repo.insert_many(conn, file_id, document.strings)

        Log.info(f"Imported {len(document.strings)} strings from {filename}")
        return ImportResult(
            filename=filename,
            strings=len(document.strings),
            created=existing is None,
        )
