from pathlib import Path

from dialog_localizer.database.models import DialogFileRecord, DialogStringRecord
from dialog_localizer.database.repositories.dialog_files_repository import DialogFilesRepository
from dialog_localizer.database.repositories.dialog_strings_repository import (
    DialogStringsRepository,
)
from dialog_localizer.logging.logger import Log
from dialog_localizer.sst.models import SstDocument, SstParams, SstString
from dialog_localizer.sst.writer import write_sst_file


def to_document(file: DialogFileRecord, strings: list[DialogStringRecord]) -> SstDocument:
    return SstDocument(
        params=SstParams(
            addon=file.addon,
            source=file.source_lang,
            dest=file.dest_lang,
            version=file.version,
        ),
        strings=[
            SstString(
                s_id=s.s_id,
                list_id=s.list_id or "0",
                source=s.source or "",
                dest=s.dest or "",
            )
            for s in strings
        ],
    )


class ExportProcessor:
    """Writes every stored file back out as SST XML."""

    def __init__(
        self,
        files_repo: DialogFilesRepository,
        strings_repo: DialogStringsRepository,
        export_dir: Path,
    ) -> None:
        self._files_repo = files_repo
        self._strings_repo = strings_repo
        self._export_dir = export_dir

    def run(self) -> list[Path]:
        self._export_dir.mkdir(parents=True, exist_ok=True)
        written: list[Path] = []
        for file in self._files_repo.list_all():
            Log.info(f"Exporting {file.filename}...")
            strings = self._strings_repo.list_by_file(file.id)
            path = self._export_dir / file.filename
            write_sst_file(path, to_document(file, strings))
            written.append(path)
        Log.info(f"Exported {len(written)} files to {self._export_dir}")
        return written
