from dataclasses import dataclass


@dataclass
class DialogFileRecord:
    """Represents a row from the dialog_files table."""

    id: int
    filename: str
    addon: str | None = None
    source_lang: str | None = None
    dest_lang: str | None = None
    version: int | None = None


@dataclass
class DialogStringRecord:
    """Represents a row from the dialog_strings table."""

    id: int
    file_id: int
    s_id: str
    list_id: str | None = "0"
    source: str | None = None
    dest: str | None = None
    masked_source: str | None = None


@dataclass(frozen=True)
class StringUpdate:
    """Pending masking result for one dialog string."""

    id: int
    dest: str | None
    masked_source: str
