from dataclasses import dataclass, field
from datetime import datetime, timezone


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class MaskingStats:
    """Outcome of one masking run."""

    glossary_terms: int = 0
    strings_scanned: int = 0
    strings_updated: int = 0
    autofilled: int = 0


@dataclass
class TranslationStats:
    """Progress counters for one translation run."""

    total_unique_texts: int = 0
    total_records: int = 0
    success_count: int = 0
    copied_count: int = 0
    error_count: int = 0
    skipped_empty_source: int = 0
    started_at: datetime = field(default_factory=_now)
    last_notified_at: datetime = field(default_factory=_now)

    @property
    def processed(self) -> int:
        return self.success_count + self.error_count

    @property
    def records_updated(self) -> int:
        return self.success_count + self.copied_count

    @property
    def progress_percent(self) -> float:
        if self.total_unique_texts == 0:
            return 100.0
        return self.processed / self.total_unique_texts * 100

    def elapsed_seconds(self, now: datetime | None = None) -> int:
        return int(((now or _now()) - self.started_at).total_seconds())


@dataclass
class ImportResult:
    """Outcome of importing one SST XML file."""

    filename: str
    strings: int
    created: bool
