from collections.abc import Callable, Iterable
from datetime import datetime, timezone

from dialog_localizer.database.models import DialogStringRecord
from dialog_localizer.database.repositories.dialog_strings_repository import (
    DialogStringsRepository,
)
from dialog_localizer.glossary.provider import GlossaryMatcherProvider
from dialog_localizer.logging.logger import Log
from dialog_localizer.notifications.base import (
    COLOR_FAILURE,
    COLOR_INFO,
    COLOR_PROGRESS,
    COLOR_SUCCESS,
    BaseNotifier,
)
from dialog_localizer.processor.models import TranslationStats
from dialog_localizer.translation.base import BaseTranslator
from dialog_localizer.translation.translator import preview


def group_by_text(
    records: Iterable[DialogStringRecord],
    mask: Callable[[str], str] | None = None,
) -> tuple[dict[str, list[DialogStringRecord]], int]:
    """Group records by the text that will be sent for translation.

    The key is masked_source when present. Records that were never masked
    are keyed by *mask* applied to their source, or the raw source when no
    *mask* is given. Records with a blank source are skipped.

    Returns:
        (groups in first-seen order, skipped_count)
    """
    groups: dict[str, list[DialogStringRecord]] = {}
    skipped = 0
    for record in records:
        if not record.source or not record.source.strip():
            skipped += 1
            continue
        if record.masked_source:
            key = record.masked_source
        elif mask is not None:
            key = mask(record.source)
        else:
            key = record.source
        groups.setdefault(key, []).append(record)
    return groups, skipped


class TranslationProcessor:
    """Translates every untranslated string once per unique masked text.

    Pipeline per unique text: translate -> unmask -> store on every record
    sharing that text. A failure on one text is counted and skipped.
    """

    def __init__(
        self,
        translator: BaseTranslator,
        strings_repo: DialogStringsRepository,
        matcher_provider: GlossaryMatcherProvider,
        notifier: BaseNotifier,
        *,
        notify_interval_seconds: int = 60,
        notify_every_items: int = 100,
        now: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self._translator = translator
        self._strings_repo = strings_repo
        self._matcher_provider = matcher_provider
        self._notifier = notifier
        self._notify_interval_seconds = notify_interval_seconds
        self._notify_every_items = max(1, notify_every_items)
        self._now = now

    def run(self) -> TranslationStats:
        try:
            return self._run()
        except Exception as exc:
            Log.exception(f"Translation run failed: {exc}")
            self._notifier.notify(
                "Translation Failed",
                f"Fatal error occurred: {exc}",
                color=COLOR_FAILURE,
            )
            raise

    def _run(self) -> TranslationStats:
        Log.info("Starting translation process")
        matcher = self._matcher_provider.current

        records = self._strings_repo.list_untranslated()
        if not records:
            Log.info("No untranslated strings found")
            return TranslationStats(started_at=self._now(), last_notified_at=self._now())
        Log.info(f"Found {len(records)} total untranslated strings")

        unmasked = sum(1 for r in records if r.source and r.source.strip() and not r.masked_source)
        if unmasked:
            Log.warning(
                f"{unmasked} strings have no masked source (imported after the last mask run), "
                "masking them with the current glossary"
            )
        groups, skipped = group_by_text(records, matcher.mask)
        Log.info(f"Skipped (empty source): {skipped}")
        Log.info(f"Unique texts to translate: {len(groups)}")

        started = self._now()
        stats = TranslationStats(
            total_unique_texts=len(groups),
            total_records=sum(len(group) for group in groups.values()),
            skipped_empty_source=skipped,
            started_at=started,
            last_notified_at=started,
        )
        self._notifier.notify(
            "Translation Started",
            "Starting Skyrim dialog translation process.",
            stats,
            COLOR_INFO,
        )

        for index, (text, group) in enumerate(groups.items(), start=1):
            Log.info(f'[{index}/{len(groups)}] Source: "{preview(text)}"')
            Log.info(f"  Records with same source: {len(group)}")
            try:
                final_text = self._translate_one(text, matcher.unmask)
                self._strings_repo.update_dest_many([r.id for r in group], final_text)
                Log.info(f"  Saved to {len(group)} record(s)")
                stats.success_count += 1
                stats.copied_count += len(group) - 1
            except Exception as exc:
                Log.error(f"  Error processing: {exc}")
                stats.error_count += 1

            self._maybe_notify_progress(stats)

        self._notify_completion(stats)
        self._log_summary(stats)
        return stats

    def _translate_one(self, text: str, unmask: Callable[[str], str]) -> str:
        translated_masked = self._translator.translate(text)
        Log.debug(f"  Translated (masked): {translated_masked}")
        final_text = unmask(translated_masked)
        Log.debug(f"  Unmasked: {final_text}")
        return final_text

    def _maybe_notify_progress(self, stats: TranslationStats) -> None:
        now = self._now()
        by_time = (now - stats.last_notified_at).total_seconds() >= self._notify_interval_seconds
        by_count = stats.processed % self._notify_every_items == 0
        if not (by_time or by_count):
            return
        stats.last_notified_at = now
        self._notifier.notify(
            "Translation Progress",
            "Translation is in progress...",
            stats,
            COLOR_PROGRESS,
        )

    def _notify_completion(self, stats: TranslationStats) -> None:
        if stats.error_count == 0:
            title, color = "Translation Complete", COLOR_SUCCESS
        else:
            title, color = "Translation Complete (with errors)", COLOR_FAILURE
        self._notifier.notify(title, "Translation process has finished.", stats, color)

    @staticmethod
    def _log_summary(stats: TranslationStats) -> None:
        Log.info("--- Summary ---")
        Log.info(f"Unique texts translated: {stats.success_count}")
        Log.info(f"Records updated via copy: {stats.copied_count}")
        Log.info(f"Total records updated: {stats.records_updated}")
        Log.info(f"Errors: {stats.error_count}")
