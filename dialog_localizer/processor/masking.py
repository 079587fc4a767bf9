from collections.abc import Callable, Iterable

from dialog_localizer.database.connection import get_connection
from dialog_localizer.database.models import DialogStringRecord, StringUpdate
from dialog_localizer.database.repositories.dialog_strings_repository import (
    DialogStringsRepository,
)
from dialog_localizer.database.repositories.glossary_repository import GlossaryRepository
from dialog_localizer.glossary.loader import GlossaryLoader, assign_ids, generate_term_id
from dialog_localizer.glossary.matcher import GlossaryMatcher
from dialog_localizer.glossary.provider import GlossaryMatcherProvider
from dialog_localizer.logging.logger import Log
from dialog_localizer.processor.models import MaskingStats
from dialog_localizer.processor.progress import ProgressLogger


def plan_masking_updates(
    records: Iterable[DialogStringRecord],
    matcher: GlossaryMatcher,
    progress: ProgressLogger | None = None,
) -> tuple[list[StringUpdate], int]:
    """Compute masked_source (and glossary auto-fill of dest) for each record.

    A string that is itself a glossary term is not translated: its dest is
    set to the source. Only records where something changed are returned.

    Returns:
        (updates, autofilled_count)
    """
    updates: list[StringUpdate] = []
    autofilled = 0

    for index, record in enumerate(records):
        if progress is not None:
            progress.tick(index)
        if not record.source:
            continue

        source = record.source
        dest = record.dest
        changed = False

        if matcher.is_term(source) and dest != source:
            dest = source
            autofilled += 1
            changed = True

        masked = matcher.mask(source)
        if masked != record.masked_source:
            changed = True

        if changed:
            updates.append(StringUpdate(id=record.id, dest=dest, masked_source=masked))

    return updates, autofilled


class MaskingProcessor:
    """Refreshes the glossary and masks every dialog string.

    Pipeline: load term lists -> build matcher -> mask strings -> store the
    glossary and the changed rows in one transaction -> publish the matcher.
    Stored masked text only ever references ids present in the glossary.
    """

    def __init__(
        self,
        loader: GlossaryLoader,
        glossary_repo: GlossaryRepository,
        strings_repo: DialogStringsRepository,
        matcher_provider: GlossaryMatcherProvider,
        id_factory: Callable[[], str] = generate_term_id,
    ) -> None:
        self._loader = loader
        self._glossary_repo = glossary_repo
        self._strings_repo = strings_repo
        self._matcher_provider = matcher_provider
        self._id_factory = id_factory

    def run(self) -> MaskingStats:
        Log.info("Starting masking process")

        # Step 1: Load terms and assign fresh ids
        terms = assign_ids(self._loader.load(), self._id_factory)
        self._matcher_provider.invalidate()
        matcher = GlossaryMatcher(terms)
        if len(matcher) == 0:
            Log.warning("Glossary is empty, masked text will equal source text")

        # Step 2: Mask all strings
        records = self._strings_repo.list_all()
        Log.info(f"Processing {len(records)} strings...")
        progress = ProgressLogger(len(records), label="Masking")
        updates, autofilled = plan_masking_updates(records, matcher, progress)
        Log.info(
            f"Masking complete in {progress.elapsed():.1f}s, "
            f"{len(updates)} records to update ({autofilled} auto-filled)"
        )

        # Step 3: Persist glossary and strings together
        Log.info(f"Resetting glossary table with {len(terms)} unique terms")
        with get_connection() as conn:
            with conn.transaction():
                self._glossary_repo.replace_all(conn, terms)
                if updates:
                    self._strings_repo.apply_masking(conn, updates)
        Log.info(f"Committed glossary and {len(updates)} string updates")

        # Step 4: Publish the matcher matching the stored ids
        self._matcher_provider.install(matcher)

        return MaskingStats(
            glossary_terms=len(matcher),
            strings_scanned=len(records),
            strings_updated=len(updates),
            autofilled=autofilled,
        )
