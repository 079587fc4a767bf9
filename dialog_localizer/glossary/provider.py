from dialog_localizer.database.repositories.glossary_repository import GlossaryRepository
from dialog_localizer.glossary.exceptions import GlossaryNotLoadedError
from dialog_localizer.glossary.matcher import GlossaryMatcher
from dialog_localizer.logging.logger import Log


class GlossaryMatcherProvider:
    """Owns the current matcher for a run.

    The matcher is only ever built by an explicit :meth:`rebuild`; there is
    no lazy initialization on first use.
    """

    def __init__(self, glossary_repo: GlossaryRepository) -> None:
        self._glossary_repo = glossary_repo
        self._matcher: GlossaryMatcher | None = None

    @property
    def current(self) -> GlossaryMatcher:
        if self._matcher is None:
            raise GlossaryNotLoadedError("Glossary matcher not built. Call rebuild() first.")
        return self._matcher

    @property
    def is_loaded(self) -> bool:
        return self._matcher is not None

    def rebuild(self) -> GlossaryMatcher:
        """Reload the glossary table and replace the current matcher."""
        return self.install(GlossaryMatcher(self._glossary_repo.list_all()))

    def install(self, matcher: GlossaryMatcher) -> GlossaryMatcher:
        """Make an already built matcher current, e.g. one whose terms were just stored."""
        self._matcher = matcher
        Log.info(f"Glossary matcher built with {len(matcher)} terms")
        return matcher

    def invalidate(self) -> None:
        """Drop the current matcher; placeholders it produced may no longer resolve."""
        self._matcher = None
