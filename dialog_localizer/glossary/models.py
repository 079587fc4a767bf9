from dataclasses import dataclass

DEFAULT_CATEGORY = "Term"


@dataclass(frozen=True)
class GlossaryTerm:
    """A protected term as stored in the glossary table."""

    id: str  # lowercase base-36, e.g. "a1b2c"
    term: str
    category: str = DEFAULT_CATEGORY

    @property
    def placeholder(self) -> str:
        """Token that stands in for the term in masked text, e.g. "[Location_a1b2c]"."""
        return f"[{self.category}_{self.id}]"


@dataclass(frozen=True)
class RawTerm:
    """A term read from a categorized term list, before an id is assigned."""

    term: str
    category: str
