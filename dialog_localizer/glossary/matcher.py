"""Longest-match glossary masking.

Processing flow:
1. Build: sort terms by descending length, escape each one, wrap it in
   word boundaries and join everything into a single case-insensitive
   alternation. Keep a lower-cased term -> (id, category) lookup and a
   placeholder -> term cache next to the pattern.
2. Mask: replace every non-overlapping match, left to right, with the
   term's "[Category_id]" placeholder.
3. Unmask: replace every "[Category_id]" token found in the cache with the
   original term; unknown tokens stay in place.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar

from dialog_localizer.glossary.models import GlossaryTerm

PLACEHOLDER_RE: re.Pattern[str] = re.compile(r"\[[A-Za-z]+_[a-z0-9]+\]")


@dataclass(frozen=True)
class TermInfo:
    id: str
    category: str


def unmask_text(text: str, cache: Mapping[str, str]) -> str:
    """Restore glossary terms from placeholders in *text*.

    Tokens missing from *cache* are left verbatim so content is never
    dropped. Bracketed text that happens to follow the placeholder grammar
    is treated as a placeholder.
    """
    if not text:
        return text
    return PLACEHOLDER_RE.sub(lambda m: cache.get(m.group(0)) or m.group(0), text)


class GlossaryMatcher:
    """Immutable matcher built once from a glossary snapshot.

    Safe to share between callers; nothing is mutated after construction.
    Build a new instance to pick up glossary changes.
    """

    _FLAGS: ClassVar[int] = re.IGNORECASE

    def __init__(self, terms: Iterable[GlossaryTerm]) -> None:
        ordered = sorted(
            (t for t in terms if t.term),
            key=lambda t: len(t.term),
            reverse=True,
        )

        lookup: dict[str, TermInfo] = {}
        placeholders: dict[str, str] = {}
        for t in ordered:
            lookup.setdefault(t.term.lower(), TermInfo(id=t.id, category=t.category))
            placeholders.setdefault(t.placeholder, t.term)

        self._lookup: Mapping[str, TermInfo] = MappingProxyType(lookup)
        self._placeholders: Mapping[str, str] = MappingProxyType(placeholders)
        self._pattern: re.Pattern[str] | None = self._compile([t.term for t in ordered])

    @classmethod
    def _compile(cls, ordered_terms: list[str]) -> re.Pattern[str] | None:
        if not ordered_terms:
            return None
        alternation = "|".join(rf"\b{re.escape(term)}\b" for term in ordered_terms)
        return re.compile(alternation, cls._FLAGS)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def lookup(self) -> Mapping[str, TermInfo]:
        """Lower-cased term -> (id, category)."""
        return self._lookup

    @property
    def placeholder_cache(self) -> Mapping[str, str]:
        """Placeholder token -> original term."""
        return self._placeholders

    def __len__(self) -> int:
        return len(self._lookup)

    def is_term(self, text: str) -> bool:
        """True if the whole of *text* is a glossary term (case-insensitive)."""
        return text.lower() in self._lookup

    def mask(self, text: str) -> str:
        """Replace whole-word glossary terms in *text* with placeholders."""
        if not text or self._pattern is None:
            return text
        return self._pattern.sub(self._placeholder_for, text)

    def unmask(self, text: str) -> str:
        """Reverse :meth:`mask` using this matcher's placeholder cache."""
        return unmask_text(text, self._placeholders)

    def _placeholder_for(self, match: re.Match[str]) -> str:
        matched = match.group(0)
        info = self._lookup.get(matched.lower())
        if info is None:
            return matched
        return f"[{info.category}_{info.id}]"
