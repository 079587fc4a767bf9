from dialog_localizer.glossary.loader import GlossaryLoader, assign_ids
from dialog_localizer.glossary.matcher import GlossaryMatcher, unmask_text
from dialog_localizer.glossary.models import GlossaryTerm, RawTerm

__all__ = [
    "GlossaryLoader",
    "GlossaryMatcher",
    "GlossaryTerm",
    "RawTerm",
    "assign_ids",
    "unmask_text",
]
