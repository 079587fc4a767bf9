"""Heuristic anomaly detection for translated dialog strings.

Each heuristic is an independent predicate; :func:`classify` combines
them into a tag set. DLC and technical-id checks look at the source only
and are additive to the dest-dependent tags.
"""

import re

from dialog_localizer.anomaly.models import AnomalyTag

_DLC_RE = re.compile(r"DLC\d+", re.IGNORECASE)
_UPPER_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
_NON_CRITICAL_RE = re.compile(r'[^<>"]')


def classify(source: str, dest: str | None) -> set[AnomalyTag]:
    tags: set[AnomalyTag] = set()

    if not dest:
        tags.add(AnomalyTag.MISSING)
    elif source == dest:
        tags.add(AnomalyTag.SAME)
    elif is_punctuation_mismatch(source, dest):
        tags.add(AnomalyTag.PUNCTUATION)

    if is_dlc(source):
        tags.add(AnomalyTag.DLC)
    if is_technical(source):
        tags.add(AnomalyTag.TECHNICAL)

    return tags


def is_dlc(text: str) -> bool:
    """Matches "DLC01...", "dlc2 ...", or anything starting with "DLC"."""
    return bool(_DLC_RE.search(text)) or text.startswith("DLC")


def is_technical(text: str) -> bool:
    """Looks like an internal id, e.g. "FemaleHeadWoodElfVampire" or "MaleEyes_01".

    No spaces, at least one upper-case letter, and a digit, an underscore or
    several upper-case letters.
    """
    if " " in text:
        return False

    upper_count = len(_UPPER_RE.findall(text))
    if upper_count == 0:
        return False

    return bool(_DIGIT_RE.search(text)) or "_" in text or upper_count > 1


def is_punctuation_mismatch(source: str, dest: str) -> bool:
    """Compare only < > " which carry inline tags and quoted speech."""
    if not dest:
        return False
    return _critical_punctuation(source) != _critical_punctuation(dest)


def _critical_punctuation(text: str) -> str:
    return _NON_CRITICAL_RE.sub("", text)
