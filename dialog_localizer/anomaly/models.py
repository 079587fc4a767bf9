from dataclasses import dataclass, field
from enum import Enum


class AnomalyTag(str, Enum):
    """Review flags raised on a (source, dest) pair."""

    MISSING = "missing"  # dest is null/empty
    SAME = "same"  # dest == source
    DLC = "dlc"  # source references DLC content
    TECHNICAL = "tech"  # source looks like an internal identifier
    PUNCTUATION = "punct"  # < > " differ between source and dest


SAMPLED_TAGS: tuple[AnomalyTag, ...] = (
    AnomalyTag.DLC,
    AnomalyTag.TECHNICAL,
    AnomalyTag.PUNCTUATION,
)


@dataclass
class AnomalyReport:
    """Aggregated result of scanning the dialog strings table."""

    total: int = 0
    anomalies: int = 0
    counts: dict[AnomalyTag, int] = field(
        default_factory=lambda: {tag: 0 for tag in AnomalyTag}
    )
    samples: dict[AnomalyTag, list[str]] = field(
        default_factory=lambda: {tag: [] for tag in SAMPLED_TAGS}
    )
